"""casetrack: case management backend for a legal practice."""

__version__ = "1.0.0"
