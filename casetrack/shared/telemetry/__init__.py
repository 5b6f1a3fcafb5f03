"""Telemetry: logging setup."""

from casetrack.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
