"""Shared cross-cutting code: logging setup and small utilities."""
