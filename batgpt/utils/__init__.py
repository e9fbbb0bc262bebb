"""Utility functions."""

from .terminal import console, configure_logging, create_table, format_outcome_color

__all__ = ["console", "configure_logging", "create_table", "format_outcome_color"]
