"""Utility functions for tmls."""

from .environment import short_hostname, working_directory
from .formatters import layout, terminal_width

__all__ = ["layout", "terminal_width", "short_hostname", "working_directory"]
