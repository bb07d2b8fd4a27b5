"""Formatting utilities for snapshot listings."""

import os
import shutil
import sys
from typing import List, Optional, TextIO


def layout(names: List[str], width: int) -> List[str]:
    """Lay out names in columns like ``ls`` does.

    Every column is as wide as the longest name plus one space. At least
    one name is put on each line, so a width of 0 gives a single column.

    Args:
        names: Names to lay out, in display order.
        width: Total width available.

    Returns:
        Lines of padded names.
    """
    if not names:
        return []

    column_size = max(len(name) for name in names) + 1
    per_line = max(width // column_size, 1)

    lines = []
    line = ""
    for index, name in enumerate(names, 1):
        line += name.ljust(column_size)
        if index % per_line == 0:
            lines.append(line)
            line = ""
    if line:
        lines.append(line)
    return lines


def terminal_width(stream: Optional[TextIO] = None, fallback: int = 0) -> int:
    """Column count of the terminal a stream writes to.

    Args:
        stream: Output stream, standard output by default.
        fallback: Width returned when the stream is not a terminal.

    Returns:
        Number of columns.
    """
    stream = stream or sys.stdout
    try:
        if not stream.isatty():
            return fallback
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return shutil.get_terminal_size((fallback, 0)).columns
