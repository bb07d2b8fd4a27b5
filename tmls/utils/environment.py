"""Lookups of the process environment, done once at startup."""

import os
import socket


def short_hostname() -> str:
    """Host name up to the first dot, or an empty string if unavailable."""
    try:
        name = socket.gethostname()
    except OSError:
        return ""
    return name.split(".", 1)[0]


def working_directory() -> str:
    """Logical working directory, preferring the shell's PWD."""
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd):
        return pwd
    return os.getcwd()
