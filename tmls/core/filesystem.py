"""Filesystem access used by the backup tree walker."""

import os
from typing import List, Protocol


class FilesystemProvider(Protocol):
    """Operations the walker and volume resolver need from a filesystem."""

    def list_directory(self, path: str) -> List[str]:
        ...

    def is_traversable(self, path: str) -> bool:
        ...

    def is_symlink(self, path: str) -> bool:
        ...

    def read_link(self, path: str) -> str:
        ...


class LocalFilesystem:
    """Filesystem provider backed by the local operating system."""

    def list_directory(self, path: str) -> List[str]:
        """List entry names in the order the operating system returns them.

        Raises:
            OSError: If the directory cannot be read.
        """
        return os.listdir(path)

    def is_traversable(self, path: str) -> bool:
        """Check that a path exists and can be searched."""
        return os.path.exists(path) and os.access(path, os.X_OK)

    def is_symlink(self, path: str) -> bool:
        """Check whether a path is a symbolic link.

        Raises:
            OSError: If the path attributes cannot be read.
        """
        os.lstat(path)
        return os.path.islink(path)

    def read_link(self, path: str) -> str:
        return os.readlink(path)
