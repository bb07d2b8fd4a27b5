"""Exceptions raised while listing backups."""


class TmlsError(Exception):
    """Base class for fatal listing errors."""


class BackupRootError(TmlsError):
    """The directory holding the mounted backup volumes cannot be read."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Cannot read backup volumes in {path}: {cause}")
        self.path = path
        self.cause = cause


class VolumeResolutionError(TmlsError):
    """A mounted volume's attributes or link target cannot be read."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Cannot resolve mounted volume {path}: {cause}")
        self.path = path
        self.cause = cause
