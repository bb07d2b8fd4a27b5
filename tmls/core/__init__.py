"""Core listing functionality."""

from .deduplicator import ChangeDeduplicator
from .errors import BackupRootError, TmlsError, VolumeResolutionError
from .filesystem import FilesystemProvider, LocalFilesystem
from .history import SnapshotHistory
from .models import BackupVolume, ListingConfig, ReportSummary, ResolvedLocation, SnapshotListing
from .volume_resolver import resolve_disk_name, resolve_volume
from .walker import BackupTreeWalker, filter_hidden

__all__ = [
    "BackupTreeWalker", "ChangeDeduplicator", "SnapshotHistory",
    "FilesystemProvider", "LocalFilesystem",
    "BackupVolume", "ListingConfig", "ReportSummary", "ResolvedLocation", "SnapshotListing",
    "TmlsError", "BackupRootError", "VolumeResolutionError",
    "resolve_disk_name", "resolve_volume", "filter_hidden",
]
