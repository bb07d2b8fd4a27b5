"""Data models for snapshot listings."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional


DEFAULT_MOUNT_ROOT = "/Volumes"
DEFAULT_STORE_NAME = "Backups.backupdb"


@dataclass(frozen=True)
class ResolvedLocation:
    """An absolute location on the backed up disk."""
    path: PurePosixPath

    @classmethod
    def resolve(cls, location: str, working_directory: str) -> "ResolvedLocation":
        """Resolve a location given on the command line.

        Args:
            location: Absolute or relative path.
            working_directory: Directory relative locations are joined to.

        Returns:
            ResolvedLocation with an absolute path.
        """
        path = PurePosixPath(location)
        if not path.is_absolute():
            path = PurePosixPath(working_directory) / path
        return cls(path)

    def relative_to(self, mount_point: str) -> "ResolvedLocation":
        """Return this location rebased on the root of a mount point."""
        relative = self.path.relative_to(PurePosixPath(mount_point))
        return ResolvedLocation(PurePosixPath("/") / relative)

    def inside(self, snapshot_disk: str) -> str:
        """Path of this location inside a snapshot disk directory."""
        parts = self.path.parts[1:]
        if not parts:
            return snapshot_disk
        return str(PurePosixPath(snapshot_disk, *parts))

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class BackupVolume:
    """A mounted volume which may hold a backup store."""
    name: str
    path: str


@dataclass
class SnapshotListing:
    """Contents of a location in one snapshot of one source disk."""
    volume: BackupVolume
    location: ResolvedLocation
    date: str
    disk_name: str
    path: str
    entries: Optional[List[str]] = None
    error: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.entries is not None


@dataclass
class ListingConfig:
    """Fully resolved settings consumed by the walker and report."""
    locations: List[ResolvedLocation]
    computer_name: str = ""
    forced_disk_name: Optional[str] = None
    match_disk: bool = False
    verbose: bool = False
    include_hidden: bool = False
    column_width: int = 0
    mount_root: str = DEFAULT_MOUNT_ROOT
    store_name: str = DEFAULT_STORE_NAME


@dataclass
class ReportSummary:
    """Counters collected while writing a report."""
    volumes: int = 0
    snapshots: int = 0
    changes: int = 0
    errors: List[str] = field(default_factory=list)
