"""Walk the volume, computer, snapshot date and source disk hierarchy."""

import logging
import posixpath
from typing import Iterator, List, Optional, Tuple

from .errors import BackupRootError
from .filesystem import FilesystemProvider
from .models import BackupVolume, ListingConfig, ResolvedLocation, SnapshotListing
from .volume_resolver import resolve_volume


HIDDEN_PREFIX = "."


def filter_hidden(entries: List[str], include_hidden: bool = False) -> List[str]:
    """Drop hidden entries unless they are explicitly requested."""
    if include_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.startswith(HIDDEN_PREFIX)]


class BackupTreeWalker:
    """Collects the contents of locations across backup snapshots.

    Layout of a backup store::

        <mount root>/<volume>/<store>/<computer>/<date>/<disk><location>

    Snapshot dates are taken in directory listing order. This relies on
    the underlying storage returning snapshot directories in creation
    order; they are never re-sorted.
    """

    def __init__(self, config: ListingConfig, filesystem: FilesystemProvider):
        """Initialize backup tree walker.

        Args:
            config: Resolved listing configuration.
            filesystem: Provider used for every filesystem access.
        """
        self.config = config
        self.filesystem = filesystem
        self.logger = logging.getLogger(__name__)

    def list_volumes(self) -> List[BackupVolume]:
        """List the volumes mounted under the mount root.

        Raises:
            BackupRootError: If the mount root cannot be enumerated.
        """
        mount_root = self.config.mount_root
        try:
            names = self.filesystem.list_directory(mount_root)
        except OSError as e:
            raise BackupRootError(mount_root, e) from e
        return [BackupVolume(name=name, path=posixpath.join(mount_root, name)) for name in names]

    def computer_name_for(self, volume: BackupVolume) -> str:
        """Computer name as spelled in a volume's backup store.

        The configured name is matched case insensitively against the
        store entries and the on-disk spelling wins.
        """
        computer_name = self.config.computer_name
        store = posixpath.join(volume.path, self.config.store_name)
        if not self.filesystem.is_traversable(store):
            return computer_name

        try:
            names = self.filesystem.list_directory(store)
        except OSError as e:
            self.logger.warning(f"Cannot read backup store {store}: {e}")
            return computer_name

        wanted = computer_name.lower()
        for name in names:
            if name.lower() == wanted:
                return name
        return computer_name

    def backup_root(self, volume: BackupVolume) -> Optional[str]:
        """Backup root of the configured computer, or None if not accessible."""
        root = posixpath.join(volume.path, self.config.store_name, self.computer_name_for(volume))
        if not self.filesystem.is_traversable(root):
            self.logger.debug(f"No accessible backups in {root}")
            return None
        return root

    def locate(self, location: ResolvedLocation,
               volumes: List[BackupVolume]) -> Tuple[ResolvedLocation, Optional[str]]:
        """Work out the disk name to use for a location.

        Returns:
            Tuple of (location inside the disk, disk name). The disk name is
            None when it has to be discovered in each snapshot.
        """
        if self.config.forced_disk_name is not None:
            return location, self.config.forced_disk_name
        if not self.config.match_disk:
            return location, None

        match = resolve_volume(str(location), [v.name for v in volumes],
                               self.filesystem, self.config.mount_root)
        if not match:
            self.logger.info(f"No mounted volume matches {location}, discovering disk names")
            return location, None

        disk_name, target = match
        try:
            location = location.relative_to(target)
        except ValueError:
            self.logger.debug(f"{location} is not below {target}, keeping it as is")
        return location, disk_name

    def disk_names(self, root: str, date: str, disk_name: Optional[str] = None) -> List[str]:
        """Source disk names to look at in one snapshot.

        Raises:
            OSError: If the snapshot directory cannot be read.
        """
        if disk_name is not None:
            return [disk_name]
        return self.filesystem.list_directory(posixpath.join(root, date))

    def snapshot_listings(self, volume: BackupVolume, root: str, location: ResolvedLocation,
                          disk_name: Optional[str] = None) -> Iterator[SnapshotListing]:
        """Yield one listing per snapshot date and source disk.

        Listings whose path is not traversable carry no entries. Read
        errors are recorded on the listing and the walk goes on.
        """
        try:
            dates = self.filesystem.list_directory(root)
        except OSError as e:
            self.logger.warning(f"Cannot list snapshots in {root}: {e}")
            yield SnapshotListing(volume, location, "", "", root, error=str(e))
            return

        for date in dates:
            try:
                disk_names = self.disk_names(root, date, disk_name)
            except OSError as e:
                snapshot = posixpath.join(root, date)
                self.logger.warning(f"Cannot list source disks in {snapshot}: {e}")
                yield SnapshotListing(volume, location, date, "", snapshot, error=str(e))
                continue

            for name in disk_names:
                path = location.inside(posixpath.join(root, date, name))
                yield self._read_listing(volume, location, date, name, path)

    def _read_listing(self, volume: BackupVolume, location: ResolvedLocation,
                      date: str, disk_name: str, path: str) -> SnapshotListing:
        listing = SnapshotListing(volume, location, date, disk_name, path)
        if not self.filesystem.is_traversable(path):
            return listing

        try:
            entries = self.filesystem.list_directory(path)
        except OSError as e:
            self.logger.warning(f"Error reading {path}: {e}")
            listing.error = str(e)
            return listing

        listing.entries = filter_hidden(entries, self.config.include_hidden)
        return listing
