"""Report of how a location changed across backup snapshots."""

import logging
from typing import Callable, Optional

import click

from .deduplicator import ChangeDeduplicator
from .filesystem import FilesystemProvider, LocalFilesystem
from .models import ListingConfig, ReportSummary, SnapshotListing
from .walker import BackupTreeWalker
from ..utils.formatters import layout


class SnapshotHistory:
    """Main coordinator: walks the backups and writes the change report."""

    def __init__(self, config: ListingConfig, filesystem: Optional[FilesystemProvider] = None,
                 output: Callable[..., None] = click.echo):
        """Initialize snapshot history.

        Args:
            config: Resolved listing configuration.
            filesystem: Filesystem provider, the local filesystem by default.
            output: Callable receiving each report line.
        """
        self.config = config
        self.walker = BackupTreeWalker(config, filesystem or LocalFilesystem())
        self.deduplicator = ChangeDeduplicator()
        self.output = output
        self.logger = logging.getLogger(__name__)

    def report(self) -> ReportSummary:
        """Write the report for every configured location.

        Returns:
            Summary of what was visited and reported.

        Raises:
            BackupRootError: If the mounted volumes cannot be listed.
            VolumeResolutionError: If a volume cannot be matched to a location.
        """
        config = self.config
        summary = ReportSummary()

        if config.verbose:
            self.output(f"Computer Name: {config.computer_name}")

        volumes = self.walker.list_volumes()
        self.logger.info(f"Found {len(volumes)} mounted volumes in {config.mount_root}")

        for requested in config.locations:
            if len(config.locations) > 1:
                self.output(f"{requested}:")

            location, disk_name = self.walker.locate(requested, volumes)

            for volume in volumes:
                root = self.walker.backup_root(volume)
                if root is None:
                    continue

                summary.volumes += 1
                self.output(f"> {volume.name}")
                stream_key = (volume.name, str(requested))
                self.deduplicator.reset(stream_key)

                for listing in self.walker.snapshot_listings(volume, root, location, disk_name):
                    self._report_listing(listing, stream_key, summary)

        self.logger.info(f"Reported {summary.changes} changes in {summary.snapshots} snapshots")
        return summary

    def _report_listing(self, listing: SnapshotListing, stream_key, summary: ReportSummary):
        if self.config.verbose and listing.disk_name:
            self.output(f"Disk Name: {listing.disk_name}")

        if listing.error is not None:
            summary.errors.append(listing.path)
            self.output(f"An error occurred while reading {listing.path}: {listing.error}")
            return

        if not listing.is_available:
            return

        summary.snapshots += 1
        if not self.deduplicator.should_emit(stream_key, listing.entries):
            return

        summary.changes += 1
        self.output(listing.path)
        for line in layout(listing.entries, self.config.column_width):
            self.output(line)
        self.output("")
