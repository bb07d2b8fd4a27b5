"""
tmls - List a directory across Time Machine backup snapshots.

This package walks the backups stored on mounted backup volumes and reports
the contents of a location every time they changed from one snapshot to the
next.
"""

__version__ = "1.0.0"

from .core.history import SnapshotHistory
from .core.walker import BackupTreeWalker
from .core.deduplicator import ChangeDeduplicator

__all__ = ["SnapshotHistory", "BackupTreeWalker", "ChangeDeduplicator"]
