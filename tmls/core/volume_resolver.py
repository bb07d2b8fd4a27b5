"""Match filesystem paths to the mounted volume they live on."""

import logging
import posixpath
from typing import List, Optional, Tuple

from .errors import VolumeResolutionError
from .filesystem import FilesystemProvider
from .models import DEFAULT_MOUNT_ROOT


logger = logging.getLogger(__name__)


def resolve_volume(path: str, volume_names: List[str], filesystem: FilesystemProvider,
                   mount_root: str = DEFAULT_MOUNT_ROOT) -> Optional[Tuple[str, str]]:
    """Find the mounted volume whose link target is the longest prefix of a path.

    Volumes such as the startup disk are exposed under the mount root as
    symbolic links to their real mount point. Nested mounts are
    disambiguated by keeping the longest matching target.

    Args:
        path: Absolute path to resolve.
        volume_names: Entries of the mount root.
        filesystem: Filesystem provider.
        mount_root: Directory holding the mounted volumes.

    Returns:
        Tuple of (volume name, link target), or None if nothing matches.

    Raises:
        VolumeResolutionError: If a volume's attributes or link cannot be read.
    """
    best = None
    for volume in volume_names:
        volume_path = posixpath.join(mount_root, volume)
        try:
            if not filesystem.is_symlink(volume_path):
                continue
            target = filesystem.read_link(volume_path)
        except OSError as e:
            raise VolumeResolutionError(volume_path, e) from e

        if path.startswith(target) and (best is None or len(target) > len(best[1])):
            best = (volume, target)

    if best:
        logger.debug(f"Resolved {path} to volume {best[0]} ({best[1]})")
    return best


def resolve_disk_name(path: str, volume_names: List[str], filesystem: FilesystemProvider,
                      mount_root: str = DEFAULT_MOUNT_ROOT) -> str:
    """Name of the mounted volume holding a path, or an empty string."""
    match = resolve_volume(path, volume_names, filesystem, mount_root)
    return match[0] if match else ""
