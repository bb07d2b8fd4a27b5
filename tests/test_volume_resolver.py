import os
from pathlib import Path

import pytest

from tmls.core.errors import VolumeResolutionError
from tmls.core.filesystem import LocalFilesystem
from tmls.core.volume_resolver import resolve_disk_name, resolve_volume


def test_longest_link_target_wins(fs) -> None:
    fs.symlink("/Volumes/Outer", "/disk1")
    fs.symlink("/Volumes/Inner", "/disk1/sub")
    fs.mkdir("/Volumes/TimeMachine")

    volumes = fs.list_directory("/Volumes")

    assert resolve_disk_name("/disk1/sub/data", volumes, fs) == "Inner"
    assert resolve_disk_name("/disk1/other", volumes, fs) == "Outer"


def test_order_of_volumes_does_not_matter(fs) -> None:
    fs.symlink("/Volumes/Inner", "/disk1/sub")
    fs.symlink("/Volumes/Outer", "/disk1")

    assert resolve_volume("/disk1/sub/data", ["Inner", "Outer"], fs) == ("Inner", "/disk1/sub")
    assert resolve_volume("/disk1/sub/data", ["Outer", "Inner"], fs) == ("Inner", "/disk1/sub")


def test_no_matching_volume_gives_empty_name(fs) -> None:
    fs.symlink("/Volumes/Data", "/data")
    fs.mkdir("/Volumes/TimeMachine")

    assert resolve_disk_name("/Users/me", ["Data", "TimeMachine"], fs) == ""
    assert resolve_volume("/Users/me", ["Data", "TimeMachine"], fs) is None


def test_unreadable_volume_attributes_propagate(fs) -> None:
    fs.mkdir("/Volumes")
    fs.failing["/Volumes/Broken"] = PermissionError(13, "Permission denied")

    with pytest.raises(VolumeResolutionError) as excinfo:
        resolve_disk_name("/Users/me", ["Broken"], fs)

    assert "/Volumes/Broken" in str(excinfo.value)


def test_resolves_real_symlinks(tmp_path: Path) -> None:
    volumes = tmp_path / "Volumes"
    volumes.mkdir()
    startup = tmp_path / "startup"
    startup.mkdir()
    os.symlink(str(startup), str(volumes / "Macintosh HD"))
    (volumes / "TimeMachine").mkdir()

    name = resolve_disk_name(str(startup / "Users" / "me"), os.listdir(volumes),
                             LocalFilesystem(), str(volumes))

    assert name == "Macintosh HD"
