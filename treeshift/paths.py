"""Path naming and directory entry classification shared by copier and mover."""

from __future__ import annotations

import enum
import errno
import os
import shutil
from pathlib import Path

from . import config


class SourceNameError(OSError):
    """Raised when a source path has no final component to nest under the destination."""

    def __init__(self, source: Path) -> None:
        super().__init__(errno.EINVAL, "Source path has no file name (e.g., root directory)", str(source))


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def base_name(source: Path) -> str:
    """Return the final component of source, raising SourceNameError if there is none."""
    name = source.name
    if name in ("", ".", ".."):
        raise SourceNameError(source)
    return name


def target_for(source: Path, destination: Path) -> Path:
    return destination / base_name(source)


def classify(entry: os.DirEntry[str]) -> EntryKind:
    """Classify a directory entry without following symlinks."""
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def list_entries(directory: Path) -> list[os.DirEntry[str]]:
    """Read the full listing of a directory before any of it is processed."""
    with os.scandir(directory) as it:
        return list(it)


def copy_file(src: Path, dest: Path) -> None:
    """Copy src to exactly dest; an existing directory at dest is an error."""
    if dest.is_dir():
        raise IsADirectoryError(errno.EISDIR, "Destination is a directory", str(dest))
    if config.PRESERVE_METADATA:
        shutil.copy2(src, dest)
    else:
        shutil.copy(src, dest)
