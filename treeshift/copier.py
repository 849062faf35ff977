"""Recursive tree copy."""

from __future__ import annotations

import os
from pathlib import Path

from .logger import logger
from .paths import EntryKind, classify, copy_file, list_entries, target_for


def copy_tree(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> Path:
    """Copy a file or directory tree into the destination directory.

    The copy lands at ``destination / basename(source)`` for both files and
    directories. Missing destination directories are created. The source is
    never modified. The first failure aborts the call and is raised as
    ``OSError``; entries copied before it are left in place.

    Returns the path of the copied tree.
    """
    src = Path(source)
    dst = Path(destination)

    if src.is_file():
        target = target_for(src, dst)
        dst.mkdir(parents=True, exist_ok=True)
        copy_file(src, target)
        return target

    _copy_dir(src, dst)
    return target_for(src, dst)


def _copy_dir(src: Path, dst: Path) -> None:
    target = target_for(src, dst)
    entries = list_entries(src)
    target.mkdir(parents=True, exist_ok=True)

    for entry in entries:
        kind = classify(entry)
        entry_path = Path(entry.path)
        if kind is EntryKind.DIRECTORY:
            _copy_dir(entry_path, target)
        elif kind is EntryKind.FILE:
            copy_file(entry_path, target / entry.name)
        else:
            logger.debug("Skipping non-regular entry", path=entry.path)
