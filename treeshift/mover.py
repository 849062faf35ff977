"""Recursive tree move with atomic rename fast path."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .logger import logger
from .paths import EntryKind, classify, copy_file, list_entries, target_for


def move_tree(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> Path:
    """Move a file or directory tree into the destination directory.

    A single rename of the whole entry is tried first. When that fails
    (typically across filesystems) each entry is relocated on its own and the
    emptied source directory is removed at the end. The first failure aborts
    the call and is raised as ``OSError``; the source may then be left
    partially moved.

    Returns the new path of the tree.
    """
    src = Path(source)
    dst = Path(destination)

    if src.is_file():
        target = target_for(src, dst)
        dst.mkdir(parents=True, exist_ok=True)
        _move_file(src, target)
        return target

    target = target_for(src, dst)
    _move_dir(src, dst)
    return target


def _move_file(src: Path, dest: Path) -> None:
    try:
        os.rename(src, dest)
    except OSError as e:
        logger.debug("Rename failed, copying file instead", source=str(src), target=str(dest), error=str(e))
        copy_file(src, dest)
        src.unlink()


def _move_dir(src: Path, dst: Path) -> None:
    target = target_for(src, dst)
    # Raises FileNotFoundError before anything is created.
    src.lstat()
    dst.mkdir(parents=True, exist_ok=True)
    try:
        os.rename(src, target)
        return
    except OSError as e:
        logger.debug("Directory rename failed, moving entries one by one", source=str(src), target=str(target), error=str(e))

    entries = list_entries(src)
    target.mkdir(parents=True, exist_ok=True)

    for entry in entries:
        kind = classify(entry)
        entry_path = Path(entry.path)
        if kind is EntryKind.DIRECTORY:
            # The callee appends entry.name to target itself.
            _move_dir(entry_path, target)
        elif kind is EntryKind.FILE:
            _move_file(entry_path, target / entry.name)
        else:
            logger.debug("Skipping non-regular entry", path=entry.path)

    shutil.rmtree(src)
