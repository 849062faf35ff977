"""Recursive copy and move of file and directory trees."""

from __future__ import annotations

from .copier import copy_tree
from .ffi import (
    TREE_COPY,
    TREE_LAST_ERROR,
    TREE_MOVE,
    entry_points,
    last_error,
    tree_copy_c,
    tree_last_error_c,
    tree_move_c,
)
from .mover import move_tree
from .paths import EntryKind, SourceNameError, base_name, classify
from .types import Status, TransferResult

__all__ = [
    # copier
    "copy_tree",
    # ffi
    "TREE_COPY",
    "TREE_LAST_ERROR",
    "TREE_MOVE",
    "entry_points",
    "last_error",
    "tree_copy_c",
    "tree_last_error_c",
    "tree_move_c",
    # mover
    "move_tree",
    # paths
    "EntryKind",
    "SourceNameError",
    "base_name",
    "classify",
    # types
    "Status",
    "TransferResult",
]
