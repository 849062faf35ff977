"""C-compatible entry points for copy and move.

Each entry point takes two NUL-terminated strings and returns a signed status
code (see ``Status``). Exceptions never escape into the foreign caller: they
are logged and collapsed into ``Status.OPERATION_FAILED``, with the message
kept per thread for ``last_error``.
"""

from __future__ import annotations

import ctypes
import threading
from typing import TYPE_CHECKING

from . import config
from .copier import copy_tree
from .logger import logger
from .mover import move_tree
from .types import Status

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

TransferFunc = ctypes.CFUNCTYPE(ctypes.c_int32, ctypes.c_char_p, ctypes.c_char_p)
LastErrorFunc = ctypes.CFUNCTYPE(ctypes.c_int32, ctypes.c_void_p, ctypes.c_size_t)

_state = threading.local()


def _decode(raw: bytes) -> str:
    # A C string ends at its first NUL.
    return raw.split(b"\0", 1)[0].decode(config.ENCODING)


def _set_last_error(message: str | None) -> None:
    _state.message = message


def last_error() -> str | None:
    """Return the message of the calling thread's last failed copy/move, if any."""
    return getattr(_state, "message", None)


def _call(name: str, func: Callable[[str, str], Path], source: bytes | None, destination: bytes | None) -> int:
    _set_last_error(None)
    if source is None or destination is None:
        _set_last_error("null pointer argument")
        return Status.NULL_POINTER
    try:
        src = _decode(source)
        dst = _decode(destination)
    except UnicodeDecodeError as e:
        _set_last_error(f"argument is not valid {config.ENCODING} text: {e}")
        return Status.INVALID_TEXT

    try:
        func(src, dst)
    except Exception as e:
        logger.error(f"Error in {name}", source=src, destination=dst, error=repr(e))
        _set_last_error(str(e) or repr(e))
        return Status.OPERATION_FAILED
    return Status.OK


def tree_copy_c(source: bytes | None, destination: bytes | None) -> int:
    """Copy ``source`` into the ``destination`` directory. Returns a status code."""
    return _call("tree_copy", copy_tree, source, destination)


def tree_move_c(source: bytes | None, destination: bytes | None) -> int:
    """Move ``source`` into the ``destination`` directory. Returns a status code."""
    return _call("tree_move", move_tree, source, destination)


def tree_last_error_c(buf: int | None, size: int) -> int:
    """Copy the last error message into ``buf`` (NUL terminated, truncated to ``size``).

    Returns the full message length in bytes, 0 when there is no error.
    """
    message = last_error()
    if not message:
        return 0
    data = message.encode(config.ENCODING, errors="replace")
    if buf and size > 0:
        n = min(len(data), size - 1)
        ctypes.memmove(buf, data, n)
        ctypes.memset(buf + n, 0, 1)
    return len(data)


# Callback objects must stay referenced for as long as foreign code may call them.
TREE_COPY = TransferFunc(tree_copy_c)
TREE_MOVE = TransferFunc(tree_move_c)
TREE_LAST_ERROR = LastErrorFunc(tree_last_error_c)


def entry_points() -> dict[str, int]:
    """Raw function addresses for handing to foreign code."""
    return {
        "tree_copy_c": ctypes.cast(TREE_COPY, ctypes.c_void_p).value,
        "tree_move_c": ctypes.cast(TREE_MOVE, ctypes.c_void_p).value,
        "tree_last_error_c": ctypes.cast(TREE_LAST_ERROR, ctypes.c_void_p).value,
    }
