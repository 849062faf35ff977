"""Command-line front end over the C entry points."""

from __future__ import annotations

import json
import os
import sys
from typing import Literal

from .ffi import last_error, tree_copy_c, tree_move_c
from .logger import install_exception_hooks
from .types import Status, TransferResult

_ENTRY_POINTS = {"copy": tree_copy_c, "move": tree_move_c}


def run(operation: Literal["copy", "move"], argv: list[str]) -> TransferResult:
    source, destination = argv
    status = _ENTRY_POINTS[operation](os.fsencode(source), os.fsencode(destination))
    return TransferResult(
        operation=operation,
        source=source,
        destination=destination,
        status=int(status),
        ok=status == Status.OK,
        error=last_error(),
    )


def main(operation: Literal["copy", "move"], argv: list[str] | None = None) -> None:
    install_exception_hooks()
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(f"Usage: {operation}_tree <source> <destination-dir>", file=sys.stderr)
        sys.exit(1)

    result = run(operation, args)
    print(json.dumps(result.model_dump(), indent=2))

    if not result.ok:
        sys.exit(1)


def copy_main() -> None:
    main("copy")


def move_main() -> None:
    main("move")
