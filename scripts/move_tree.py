"""Move a file or directory tree into a destination directory."""

from __future__ import annotations

from treeshift.cli import move_main

if __name__ == "__main__":
    move_main()
