"""Copy a file or directory tree into a destination directory."""

from __future__ import annotations

from treeshift.cli import copy_main

if __name__ == "__main__":
    copy_main()
