"""Shared fixtures for treeshift tests."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def build_tree(root: Path, files: dict[str, str]) -> None:
    """Create files (and their parent directories) under root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def snapshot(root: Path) -> dict[str, str | None]:
    """Map every path under root to its text content (None for directories)."""
    result: dict[str, str | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return result


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """A/x.txt and A/sub/y.txt, plus an empty B/ to copy or move into."""
    build_tree(tmp_path / "A", {"x.txt": "x content", "sub/y.txt": "y content"})
    (tmp_path / "B").mkdir()
    return tmp_path


@pytest.fixture()
def cross_device_renames(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Make os.rename fail with EXDEV, for directories only or for everything."""

    def install(*, files_too: bool = False) -> None:
        real_rename = os.rename

        def fake_rename(src, dst, *args, **kwargs):  # type: ignore[no-untyped-def]
            if files_too or os.path.isdir(src):
                raise OSError(errno.EXDEV, "Invalid cross-device link", str(src))
            return real_rename(src, dst, *args, **kwargs)

        monkeypatch.setattr(os, "rename", fake_rename)

    return install


skip_if_root = pytest.mark.skipif(
    os.name != "posix" or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on this platform",
)
