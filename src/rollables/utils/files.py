"""Utility helpers for working with the rollables tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator


def iter_content_paths(root: Path, suffix: str) -> Iterator[Path]:
    """Yield files under ``root`` whose name ends with ``suffix``, depth-first.

    Children are visited in the order the filesystem lists them. Directory
    symlinks are not descended into; file symlinks are yielded like files.
    """
    stack = [os.scandir(root)]
    try:
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop().close()
                continue
            if entry.is_dir(follow_symlinks=False):
                stack.append(os.scandir(entry.path))
            elif entry.name.endswith(suffix) and entry.is_file():
                yield Path(entry.path)
    finally:
        for iterator in stack:
            iterator.close()


def is_within(path: str, root: str) -> bool:
    """Return True when ``path`` is ``root`` or lies below it.

    Both arguments must already be canonical (see ``os.path.realpath``).
    """
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def entry_name(path: Path, root: Path, suffix: str) -> str:
    """Turn a content file path into its forward-slash entry identifier."""
    relative = path.relative_to(root).as_posix()
    if suffix and relative.endswith(suffix):
        relative = relative[: -len(suffix)]
    return relative
