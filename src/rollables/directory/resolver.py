"""Directory index and entry resolution for rollable tables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Sequence

from rollables.config import TABLE_SUFFIX
from rollables.utils.files import entry_name, is_within, iter_content_paths

LOGGER = logging.getLogger(__name__)


class ResolverError(Exception):
    """Base class for entry resolution failures."""


class OutOfBoundsError(ResolverError, ValueError):
    """The requested entry resolves outside the root directory."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"entry {entry!r} out of bounds")
        self.entry = entry


class NotFoundError(ResolverError, FileNotFoundError):
    """No content file exists for the requested entry."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"entry {entry!r} not found")
        self.entry = entry


def normalize_filters(value: str | Sequence[str] | None) -> List[str]:
    """Coerce a query ``filter`` value into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def filter_entries(entries: Iterable[str], filters: Sequence[str]) -> List[str]:
    """Keep entries containing at least one of ``filters``; all when empty."""
    if not filters:
        return list(entries)
    return [entry for entry in entries if any(f in entry for f in filters)]


class DirectoryResolver:
    """Lists and reads content files below a fixed root directory."""

    def __init__(self, root: Path | str, *, suffix: str = TABLE_SUFFIX) -> None:
        self._root = os.path.realpath(os.fspath(root))
        self.suffix = suffix

    @property
    def root(self) -> Path:
        return Path(self._root)

    def index(self) -> List[str]:
        """Walk the root and return one identifier per content file."""
        root = self.root
        entries: List[str] = []
        for path in iter_content_paths(root, self.suffix):
            if not is_within(os.path.realpath(path), self._root):
                LOGGER.debug("Skipping %s: links outside the root", path)
                continue
            entries.append(entry_name(path, root, self.suffix))
        LOGGER.debug("Indexed %d entries", len(entries))
        return entries

    def retrieve(self, entry: str) -> str:
        """Return the raw text of ``entry``.

        Raises ``OutOfBoundsError`` when the entry resolves outside the root
        and ``NotFoundError`` when there is no such content file.
        """
        relative = entry.lstrip("/")
        candidate = os.path.join(self._root, relative) + self.suffix
        resolved = os.path.realpath(candidate)
        if not is_within(resolved, self._root):
            raise OutOfBoundsError(entry)

        try:
            with Path(resolved).open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as exc:
            raise NotFoundError(entry) from exc
