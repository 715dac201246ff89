"""Core rollables data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class BuildResult:
    """Artifacts written by one static build."""

    index_file: Path
    source_dir: Path | None
    bundle_file: Path | None
    entry_count: int
