"""Bake the rollables tree into static assets for the client."""

from __future__ import annotations

import json
import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict

from rollables.directory.resolver import DirectoryResolver
from rollables.models import BuildResult

LOGGER = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"
SOURCE_DIRNAME = "source"
BUNDLE_FILENAME = "rollables.json"


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")


class StaticBundleBuilder:
    """Writes the entry index and a copy of the tree into an assets directory."""

    def __init__(self, resolver: DirectoryResolver, assets_dir: Path) -> None:
        self.resolver = resolver
        self.assets_dir = Path(assets_dir)

    @property
    def index_file(self) -> Path:
        return self.assets_dir / INDEX_FILENAME

    @property
    def source_dir(self) -> Path:
        return self.assets_dir / SOURCE_DIRNAME

    @property
    def bundle_file(self) -> Path:
        return self.assets_dir / BUNDLE_FILENAME

    def ensure_assets_dir(self) -> None:
        self.assets_dir.mkdir(parents=True, exist_ok=True)

    def build_index(self) -> list[str]:
        """Write the JSON array of entry identifiers."""
        entries = self.resolver.index()
        _write_json(self.index_file, entries)
        LOGGER.info("Wrote %d entries to %s", len(entries), self.index_file)
        return entries

    def copy_sources(self) -> Path:
        """Mirror every file under the root, whatever its extension.

        Symlinks are copied as links, never followed. A previous copy is
        replaced so files removed from the root do not linger.
        """
        if self.source_dir.exists():
            shutil.rmtree(self.source_dir)
        shutil.copytree(self.resolver.root, self.source_dir, symlinks=True)
        LOGGER.info("Copied %s into %s", self.resolver.root, self.source_dir)
        return self.source_dir

    def build_bundle(self) -> Dict[str, str]:
        """Write a single JSON object mapping each entry to its content."""
        entries = self.resolver.index()
        with ThreadPoolExecutor() as pool:
            contents = list(pool.map(self.resolver.retrieve, entries))
        bundle = dict(zip(entries, contents))
        _write_json(self.bundle_file, bundle)
        LOGGER.info("Bundled %d entries into %s", len(bundle), self.bundle_file)
        return bundle

    def build(self, *, bundle: bool = False) -> BuildResult:
        """Run a full build; ``bundle`` replaces the tree copy with the JSON bundle."""
        self.ensure_assets_dir()
        entries = self.build_index()
        source_dir = None
        bundle_file = None
        if bundle:
            self.build_bundle()
            bundle_file = self.bundle_file
        else:
            source_dir = self.copy_sources()
        return BuildResult(
            index_file=self.index_file,
            source_dir=source_dir,
            bundle_file=bundle_file,
            entry_count=len(entries),
        )
