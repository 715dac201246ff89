"""Shared fixtures: a small rollables tree on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

GOBLIN = "name: Goblin\nroll: 1d6\n"
ORC = "name: Orc\r\nroll: 2d4\r\n"
NAMES = "- Alda\n- Bram\n"


@pytest.fixture()
def rollables_root(tmp_path: Path) -> Path:
    """Create monsters/, npcs/ and a nested table under a fresh root."""
    root = tmp_path / "tables"
    (root / "monsters").mkdir(parents=True)
    (root / "npcs" / "villagers").mkdir(parents=True)

    (root / "monsters" / "goblin.yml").write_text(GOBLIN, encoding="utf-8")
    (root / "monsters" / "orc.yml").write_bytes(ORC.encode("utf-8"))
    (root / "npcs" / "readme.txt").write_text("not a table", encoding="utf-8")
    (root / "npcs" / "villagers" / "names.yml").write_text(NAMES, encoding="utf-8")
    return root
