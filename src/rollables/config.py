"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

TABLE_SUFFIX = ".yml"
DEFAULT_PORT = 8001
DEFAULT_HOST = "127.0.0.1"


def _get_default_root() -> Path:
    """Location of the rollable tables, next to the working directory."""
    return Path("../rollables").resolve()


def _get_default_assets_dir() -> Path:
    # Where the client build picks up the baked tables
    return Path("../client/dist/assets/rollables")


@dataclass(slots=True)
class AppConfig:
    root: Path = field(default_factory=_get_default_root)
    assets_dir: Path = field(default_factory=_get_default_assets_dir)
    suffix: str = TABLE_SUFFIX
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        self.root = Path(self.root).resolve()
        self.assets_dir = Path(self.assets_dir)

    def resolve_assets_dir(self, base_dir: Path | None = None) -> Path:
        if self.assets_dir.is_absolute() or base_dir is None:
            return self.assets_dir
        return base_dir / self.assets_dir
