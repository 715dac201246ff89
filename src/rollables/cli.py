"""Command line interface for rollables."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from rollables.config import AppConfig
from rollables.directory.resolver import DirectoryResolver
from rollables.static.builder import StaticBundleBuilder
from rollables.web.app import create_app


console = Console()
app = typer.Typer(help="Rollables - serve and bake rollable tables")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config(root: Path | None, assets: Path | None = None) -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        root=root if root is not None else defaults.root,
        assets_dir=assets if assets is not None else defaults.assets_dir,
    )


@app.command()
def build(
    root: Path = typer.Option(None, "--root", help="Directory holding the rollable tables"),
    assets: Path = typer.Option(None, "--assets", help="Output assets directory"),
    bundle: bool = typer.Option(
        False, "--bundle", help="Write a single JSON bundle instead of copying the tree"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Write the entry index and copy the tables into the assets directory."""
    _setup_logging(verbose)
    config = _load_config(root, assets)
    resolver = DirectoryResolver(config.root, suffix=config.suffix)
    builder = StaticBundleBuilder(resolver, config.resolve_assets_dir(Path.cwd()))

    result = builder.build(bundle=bundle)
    console.print(
        f"[green]✅ Wrote rollable index file into[/green] {result.index_file.resolve()} "
        f"({result.entry_count} entries)"
    )
    if result.source_dir is not None:
        console.print(f"[green]✅ Copied rollable YAML files into[/green] {result.source_dir.resolve()}")
    if result.bundle_file is not None:
        console.print(f"[green]✅ Wrote rollable bundle into[/green] {result.bundle_file.resolve()}")


@app.command()
def serve(
    root: Path = typer.Option(None, "--root", help="Directory holding the rollable tables"),
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Start the HTTP read API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install it with \"python -m pip install uvicorn\""
        ) from exc

    _setup_logging(verbose)
    config = _load_config(root)
    if not config.root.is_dir():
        console.print(f"[yellow]Warning: root not found at {config.root}, listings will fail.[/yellow]")

    web_app = create_app(DirectoryResolver(config.root, suffix=config.suffix))
    console.print(f"Server is running on port {port} (root: {config.root})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="debug" if verbose else "info",
    )


if __name__ == "__main__":
    app()
