"""FastAPI application serving the rollable tables."""

from __future__ import annotations

import asyncio
import logging
from typing import List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from rollables.config import AppConfig
from rollables.directory.resolver import (
    DirectoryResolver,
    NotFoundError,
    OutOfBoundsError,
    filter_entries,
    normalize_filters,
)

LOGGER = logging.getLogger(__name__)


def create_app(resolver: DirectoryResolver) -> FastAPI:
    """Build the read-only API around ``resolver``."""
    app = FastAPI(title="Rollables", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.resolver = resolver

    @app.on_event("startup")
    async def startup_event() -> None:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        LOGGER.info("Serving rollables from %s", resolver.root)

    @app.get("/")
    async def list_entries(
        filters: List[str] | None = Query(default=None, alias="filter"),
    ) -> dict[str, List[str]]:
        entries = await asyncio.to_thread(resolver.index)
        return {"directory": filter_entries(entries, normalize_filters(filters))}

    @app.get("/{entry:path}", response_class=PlainTextResponse)
    async def retrieve_entry(entry: str) -> PlainTextResponse:
        if "\0" in entry:
            raise HTTPException(status_code=400, detail="Invalid entry: contains null byte")
        try:
            content = await asyncio.to_thread(resolver.retrieve, entry)
        except OutOfBoundsError as exc:
            raise HTTPException(status_code=403, detail=f"Entry out of bounds: {entry}") from exc
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=f"Entry not found: {entry}") from exc
        return PlainTextResponse(content)

    return app


app = create_app(DirectoryResolver(AppConfig().root))
