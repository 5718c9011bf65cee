from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request

from . import __version__
from .catalog import MovieCatalog
from .config import Settings, configure_logging
from .ingest import load_catalog
from .intervals import analyze
from .models import AnalysisResult, HealthResponse, InfoResponse
from .security import require_api_key

logger = logging.getLogger(__name__)

TITLE = "producer-intervals"
DESCRIPTION = "Shortest and longest gaps between consecutive award wins per producer"


def get_catalog(request: Request) -> MovieCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return catalog


def create_app(settings: Optional[Settings] = None, catalog: Optional[MovieCatalog] = None) -> FastAPI:
    """
    Build the API.

    With ``catalog`` given the CSV is never read; otherwise it is loaded
    once at startup from ``settings.csv_path``.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.api_key is None:
            logger.warning("No API key configured, authentication is disabled")
        if getattr(app.state, "catalog", None) is None:
            try:
                app.state.catalog = load_catalog(settings.csv_path, delimiter=settings.csv_delimiter)
            except Exception:
                logger.exception("Startup ingestion failed")
                raise
        yield

    app = FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = catalog

    @app.get("/health", response_model=HealthResponse)
    def health(catalog: MovieCatalog = Depends(get_catalog)):
        return {"ok": True, "movies": len(catalog), "winners": catalog.winner_count}

    @app.get("/info", response_model=InfoResponse)
    def info():
        return {"name": TITLE, "version": __version__, "description": DESCRIPTION}

    @app.get(
        "/api/producers/intervals",
        response_model=AnalysisResult,
        dependencies=[Depends(require_api_key)],
    )
    def producer_intervals(catalog: MovieCatalog = Depends(get_catalog)):
        return analyze(catalog.winning_records())

    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
