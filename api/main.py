"""FastAPI application for the BirdieBoard scoring API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, load_settings
from database.connection import db
from database.db_manager import DatabaseManager
from scoring import WhsHandicapCalculator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool on startup, close on shutdown."""
    settings: Settings = app.state.settings
    await db.initialize(
        dsn=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    app.state.db_manager = DatabaseManager(db.pool)
    yield
    await db.close()


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="BirdieBoard Scoring API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.handicap_calculator = WhsHandicapCalculator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import handicaps, scoring, stats
    app.include_router(scoring.router, prefix="/api/scoring", tags=["scoring"])
    app.include_router(handicaps.router, prefix="/api/handicaps", tags=["handicaps"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
