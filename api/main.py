"""
Movies API -- Application entry point.

Run with:
    python -m api
or:
    uvicorn api.main:app --port 8080

Then open http://localhost:8080/docs for the interactive Swagger UI.

This file:
  1. Reads configuration from the environment
  2. Builds the application (create_app) with its own MovieStore
  3. Adds CORS middleware (permissive, this is a demo service)
  4. Mounts the movie routes and maps store errors to HTTP responses
  5. Defines the health check endpoint
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.schemas import HealthResponse
from api.routes import movies
from api.seed import seed_movies
from api.store import (
    DEFAULT_LOCK_TIMEOUT,
    MovieNotFoundError,
    MovieStore,
    StoreUnavailableError,
)

SERVICE_NAME = "movies-api"
VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def parse_log_level(value: str | None) -> str:
    """Normalize a level name, falling back to INFO for anything logging doesn't know."""
    level = (value or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def parse_lock_timeout(value: str | None) -> float | None:
    """Seconds to wait for the store lock. Unset or empty means the store default."""
    if not value:
        return DEFAULT_LOCK_TIMEOUT
    return float(value)


HOST = os.getenv("MOVIES_HOST", "127.0.0.1")
PORT = int(os.getenv("MOVIES_PORT", "8080"))
LOG_LEVEL = parse_log_level(os.getenv("MOVIES_LOG_LEVEL"))
LOCK_TIMEOUT = parse_lock_timeout(os.getenv("MOVIES_LOCK_TIMEOUT"))
SEED_ON_STARTUP = os.getenv("MOVIES_SEED", "true").lower() in ("1", "true", "yes")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error mapping
#
# MovieNotFoundError -> 404 with an empty body.
# StoreUnavailableError -> 500; the request fails, the process keeps serving.
# ---------------------------------------------------------------------------

async def _movie_not_found(request: Request, exc: MovieNotFoundError) -> Response:
    logger.info("%s %s: movie %s not found", request.method, request.url.path, exc.movie_id)
    return Response(status_code=404)


async def _store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Movie store unavailable"})


def create_app(store: MovieStore | None = None, seed: bool = SEED_ON_STARTUP) -> FastAPI:
    """Build the FastAPI application around its own MovieStore.

    Pass a store to share or inspect it (tests do); otherwise a fresh one is
    created, optionally pre-loaded with the two sample movies.
    """
    if store is None:
        store = MovieStore(seed_movies() if seed else None, lock_timeout=LOCK_TIMEOUT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server starting on %s:%d (%d movies loaded)", HOST, PORT, len(app.state.store))
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title="Movies API",
        version=VERSION,
        description=(
            "CRUD over an in-memory movie collection.\n\n"
            "| Endpoint | Purpose |\n"
            "|----------|--------|\n"
            "| `GET /movies` | List all movies |\n"
            "| `GET /movies/{id}` | Fetch one movie |\n"
            "| `POST /movies` | Create a movie |\n"
            "| `PUT /movies/{id}` | Update a movie |\n"
            "| `DELETE /movies/{id}` | Delete a movie |\n\n"
            "Data lives in memory only and is lost on restart."
        ),
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MovieNotFoundError, _movie_not_found)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable)

    app.include_router(movies.router)

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health check",
        tags=["System"],
    )
    def health(request: Request) -> HealthResponse:
        """Simple health check for load balancers and monitoring."""
        return HealthResponse(
            status="healthy",
            service=SERVICE_NAME,
            version=VERSION,
            movies_stored=len(request.app.state.store),
        )

    return app


app = create_app()
