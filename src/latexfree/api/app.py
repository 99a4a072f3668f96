"""FastAPI application factory."""

from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from latexfree.config import AppConfig, load_config
from latexfree.db.session import get_engine, get_session_factory, init_db
from latexfree.errors import (
    LatexFreeError,
    NotFoundError,
    PersistenceError,
    UpstreamError,
    ValidationError,
)
from latexfree.places import PlacesProviderBase
from latexfree.places import get_places_provider as _select_places_provider
from latexfree.store import JsonFileSubmissionStore, SqlSubmissionStore, SubmissionStore

logger = logging.getLogger(__name__)

_store_lock = threading.Lock()


def build_store(config: AppConfig) -> SubmissionStore:
    """Create the submission store selected by config."""
    if config.store_backend == "json":
        return JsonFileSubmissionStore(config.data_file)

    engine = get_engine(config.db_path)
    init_db(engine)
    return SqlSubmissionStore(get_session_factory(engine))


def get_config(request: Request) -> AppConfig:
    """Dependency to get the application config."""
    return request.app.state.config


def get_store(request: Request) -> SubmissionStore:
    """Dependency to get the submission store.

    The store is created on first use so that importing the app has
    no filesystem side effects.
    """
    state = request.app.state
    if state.store is None:
        with _store_lock:
            if state.store is None:
                state.store = build_store(state.config)
    return state.store


def get_places_provider(request: Request) -> PlacesProviderBase:
    """Dependency to get the place lookup provider."""
    return request.app.state.places_provider


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(request: Request, exc: ValidationError):
        return _error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if not errors:
            return _error_response(400, "Invalid request.")
        first = errors[0]
        location = ".".join(
            part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
        )
        message = first.get("msg", "Invalid request.")
        return _error_response(400, f"{location}: {message}" if location else message)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return _error_response(404, str(exc))

    @app.exception_handler(UpstreamError)
    async def _upstream(request: Request, exc: UpstreamError):
        return _error_response(500, str(exc))

    @app.exception_handler(PersistenceError)
    async def _persistence(request: Request, exc: PersistenceError):
        return _error_response(500, "Failed to access submissions.")

    @app.exception_handler(LatexFreeError)
    async def _other(request: Request, exc: LatexFreeError):
        logger.error(f"Unhandled service error: {exc!r}")
        return _error_response(500, "Internal server error.")


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Optional settings. Read from the environment when omitted.

    Returns:
        Configured FastAPI application.
    """
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not config.google_api_configured:
            logger.warning("GOOGLE_PLACES_API_KEY not set; serving sample restaurant data")
        logger.info(f"Using {config.store_backend} submission store")
        yield

    app = FastAPI(
        title="Latex Free Eats API",
        description="Crowdsourced kitchen glove reports for restaurants",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.store = None
    app.state.places_provider = _select_places_provider(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(app)

    # Include routes
    from latexfree.api.routes import restaurants, submissions

    app.include_router(restaurants.router, prefix="/api")
    app.include_router(submissions.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
