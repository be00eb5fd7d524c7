"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import Settings
from ..errors import InvalidInputError
from ..repositories import FilesystemBoardStore
from ..services import BoardService
from .routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    The data directory is created here, once, and the store and service
    built from ``settings`` are shared by every request.
    """
    settings = settings or Settings()

    store = FilesystemBoardStore(settings.data_dir)
    store.ensure_directory()
    logger.info("Data directory: %s", settings.data_dir.resolve())
    logger.info("Default columns: %s", ", ".join(settings.column_names))

    app = FastAPI(title="Kartao API", version=__version__)
    app.state.board_service = BoardService(store, settings.column_names)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(router)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Shape every error response as ``{"error": message}``."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.debug("Invalid input on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.debug("Bad request on %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Something broke!"})
