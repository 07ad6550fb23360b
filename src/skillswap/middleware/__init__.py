"""Middleware registration."""

from fastapi import FastAPI

from skillswap.config import Settings
from skillswap.middleware.cors import setup_cors
from skillswap.middleware.error_handler import setup_error_handlers
from skillswap.middleware.logging import setup_logging
from skillswap.middleware.request_id import RequestIdMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    Starlette executes middleware in reverse-add order (last added = outermost),
    so CORS goes last to wrap every response, errors included.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)
