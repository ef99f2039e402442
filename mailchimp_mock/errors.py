"""
Exception types and handler registration.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import message_response

logger = logging.getLogger(__name__)


class FixtureLoadError(Exception):
    """Raised when the fixture document cannot be read or is malformed."""

    def __init__(self, detail: str, *, path: Path) -> None:
        self.detail = detail
        self.path = path
        super().__init__(f"{detail}: {path}")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach module exception handlers to the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # The router answers 405 for methods the catch-all does not list;
        # those are unmatched requests like any other.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            logger.info(
                "route_not_found",
                extra={"method": request.method, "url": str(request.url), "status": 404},
            )
            return message_response(status.HTTP_404_NOT_FOUND, "Not Found")

        logger.warning(
            "http_error",
            extra={"method": request.method, "url": str(request.url), "status": exc.status_code},
        )
        return message_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))
