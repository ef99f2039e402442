"""
Application factory.

Run with ``python -m mailchimp_mock`` or
``uvicorn mailchimp_mock.main:create_app --factory``.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .api import handle_request
from .config import Settings, get_settings
from .errors import register_exception_handlers
from .fixture import load_fixture
from .logging import configure_logging, request_id_var

http_logger = logging.getLogger("mailchimp_mock.http")

# Every method the catch-all accepts; anything else is turned into a 404 by the error handler.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The fixture is loaded here, once; a ``FixtureLoadError`` aborts startup.
    """

    configure_logging()
    settings = settings or get_settings()
    fixture = load_fixture(settings.fixture_path)

    # Generated docs would shadow the catch-all route and must 404 instead.
    app = FastAPI(
        title="Mailchimp Mock Server",
        summary="Serves a static member fixture behind a subset of the Mailchimp lists API.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.fixture = fixture

    @app.middleware("http")
    async def request_logger(request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        http_logger.info("request_received", extra={"method": request.method, "url": str(request.url)})
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            http_logger.info(
                "response_sent",
                extra={"method": request.method, "url": str(request.url), "status": response.status_code},
            )
            return response
        finally:
            request_id_var.reset(token)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)

    app.add_api_route("/{full_path:path}", handle_request, methods=ROUTED_METHODS)

    return app
