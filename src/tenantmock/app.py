"""Tenant translator mock: FastAPI application.

Stands in for the real tenant translator. Every failure is answered with
a 500 and an {"error": ...} envelope.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

from tenantmock.config import TenantMockConfig, load_config
from tenantmock.errors import TranslationError
from tenantmock.routes import translate
from tenantmock.translator import Translator

logger = logging.getLogger("tenantmock")
audit_logger = logging.getLogger("tenantmock.audit")


def _abort_process(message: str) -> None:
    logger.critical("Exiting after failed request: %s", message)
    os._exit(1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: TenantMockConfig = app.state.config
    logger.info(
        "Tenant translator mock ready (paths: %s, exit_on_error=%s)",
        ", ".join(translate.TRANSLATION_PATHS),
        config.exit_on_error,
    )
    yield
    logger.info("Tenant translator mock shut down")


def create_app(
    config: TenantMockConfig | None = None,
    translator: Translator | None = None,
) -> FastAPI:
    """Application factory."""
    if config is None:
        config = load_config()
    if translator is None:
        translator = Translator.from_seed(config.seed)

    app = FastAPI(
        title="Tenant Translator Mock",
        description="Random stand-in for the tenant translator service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.translator = translator

    # ── Exception handlers ────────────────────────────────────

    def error_response(message: str) -> JSONResponse:
        background = None
        if config.exit_on_error:
            background = BackgroundTask(_abort_process, message)
        return JSONResponse(
            status_code=500,
            content={"error": message},
            background=background,
        )

    @app.exception_handler(TranslationError)
    async def translation_error_handler(request: Request, exc: TranslationError):
        logger.error(exc.message)
        return error_response(exc.message)

    # Starlette re-raises after sending this response, so the server logs it too.
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unexpected error handling %s: %s", request.url.path, exc)
        return error_response(str(exc) or exc.__class__.__name__)

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(translate.router)

    return app
