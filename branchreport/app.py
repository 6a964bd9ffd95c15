"""
FastAPI application entry point for the branch report service.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from branchreport.config import Settings, get_settings
from branchreport.db import Database
from branchreport.errors import BranchReportError
from branchreport.responses import build_responder
from branchreport.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve without a schema; the exception aborts startup.
    app.state.database.init_schema()
    logger.info("Starting %s", app.state.settings.service_name)
    yield
    app.state.database.dispose()
    logger.info("Shutting down %s", app.state.settings.service_name)


def _describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    return "; ".join(problems) or "Invalid request"


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BranchReportError)
    async def handle_branch_report_error(request: Request, exc: BranchReportError):
        return app.state.responder.error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        return app.state.responder.error(400, _describe_validation_error(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        return app.state.responder.error(500, "Internal Server Error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Branch Report Service", version="0.1.0", lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.sql_echo)
    app.state.responder = build_responder(settings.response_envelope)
    _register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    return app
