"""
Entrypoint for the FastAPI application.

Creates the app, configures logging and CORS, wires the password recovery
components, includes routers and initialises the database.  This module is
intended to be invoked by an ASGI server (e.g. uvicorn).
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from recovery.errors import RecoveryError
from recovery.mail import EmailDispatcher
from recovery.registry import ResetCodeRegistry

from .config import settings
from .db import init_db
from . import models  # noqa: F401  # register tables before init_db
from .middleware.correlation import RequestIdFilter, RequestIdMiddleware
from .middleware.metrics import MetricsMiddleware
from .services import email as email_service

from .routers import auth as auth_router
from .routers import reset as reset_router
from .routers import products as products_router
from .routers import orders as orders_router
from .routers import contact as contact_router
from .routers import health as health_router
from .routers import metrics as metrics_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

# Validation errors on these routes use the {"error": ...} body with a 400
RESET_PATHS = frozenset(route.path for route in reset_router.router.routes)


def configure_logging() -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    for handler in root.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


async def recovery_error_handler(request: Request, exc: RecoveryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if request.url.path not in RESET_PATHS:
        return await request_validation_exception_handler(request, exc)
    errors = exc.errors()
    if not errors or any(err.get("type") == "missing" for err in errors):
        message = "All fields are required"
    else:
        field = errors[0].get("loc", ("body",))[-1]
        message = f"Invalid {field}"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    reset_registry: ResetCodeRegistry | None = None,
    email_dispatcher: EmailDispatcher | None = None,
) -> FastAPI:
    configure_logging()
    init_db()
    app = FastAPI(title=f"{settings.app_name} API", version=health_router.API_VERSION)

    if reset_registry is None:
        reset_registry = ResetCodeRegistry(ttl_seconds=settings.reset_code_ttl_minutes * 60)
    if email_dispatcher is None:
        email_dispatcher = email_service.build_dispatcher(settings)
    app.state.reset_registry = reset_registry
    app.state.email_dispatcher = email_dispatcher
    providers = app.state.email_dispatcher.configured_providers()
    if providers:
        logger.info("Email providers configured: %s", ", ".join(providers))
    else:
        logger.warning("No email provider configured; reset codes will not be emailed")
    if settings.expose_reset_code and settings.is_production:
        logger.warning("EXPOSE_RESET_CODE is ignored when APP_ENV=production")
    elif settings.reset_codes_exposed():
        logger.warning("Reset codes are returned in API responses (development mode)")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With"],
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(RecoveryError, recovery_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(auth_router.router)
    app.include_router(reset_router.router)
    app.include_router(products_router.router)
    app.include_router(orders_router.router)
    app.include_router(contact_router.router)
    app.include_router(health_router.router)
    app.include_router(metrics_router.router)

    @app.get("/")
    def root():
        return {"status": "ok", "message": f"{settings.app_name} API is running"}

    return app


app = create_app()
