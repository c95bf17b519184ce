"""FastAPI application."""

from fastapi import FastAPI

from roster.interface.api.error import register_error_handlers
from roster.interface.api.routes import clinician_invites, health
from roster.util.di.container import create_container, setup_di
from roster.util.observability import instrument_fastapi, instrument_httpx


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    instrument_httpx()

    app_instance = FastAPI(
        title="Roster API",
        description="Clinician invitations: send, resend, list, accept, dismiss and cancel",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(clinician_invites.router)

    return app_instance
