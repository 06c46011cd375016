"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from desk.interface.api.routes import community, health, login, register
from desk.util.di.container import create_container, setup_di
from desk.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use; the production container by default

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    # Instrument httpx so identity service calls are traced
    instrument_httpx()

    app_instance = FastAPI(
        title="Desk API",
        description="Account provisioning and authentication for the support desk",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(register.router)
    api_v1.include_router(login.router)
    api_v1.include_router(community.router)

    app_instance.include_router(health.router)
    app_instance.include_router(api_v1)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
