"""FastAPI application factory.

Logfire is configured by the caller: ``scripts/start_app.py`` in
production, ``tests/conftest.py`` in tests.
"""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tavern.config import Settings
from tavern.interface.api.auth import AUTH_HEADER
from tavern.interface.api.routes import auth, groups, health, user
from tavern.interface.error import register_error_handlers
from tavern.util.di.container import create_container, setup_di
from tavern.util.observability import instrument_fastapi

ROUTERS = (health.router, auth.router, user.router, groups.router)


def _allow_frontend(app: FastAPI, settings: Settings) -> None:
    # The web client sends the auth cookie and reads the token header
    origins = {settings.api.frontend_url, "http://localhost:3000"}
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Accept-Language", "Content-Type", "Origin"],
        expose_headers=[AUTH_HEADER],
        max_age=600,
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Args:
        container: DI container to serve from; defaults to the production one
    """
    settings = Settings()
    public_docs = settings.environment != "production"

    app = FastAPI(
        title="Tavern API",
        description="Guilds, parties and group invitations",
        version=settings.version,
        docs_url="/docs" if public_docs else None,
        redoc_url=None,
    )

    instrument_fastapi(app)
    _allow_frontend(app, settings)
    setup_di(app, container or create_container())
    register_error_handlers(app)

    for router in ROUTERS:
        app.include_router(router)

    return app
