"""FastAPI application for the forum backend."""

from dishka import AsyncContainer
from fastapi import FastAPI

from forum.interface.api.routes import forums, health, posts, service, threads, users
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

ROUTERS = (health, users, forums, threads, posts, service)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the application around ``container``.

    Tests pass a container with in-memory persistence. Without one the
    production container is used, which connects to PostgreSQL lazily.
    Logfire is expected to be configured by the caller.
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Users, forums, threads with nested posts, and votes",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)
    setup_di(app_instance, container or create_container())

    for module in ROUTERS:
        app_instance.include_router(module.router)

    return app_instance


# Imported by uvicorn via scripts/start_app.py
app = create_app()
