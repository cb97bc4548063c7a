"""Logfire setup for the forum API.

Services open a span per operation and log outcomes on it:

    with logfire.span("post_service.list_posts", thread_id=thread_id, mode="tree"):
        ...
        logfire.info("Posts retrieved for thread", thread_id=thread_id, count=n)

Request spans come from the FastAPI instrumentation and SQL spans from the
SQLAlchemy instrumentation, so a slow traversal page shows up as one
request with its queries nested under the service span.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

# Path parameters worth lifting onto the request span
_ROUTE_KEYS = ("nickname", "slug", "slug_or_id", "post_id")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry is sent to Logfire only when ``send_to_logfire`` is set, or
    when it is unset and a token is configured. Otherwise spans and logs
    go to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = observability.send_to_logfire
    if send is None:
        send = bool(observability.logfire_token)

    logfire.configure(
        service_name="forum-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the forum entity the route addresses."""
    result = {**attributes}
    params = getattr(request, "path_params", None) or {}
    for key in _ROUTE_KEYS:
        if key in params:
            result[key] = params[key]
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run on the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
