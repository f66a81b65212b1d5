"""Logfire setup for the forum API.

Services log through logfire directly:

    with logfire.span("vote_service.cast_vote", votable_id=str(votable_id)):
        logfire.info("Vote cast", direction=direction.value)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.requests import Request

from forum.config import Settings

SERVICE_NAME = "forum-backend"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise export only when a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is built."""
    send_to_logfire = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Request, attributes: dict) -> dict:
    # Cookies carry the auth token and must not end up in spans
    return {
        **attributes,
        "method": request.method,
        "path": request.url.path,
        "client_host": request.client.host if request.client else None,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, without cookie headers."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every query issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace identity provider calls."""
    logfire.instrument_httpx()
