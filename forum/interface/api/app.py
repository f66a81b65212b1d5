"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.errors import request_validation_handler
from forum.interface.api.routes import comments, health, posts, votes
from forum.util.di.container import create_container, setup_di
from forum.util.observability import SERVICE_VERSION, instrument_fastapi

# Local web client, allowed in every environment
DEV_FRONTEND = "http://localhost:3000"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the forum API.

    Logfire must already be configured (scripts/start_app.py does this).

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app = FastAPI(
        title="Forum API",
        description="Posts, threaded comments and up/down voting",
        version=SERVICE_VERSION,
    )
    instrument_fastapi(app)

    # The auth_token cookie is sent cross-origin by the web client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted({settings.api.frontend_url, DEV_FRONTEND}),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin", "X-Requested-With"],
        max_age=600,
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    setup_di(app, container or create_container())

    for router in (health.router, posts.router, comments.router, votes.router):
        app.include_router(router)

    return app
