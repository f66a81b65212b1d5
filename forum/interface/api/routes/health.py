"""Liveness route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.config import Environment, Settings
from forum.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    environment: Environment
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests.

    Does not touch the database or the identity provider.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        environment=settings.environment,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
    )
