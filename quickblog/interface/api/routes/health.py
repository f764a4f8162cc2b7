"""Health check route.

Served outside the API prefix so load balancers can reach it without
knowing where the posts live.
"""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from quickblog.config import Settings
from quickblog.domain.model.common import utcnow
from quickblog.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    api_prefix: str
    posts_url: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the Post Store is up and where its posts are served."""
    return HealthResponse(
        status="healthy",
        timestamp=utcnow(),
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        api_prefix=settings.api.prefix,
        posts_url=settings.api.posts_url,
    )
