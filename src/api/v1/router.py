from fastapi import APIRouter, Depends

from ..dependencies import require_bearer_token
from .endpoints import health, news

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

# Every news route requires the bearer token
api_router.include_router(news.router, tags=["news"], dependencies=[Depends(require_bearer_token)])
