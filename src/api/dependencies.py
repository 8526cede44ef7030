import secrets
from typing import Optional

import structlog
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..core.exceptions import UnauthorizedError
from ..repositories.news_repository import NewsRepository
from ..news.services.news_service import NewsService
from ..config import get_settings

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False, bearerFormat="token")


def get_news_repository(db: Session = Depends(get_db)) -> NewsRepository:
    return NewsRepository(db)


def get_news_service(repo: NewsRepository = Depends(get_news_repository)) -> NewsService:
    return NewsService(repo)


async def require_bearer_token(
    request: Request,
    # declares the bearer scheme in the OpenAPI document
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> str:
    """Checks ``Authorization: Bearer <token>`` against the configured token."""
    settings = get_settings()
    log = logger.bind(method=request.method, path=request.url.path)

    header = request.headers.get("Authorization")
    if not header:
        log.warning("Missing authorization header")
        raise UnauthorizedError("Authorization header is required")

    # the scheme is case sensitive
    scheme, separator, token = header.partition(" ")
    if scheme != "Bearer" or not separator:
        log.warning("Invalid authorization header format")
        raise UnauthorizedError("Invalid authorization header format. Expected: Bearer <token>")

    if not secrets.compare_digest(token.encode(), settings.bearer_token.encode()):
        log.warning("Invalid authorization token")
        raise UnauthorizedError("Invalid authorization token")

    return token
