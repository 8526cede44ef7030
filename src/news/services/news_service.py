"""
News service for API endpoints
Turns validated request forms into repository calls
"""

from typing import List

import structlog

from ..schemas.requests import NewsCreateForm, NewsEditForm
from ..schemas.responses import NewsWithCategories
from ...repositories.news_repository import NewsRepository
from .news_update import NewsUpdate

logger = structlog.get_logger(__name__)


class NewsService:

    def __init__(self, repository: NewsRepository):
        self.repository = repository

    async def create_news(self, form: NewsCreateForm) -> int:
        return self.repository.create_news(form)

    async def edit_news(self, news_id: int, form: NewsEditForm) -> None:
        """
        Apply a partial update.

        Omitted fields stay untouched. ``categories`` replaces the whole link
        set when present, so an empty list removes every category.
        """
        update = NewsUpdate(title=form.title, content=form.content)

        if update.is_empty() and form.categories is None:
            logger.debug("Nothing to update", news_id=news_id)
            return

        self.repository.update_news(news_id, update, form.categories)

    async def list_news(self, limit: int, offset: int) -> List[NewsWithCategories]:
        return self.repository.get_news(limit, offset)
