from collections import defaultdict
from typing import Dict, List, Optional, Sequence

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import AppError, InternalError, NewsNotFoundError
from ..news.models.news import News, NewsCategory
from ..news.schemas.requests import NewsCreateForm
from ..news.schemas.responses import NewsWithCategories
from ..news.services.news_update import NewsUpdate

logger = structlog.get_logger(__name__)


class NewsRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_news(self, limit: int, offset: int) -> List[NewsWithCategories]:
        op = "repository.news.get_news"

        try:
            rows = self.session.execute(
                select(News).order_by(News.id).offset(offset).limit(limit)
            ).scalars().all()
            categories = self._categories_for([row.id for row in rows])
        except SQLAlchemyError as e:
            logger.error("Failed to select news", operation=op, limit=limit, offset=offset, error=str(e))
            raise InternalError("Failed to select news") from e

        return [
            NewsWithCategories(
                id=row.id,
                title=row.title,
                content=row.content,
                categories=categories.get(row.id, []),
            )
            for row in rows
        ]

    def create_news(self, form: NewsCreateForm) -> int:
        op = "repository.news.create_news"

        try:
            news = News(title=form.title, content=form.content)
            self.session.add(news)
            self.session.flush()

            if form.categories:
                self._insert_categories(news.id, form.categories)

            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to create news", operation=op, title=form.title, error=str(e))
            raise InternalError("Failed to create news") from e

        logger.info("News created successfully", operation=op, news_id=news.id)
        return news.id

    def update_news(self, news_id: int, update: NewsUpdate, categories: Optional[List[int]]) -> None:
        op = "repository.news.update_news"

        try:
            news = self._find_news_by_id(news_id)

            if not update.is_empty():
                for column, value in update.values().items():
                    setattr(news, column, value)
                self.session.flush()

            if categories is not None:
                self._replace_categories(news_id, categories)

            self.session.commit()
        except AppError:
            self.session.rollback()
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to update news", operation=op, news_id=news_id, error=str(e))
            raise InternalError("Failed to update news") from e

        logger.info("News updated successfully", operation=op, news_id=news_id)

    def _find_news_by_id(self, news_id: int) -> News:
        news = self.session.get(News, news_id)
        if news is None:
            logger.warning("News not found", operation="repository.news.find_news_by_id", news_id=news_id)
            raise NewsNotFoundError(news_id)
        return news

    def _categories_for(self, news_ids: Sequence[int]) -> Dict[int, List[int]]:
        if not news_ids:
            return {}

        links = self.session.execute(
            select(NewsCategory.news_id, NewsCategory.category_id)
            .where(NewsCategory.news_id.in_(news_ids))
            .order_by(NewsCategory.news_id, NewsCategory.category_id)
        ).all()

        grouped: Dict[int, List[int]] = defaultdict(list)
        for news_id, category_id in links:
            grouped[news_id].append(category_id)
        return grouped

    def _insert_categories(self, news_id: int, category_ids: Sequence[int]) -> None:
        # (news_id, category_id) is the primary key, so repeats collapse into one link
        unique_ids = list(dict.fromkeys(category_ids))
        self.session.add_all(
            NewsCategory(news_id=news_id, category_id=category_id) for category_id in unique_ids
        )
        self.session.flush()

        logger.debug(
            "Categories inserted",
            operation="repository.news.insert_categories",
            news_id=news_id,
            categories=len(unique_ids),
        )

    def _replace_categories(self, news_id: int, category_ids: Sequence[int]) -> None:
        self.session.execute(delete(NewsCategory).where(NewsCategory.news_id == news_id))
        if category_ids:
            self._insert_categories(news_id, category_ids)
