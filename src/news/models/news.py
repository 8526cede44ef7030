from sqlalchemy import Column, Integer, BigInteger, String, Text, ForeignKey

from ...core.database import Base

# BIGSERIAL on Postgres; SQLite only autoincrements INTEGER primary keys
NewsId = BigInteger().with_variant(Integer, "sqlite")


class News(Base):
    __tablename__ = "news"

    id = Column(NewsId, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    def __repr__(self):
        return f"<News(id={self.id}, title='{self.title[:50]}')>"


class NewsCategory(Base):
    """Link between a news item and an opaque category id."""
    __tablename__ = "news_categories"

    news_id = Column(NewsId, ForeignKey("news.id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(BigInteger, primary_key=True, autoincrement=False)
