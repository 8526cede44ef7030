from .news import News, NewsCategory

__all__ = ["News", "NewsCategory"]
