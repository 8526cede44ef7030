from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from ..config import Settings, get_settings

Base = declarative_base()


def engine_options(settings: Settings) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.debug}

    if settings.database_url.startswith("sqlite"):
        # sync dependencies run in FastAPI's threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            pool_recycle=300,
        )
    return options


def build_engine(settings: Settings) -> Engine:
    return create_engine(settings.database_url, **engine_options(settings))


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Optional[Engine] = None):
    # Registers news tables on Base
    from ..news.models import news  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Optional[Engine] = None):
    Base.metadata.drop_all(bind=bind or engine)


def dispose_engine():
    engine.dispose()
