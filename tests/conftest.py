import os

import pytest
from unittest.mock import MagicMock, AsyncMock

os.environ.setdefault("BEARER_TOKEN", "test-token")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

TEST_TOKEN = os.environ["BEARER_TOKEN"]


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def test_db():
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from src.core.database import create_tables, drop_tables

    # One shared connection keeps the in-memory database alive across sessions
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    create_tables(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        drop_tables(bind=engine)
        engine.dispose()


@pytest.fixture
def mock_news_service():
    service = MagicMock()
    service.create_news = AsyncMock(return_value=1)
    service.edit_news = AsyncMock(return_value=None)
    service.list_news = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_news_repository():
    repo = MagicMock()
    repo.create_news = MagicMock(return_value=1)
    repo.update_news = MagicMock(return_value=None)
    repo.get_news = MagicMock(return_value=[])
    return repo


@pytest.fixture
async def async_client(test_db):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.core.database import get_db

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def mocked_service_client(mock_news_service):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.api.dependencies import get_news_service

    app.dependency_overrides[get_news_service] = lambda: mock_news_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
