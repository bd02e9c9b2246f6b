"""
Pytest configuration and fixtures for Tag API tests.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from tag_api.core.exceptions import EntityNotExistException, EntityNotFoundException
from tag_api.db.base import Base
from tag_api.db.session import get_db
from tag_api.dependencies import get_tag_service
from tag_api.main import app
from tag_api.models import Tag  # noqa: F401
from tag_api.schemas.tag import TagDto


class StubTagService:
    """In-memory stand-in for the persistence collaborator."""

    def __init__(self, tags: dict[int, str] | None = None, next_id: int = 1):
        self.tags = dict(tags or {})
        self.next_id = next_id
        self.created: list[TagDto] = []

    async def create_tag(self, tag_dto: TagDto) -> int:
        tag_id = self.next_id
        self.next_id += 1
        self.tags[tag_id] = tag_dto.name
        self.created.append(tag_dto)
        return tag_id

    async def find_tag_by_id(self, tag_id: int) -> TagDto:
        if tag_id not in self.tags:
            raise EntityNotFoundException(tag_id)
        return TagDto(id=tag_id, name=self.tags[tag_id])

    async def delete_tag(self, tag_id: int) -> None:
        if tag_id not in self.tags:
            raise EntityNotExistException(tag_id)
        del self.tags[tag_id]


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a test database engine backed by a temporary SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client backed by the test database."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def stub_service() -> StubTagService:
    return StubTagService()


@pytest_asyncio.fixture(scope="function")
async def stub_client(stub_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client whose persistence is the in-memory stub."""
    app.dependency_overrides[get_tag_service] = lambda: stub_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
