from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.rating_repository import RatingRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.config.settings import PaginationSettings
from movie_catalog.infrastructure.persistence.database import get_movies_session, get_ratings_session
from movie_catalog.infrastructure.persistence.models import movies_registry, ratings_registry

from .factories import movie_factory


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_rating_repository():
    """Mock rating repository for service testing"""
    return AsyncMock(spec=RatingRepository)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def pagination_settings():
    return PaginationSettings(default_limit=50, max_limit=50)


@pytest.fixture
def sample_movie():
    return movie_factory.create_domain_movie()


class BaseIntegrationTest:
    """Base class for integration tests against temporary SQLite databases"""

    @pytest_asyncio.fixture
    async def movies_engine(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'movies.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(movies_registry.metadata.create_all)

        yield engine

        await engine.dispose()

    @pytest_asyncio.fixture
    async def ratings_engine(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ratings.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(ratings_registry.metadata.create_all)

        yield engine

        await engine.dispose()

    @pytest_asyncio.fixture
    async def movies_session(self, movies_engine):
        async with AsyncSession(movies_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def ratings_session(self, ratings_engine):
        async with AsyncSession(ratings_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def seeded(self, movies_session, ratings_session):
        """Load the sample catalog and its ratings"""
        movies_session.add_all(movie_factory.create_catalog())
        await movies_session.commit()

        ratings_session.add_all(movie_factory.create_ratings())
        await ratings_session.commit()

    @pytest_asyncio.fixture
    async def client(self, seeded, movies_session, ratings_session):
        """Create test HTTP client with database overrides"""

        async def override_get_movies_session():
            yield movies_session

        async def override_get_ratings_session():
            yield ratings_session

        app.dependency_overrides[get_movies_session] = override_get_movies_session
        app.dependency_overrides[get_ratings_session] = override_get_ratings_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
