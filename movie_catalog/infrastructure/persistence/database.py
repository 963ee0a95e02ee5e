from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from movie_catalog.infrastructure.config.settings import Settings


class _EngineStore:
    movies_engine: Optional[AsyncEngine] = None
    ratings_engine: Optional[AsyncEngine] = None


def set_engines(movies_engine: AsyncEngine, ratings_engine: AsyncEngine) -> None:
    _EngineStore.movies_engine = movies_engine
    _EngineStore.ratings_engine = ratings_engine


def get_movies_engine() -> AsyncEngine:
    if _EngineStore.movies_engine is None:
        settings = Settings()
        _EngineStore.movies_engine = create_async_engine(
            settings.MOVIES_DATABASE_URL, echo=settings.MOVIES_DATABASE_ECHO
        )
    return _EngineStore.movies_engine


def get_ratings_engine() -> AsyncEngine:
    if _EngineStore.ratings_engine is None:
        settings = Settings()
        _EngineStore.ratings_engine = create_async_engine(
            settings.RATINGS_DATABASE_URL, echo=settings.RATINGS_DATABASE_ECHO
        )
    return _EngineStore.ratings_engine


async def get_movies_session():
    engine = get_movies_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def get_ratings_session():
    engine = get_ratings_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def dispose_engines() -> None:
    for engine in (_EngineStore.movies_engine, _EngineStore.ratings_engine):
        if engine is not None:
            await engine.dispose()
    _EngineStore.movies_engine = None
    _EngineStore.ratings_engine = None
