from typing import Annotated, List, Optional

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.interfaces.dtos.paginate_query import PaginateQuery
from movie_catalog.applications.services.movie_query_service import MovieQueryService
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.rating_repository import RatingRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_query_service_port import MovieQueryServicePort
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_rating_repository import (
    SQLAlchemyRatingRepository,
)
from movie_catalog.infrastructure.config.settings import PaginationSettings
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import get_movies_session, get_ratings_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog")


def get_pagination_settings() -> PaginationSettings:
    return PaginationSettings()


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_movies_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_rating_repository(session: Annotated[AsyncSession, Depends(get_ratings_session)]) -> RatingRepository:
    return SQLAlchemyRatingRepository(session)


def get_paginate_query(
    request: Request,
    page: Annotated[int, Query(ge=1, description="Page number (default: 1)")] = 1,
    limit: Annotated[Optional[int], Query(ge=1, description="Number of items per page (max: 50, default: 50)")] = None,
    sort_by: Annotated[
        Optional[List[str]],
        Query(alias="sortBy", description="Sort by field and direction, e.g. releaseDate:ASC or title:DESC"),
    ] = None,
) -> PaginateQuery:
    path = str(request.url.replace(query=""))
    return PaginateQuery(page=page, limit=limit, sort_by=sort_by or [], path=path)


def get_movie_query_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    rating_repository: Annotated[RatingRepository, Depends(get_rating_repository)],
    pagination_settings: Annotated[PaginationSettings, Depends(get_pagination_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieQueryServicePort:
    return MovieQueryService(
        movie_repository=movie_repository,
        rating_repository=rating_repository,
        pagination_settings=pagination_settings,
        logger=logger,
    )
