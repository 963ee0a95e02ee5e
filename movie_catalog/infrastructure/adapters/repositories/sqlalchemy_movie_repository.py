from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.models.movie import MovieFilter
from movie_catalog.domain.models.pagination import PageRequest, SortDirection
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

SORT_COLUMNS = {
    "releaseDate": SQLMovie.release_date,
    "title": SQLMovie.title,
}


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie, with_production_companies: bool = True) -> DomainMovie:
        return DomainMovie(
            movie_id=sql_movie.movie_id,
            imdb_id=sql_movie.imdb_id,
            title=sql_movie.title,
            release_date=sql_movie.release_date,
            language=sql_movie.language,
            overview=sql_movie.overview,
            production_companies=sql_movie.production_companies if with_production_companies else None,
            budget=sql_movie.budget,
            revenue=sql_movie.revenue,
            runtime=sql_movie.runtime,
            genres=sql_movie.genres,
            status=sql_movie.status,
        )

    def _conditions(self, movie_filter: MovieFilter) -> list:
        conditions = []
        if movie_filter.year is not None:
            conditions.append(func.substr(SQLMovie.release_date, 1, 4) == str(movie_filter.year))
        if movie_filter.genre is not None:
            # exact membership on the "name" of each entry of the JSON genre list
            genre_entries = func.json_each(SQLMovie.genres).table_valued("value", joins_implicitly=True)
            conditions.append(
                select(genre_entries.c.value)
                .where(func.json_extract(genre_entries.c.value, "$.name") == movie_filter.genre)
                .exists()
            )
        return conditions

    def _order_by(self, page_request: PageRequest) -> list:
        order_by = []
        for field, direction in page_request.sort_by:
            column = SORT_COLUMNS[field]
            order_by.append(column.desc() if direction == SortDirection.DESC else column.asc())
        order_by.append(SQLMovie.movie_id.asc())
        return order_by

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        query = select(SQLMovie).where(SQLMovie.movie_id == movie_id)
        try:
            result = await self.session.execute(query)
            movie = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load movie {movie_id}") from e
        return self._to_domain(movie) if movie else None

    async def find_page(self, movie_filter: MovieFilter, page_request: PageRequest) -> Tuple[List[DomainMovie], int]:
        conditions = self._conditions(movie_filter)
        count_query = select(func.count()).select_from(SQLMovie).where(*conditions)
        query = (
            select(SQLMovie)
            # production companies are not part of the list view
            .options(defer(SQLMovie.production_companies))
            .where(*conditions)
            .order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        try:
            total = await self.session.scalar(count_query)
            result = await self.session.execute(query)
            movies = result.scalars().all()
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list movies") from e
        return [self._to_domain(movie, with_production_companies=False) for movie in movies], total or 0
