from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.domain.ports.repositories.rating_repository import RatingRepository
from movie_catalog.infrastructure.persistence.models import Rating as SQLRating


class SQLAlchemyRatingRepository(RatingRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_average_for_movie(self, movie_id: int) -> float:
        query = select(func.avg(SQLRating.rating)).where(SQLRating.movie_id == movie_id)
        try:
            average = await self.session.scalar(query)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to compute average rating for movie {movie_id}") from e
        return float(average) if average is not None else 0.0
