from typing import Optional

from movie_catalog.applications.interfaces.dtos.movie import (
    GenreDto,
    MovieDetails,
    MovieListItem,
    ProductionCompanyDto,
)
from movie_catalog.domain.models.movie import Movie


class MovieDtoMapper:
    """Maps domain movies to the list and detail response shapes"""

    @staticmethod
    def format_budget(budget: Optional[int]) -> str:
        if not budget:
            return "$0"
        return f"${int(budget):,}"

    @staticmethod
    def to_list_dto(movie: Movie) -> MovieListItem:
        genres = None
        if movie.genres is not None:
            genres = [GenreDto(id=genre.id, name=genre.name) for genre in movie.genres]

        return MovieListItem(
            movie_id=movie.movie_id,
            imdb_id=movie.imdb_id,
            title=movie.title,
            genres=genres,
            release_date=movie.release_date,
            budget=MovieDtoMapper.format_budget(movie.budget),
        )

    @staticmethod
    def to_details_dto(movie: Movie, average_rating: float) -> MovieDetails:
        return MovieDetails(
            movie_id=movie.movie_id,
            imdb_id=movie.imdb_id,
            title=movie.title,
            description=movie.overview or "",
            release_date=movie.release_date,
            budget=MovieDtoMapper.format_budget(movie.budget),
            runtime=movie.runtime or 0,
            average_rating=average_rating,
            genres=[GenreDto(id=genre.id, name=genre.name) for genre in movie.genres or []],
            language=movie.language,
            production_companies=[
                ProductionCompanyDto(id=company.id, name=company.name)
                for company in movie.production_companies or []
            ],
        )
