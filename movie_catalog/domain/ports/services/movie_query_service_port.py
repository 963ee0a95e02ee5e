from abc import ABC, abstractmethod

from movie_catalog.applications.interfaces.dtos.movie import MovieDetails, PaginatedMovieList
from movie_catalog.applications.interfaces.dtos.paginate_query import PaginateQuery


class MovieQueryServicePort(ABC):
    """Port for the read operations of the movie catalog"""

    @abstractmethod
    async def list_movies(self, query: PaginateQuery) -> PaginatedMovieList:
        pass

    @abstractmethod
    async def list_movies_by_year(self, year: int, query: PaginateQuery) -> PaginatedMovieList:
        pass

    @abstractmethod
    async def list_movies_by_genre(self, genre: str, query: PaginateQuery) -> PaginatedMovieList:
        pass

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Raise MovieNotFoundError when the movie does not exist"""
        pass
