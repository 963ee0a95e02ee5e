from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from movie_catalog.domain.models.movie import Movie, MovieFilter
from movie_catalog.domain.models.pagination import PageRequest


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def find_page(self, movie_filter: MovieFilter, page_request: PageRequest) -> Tuple[List[Movie], int]:
        """Return one page of matching movies and the total number of matches"""
        pass
