from abc import ABC, abstractmethod


class RatingRepository(ABC):
    @abstractmethod
    async def get_average_for_movie(self, movie_id: int) -> float:
        """Mean rating of a movie, 0 when it has no ratings"""
        pass
