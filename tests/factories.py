from typing import List, Optional

from movie_catalog.domain.models.movie import Genre, Movie as DomainMovie, ProductionCompany
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie
from movie_catalog.infrastructure.persistence.models import Rating as SQLRating

DRAMA = {"id": 18, "name": "Drama"}
CRIME = {"id": 80, "name": "Crime"}
COMEDY = {"id": 35, "name": "Comedy"}
ROMANCE = {"id": 10749, "name": "Romance"}
ACTION = {"id": 28, "name": "Action"}
THRILLER = {"id": 53, "name": "Thriller"}
TV_DRAMA = {"id": 10770, "name": "TV Drama"}


class MovieFactory:
    """Factory for creating test movies"""

    def create_domain_movie(
        self,
        *,
        movie_id: int = 1,
        imdb_id: str = "tt0094675",
        title: str = "Ariel",
        overview: Optional[str] = "A Finnish coal miner whose father has just committed suicide...",
        release_date: str = "1988-10-21",
        budget: Optional[int] = 1000000,
        runtime: Optional[float] = 69,
        language: str = "fi",
        genres: Optional[List[dict]] = None,
        production_companies: Optional[List[dict]] = None,
    ) -> DomainMovie:
        """Create a domain movie for testing"""
        if genres is None:
            genres = [DRAMA, CRIME]
        if production_companies is None:
            production_companies = [{"id": 2303, "name": "Villealfa Filmproduction Oy"}]

        return DomainMovie(
            movie_id=movie_id,
            imdb_id=imdb_id,
            title=title,
            overview=overview,
            release_date=release_date,
            budget=budget,
            revenue=2000000,
            runtime=runtime,
            language=language,
            genres=[Genre(**genre) for genre in genres],
            production_companies=[ProductionCompany(**company) for company in production_companies],
            status="Released",
        )

    def create_catalog(self) -> List[SQLMovie]:
        """A small catalog covering the listing edge cases"""
        return [
            SQLMovie(
                movie_id=1,
                imdb_id="tt0094675",
                title="Ariel",
                release_date="1988-10-21",
                language="fi",
                overview="A Finnish coal miner whose father has just committed suicide...",
                production_companies=[{"id": 2303, "name": "Villealfa Filmproduction Oy"}],
                budget=1000000,
                runtime=69,
                genres=[DRAMA, CRIME],
                status="Released",
            ),
            SQLMovie(
                movie_id=2,
                imdb_id="tt0092149",
                title="Shadows in Paradise",
                release_date="1986-10-17",
                language="fi",
                budget=0,
                runtime=76,
                genres=[DRAMA, COMEDY, ROMANCE],
            ),
            SQLMovie(
                movie_id=3,
                imdb_id="tt0113101",
                title="Four Rooms",
                release_date="1995-12-09",
                language="en",
                budget=4000000,
                runtime=98,
                genres=[CRIME, COMEDY],
            ),
            SQLMovie(
                movie_id=4,
                imdb_id="tt0107286",
                title="Judgment Night",
                release_date="1993-10-15",
                language="en",
                budget=21000000,
                runtime=110,
                genres=[ACTION, THRILLER, CRIME],
            ),
            SQLMovie(
                movie_id=5,
                imdb_id="tt0000005",
                title="The Lost Reel",
                release_date="19xx-01-01",
                language="en",
                genres=[TV_DRAMA],
            ),
            SQLMovie(
                movie_id=6,
                imdb_id="tt0000006",
                title="Untitled",
                release_date="2001-05-01",
                language="en",
            ),
        ]

    def create_ratings(self) -> List[SQLRating]:
        return [
            SQLRating(user_id=1, movie_id=1, rating=3.0, timestamp=1260759144),
            SQLRating(user_id=2, movie_id=1, rating=4.0, timestamp=1260759179),
            SQLRating(user_id=3, movie_id=1, rating=5.0, timestamp=1260759182),
            SQLRating(user_id=1, movie_id=2, rating=2.5, timestamp=1260759185),
        ]


movie_factory = MovieFactory()
