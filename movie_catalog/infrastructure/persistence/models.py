from typing import List, Optional

from sqlalchemy import JSON, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, registry

# The catalog and the ratings live in separate databases, each with its own metadata.
movies_registry = registry()
ratings_registry = registry()


@movies_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    movie_id: Mapped[int] = mapped_column("movieId", primary_key=True)
    imdb_id: Mapped[str] = mapped_column("imdbId")
    title: Mapped[str]
    release_date: Mapped[str] = mapped_column("releaseDate", Text)
    language: Mapped[str]
    overview: Mapped[Optional[str]] = mapped_column(default=None)
    production_companies: Mapped[Optional[List[dict]]] = mapped_column(
        "productionCompanies", JSON(none_as_null=True), default=None
    )
    budget: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    revenue: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    runtime: Mapped[Optional[float]] = mapped_column(Float, default=None)
    genres: Mapped[Optional[List[dict]]] = mapped_column(JSON(none_as_null=True), default=None)
    status: Mapped[Optional[str]] = mapped_column(default=None)


@ratings_registry.mapped_as_dataclass
class Rating:
    __tablename__ = "ratings"

    rating_id: Mapped[int] = mapped_column("ratingId", init=False, primary_key=True)
    user_id: Mapped[int] = mapped_column("userId")
    movie_id: Mapped[int] = mapped_column("movieId", index=True)
    rating: Mapped[float] = mapped_column(Float)
    timestamp: Mapped[int]
