from typing import List, Optional

from pydantic import BaseModel


class Genre(BaseModel):
    id: int
    name: str


class ProductionCompany(BaseModel):
    id: int
    name: str


class Movie(BaseModel):
    movie_id: int
    imdb_id: str
    title: str
    release_date: str
    language: str
    overview: Optional[str] = None
    production_companies: Optional[List[ProductionCompany]] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None
    runtime: Optional[float] = None
    genres: Optional[List[Genre]] = None
    status: Optional[str] = None


class MovieFilter(BaseModel):
    """Criteria narrowing a movie listing. Unset fields do not filter."""

    year: Optional[int] = None
    genre: Optional[str] = None
