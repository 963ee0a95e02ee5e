from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from movie_catalog.applications.interfaces.dtos.pagination import PaginationLinks, PaginationMeta


class GenreDto(BaseModel):
    id: int = Field(examples=[18])
    name: str = Field(examples=["Drama"])


class ProductionCompanyDto(BaseModel):
    id: int = Field(examples=[2303])
    name: str = Field(examples=["Villealfa Filmproduction Oy"])


class MovieListItem(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: int = Field(examples=[1])
    imdb_id: str = Field(examples=["tt0094675"])
    title: str = Field(examples=["Ariel"])
    genres: Optional[List[GenreDto]] = None
    release_date: str = Field(examples=["1988-10-21"])
    budget: str = Field(description="Budget formatted as dollars", examples=["$1,000,000"])


class MovieDetails(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: int = Field(examples=[1])
    imdb_id: str = Field(examples=["tt0094675"])
    title: str = Field(examples=["Ariel"])
    description: str
    release_date: str = Field(examples=["1988-10-21"])
    budget: str = Field(examples=["$1,000,000"])
    runtime: float = Field(description="Runtime in minutes", examples=[69])
    average_rating: float = Field(description="Mean of all user ratings", examples=[3.4018691588785046])
    genres: List[GenreDto]
    language: str = Field(examples=["fi"])
    production_companies: List[ProductionCompanyDto]


class PaginatedMovieList(BaseModel):
    data: List[MovieListItem]
    meta: PaginationMeta
    links: PaginationLinks
