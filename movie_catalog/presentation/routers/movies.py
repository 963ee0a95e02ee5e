from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_catalog.applications.interfaces.dtos.movie import MovieDetails, PaginatedMovieList
from movie_catalog.applications.interfaces.dtos.paginate_query import PaginateQuery
from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.ports.services.movie_query_service_port import MovieQueryServicePort
from movie_catalog.infrastructure.config.dependencies import get_movie_query_service, get_paginate_query

router = APIRouter(prefix="/movies", tags=["movies"])

MovieQueryServiceDep = Annotated[MovieQueryServicePort, Depends(get_movie_query_service)]
PaginateQueryDep = Annotated[PaginateQuery, Depends(get_paginate_query)]


@router.get(
    "",
    response_model=PaginatedMovieList,
    summary="Get all movies",
    description="Paginated list of all movies with IMDb id, title, genres, release date and budget.",
)
async def read_movies(query: PaginateQueryDep, movie_service: MovieQueryServiceDep):
    return await movie_service.list_movies(query)


@router.get(
    "/year/{year}",
    response_model=PaginatedMovieList,
    summary="Get movies by year",
    description="Paginated list of movies released in the given year, sorted chronologically by default.",
)
async def read_movies_by_year(year: int, query: PaginateQueryDep, movie_service: MovieQueryServiceDep):
    return await movie_service.list_movies_by_year(year, query)


@router.get(
    "/genre/{genre}",
    response_model=PaginatedMovieList,
    summary="Get movies by genre",
    description="Paginated list of movies having the given genre (exact, case-sensitive name).",
)
async def read_movies_by_genre(genre: str, query: PaginateQueryDep, movie_service: MovieQueryServiceDep):
    return await movie_service.list_movies_by_genre(genre, query)


@router.get(
    "/{movie_id}",
    response_model=MovieDetails,
    summary="Get movie details",
    description="Movie details including the average rating computed from the ratings database.",
    responses={404: {"description": "Movie not found"}},
)
async def read_movie(movie_id: int, movie_service: MovieQueryServiceDep):
    try:
        return await movie_service.get_movie_details(movie_id)
    except MovieNotFoundError:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Movie not found")
