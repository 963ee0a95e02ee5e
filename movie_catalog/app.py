import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.database import (
    dispose_engines,
    get_movies_engine,
    get_ratings_engine,
    set_engines,
)
from movie_catalog.presentation.routers import movies

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    set_engines(get_movies_engine(), get_ratings_engine())
    try:
        yield
    finally:
        await dispose_engines()


app = FastAPI(title="Movie Catalog API", lifespan=lifespan)

app.include_router(movies.router)


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"detail": "Internal Server Error"})


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog API"}
