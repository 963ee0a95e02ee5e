from movie_catalog.applications.interfaces.dtos.movie import MovieDetails, PaginatedMovieList
from movie_catalog.applications.interfaces.dtos.paginate_query import PaginateQuery
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.applications.services.paginator import Paginator
from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.models.movie import MovieFilter
from movie_catalog.domain.models.pagination import PaginationConfig
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.rating_repository import RatingRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_query_service_port import MovieQueryServicePort
from movie_catalog.infrastructure.config.settings import PaginationSettings


class MovieQueryService(MovieQueryServicePort):
    """Application service answering the catalog's listing and detail queries"""

    def __init__(
        self,
        movie_repository: MovieRepository,
        rating_repository: RatingRepository,
        pagination_settings: PaginationSettings,
        logger: LoggerPort,
    ):
        self.movie_repository = movie_repository
        self.rating_repository = rating_repository
        self.pagination_settings = pagination_settings
        self.logger = logger

    def _paginator(self, *sortable_columns: str) -> Paginator:
        return Paginator(
            PaginationConfig(
                sortable_columns=list(sortable_columns),
                default_limit=self.pagination_settings.default_limit,
                max_limit=self.pagination_settings.max_limit,
            )
        )

    async def _paginate(self, paginator: Paginator, movie_filter: MovieFilter, query: PaginateQuery) -> PaginatedMovieList:
        page_request = paginator.resolve(query)
        self.logger.debug(f"Listing movies filter={movie_filter.model_dump(exclude_none=True)} page={page_request}")

        movies, total_items = await self.movie_repository.find_page(movie_filter, page_request)
        meta, links = paginator.build(page_request, total_items, query.path)

        return PaginatedMovieList(
            data=[MovieDtoMapper.to_list_dto(movie) for movie in movies],
            meta=meta,
            links=links,
        )

    async def list_movies(self, query: PaginateQuery) -> PaginatedMovieList:
        return await self._paginate(self._paginator("releaseDate", "title"), MovieFilter(), query)

    async def list_movies_by_year(self, year: int, query: PaginateQuery) -> PaginatedMovieList:
        return await self._paginate(self._paginator("releaseDate"), MovieFilter(year=year), query)

    async def list_movies_by_genre(self, genre: str, query: PaginateQuery) -> PaginatedMovieList:
        return await self._paginate(self._paginator("releaseDate", "title"), MovieFilter(genre=genre), query)

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        movie = await self.movie_repository.get_by_id(movie_id)
        if movie is None:
            self.logger.info(f"Movie {movie_id} not found")
            raise MovieNotFoundError(movie_id)

        average_rating = await self.rating_repository.get_average_for_movie(movie_id)
        return MovieDtoMapper.to_details_dto(movie, average_rating)
