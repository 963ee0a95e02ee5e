import math
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from movie_catalog.applications.interfaces.dtos.paginate_query import PaginateQuery
from movie_catalog.applications.interfaces.dtos.pagination import PaginationLinks, PaginationMeta
from movie_catalog.domain.models.pagination import PageRequest, PaginationConfig, SortBy, SortDirection


class Paginator:
    """Resolves listing parameters and builds pagination metadata and links.

    Unknown sort fields or directions are dropped rather than rejected, and a
    limit above the configured maximum is clamped to it.
    """

    def __init__(self, config: PaginationConfig):
        self.config = config

    def resolve(self, query: PaginateQuery) -> PageRequest:
        limit = query.limit or self.config.default_limit
        limit = min(limit, self.config.max_limit)

        sort_by = [entry for entry in map(self._parse_sort_entry, query.sort_by) if entry is not None]
        if not sort_by:
            sort_by = list(self.config.default_sort_by)

        return PageRequest(page=query.page, limit=limit, sort_by=sort_by)

    def _parse_sort_entry(self, raw: str) -> Optional[SortBy]:
        field, _, direction = raw.partition(":")
        if field not in self.config.sortable_columns:
            return None
        try:
            return field, SortDirection(direction.upper() or SortDirection.ASC.value)
        except ValueError:
            return None

    def build(self, page_request: PageRequest, total_items: int, path: str) -> Tuple[PaginationMeta, PaginationLinks]:
        total_pages = math.ceil(total_items / page_request.limit)
        page = page_request.page

        meta = PaginationMeta(
            items_per_page=page_request.limit,
            total_items=total_items,
            current_page=page,
            total_pages=total_pages,
            sort_by=[(field, direction.value) for field, direction in page_request.sort_by],
        )
        links = PaginationLinks(
            first=self._build_link(path, 1, page_request),
            previous=self._build_link(path, page - 1, page_request) if page > 1 else None,
            current=self._build_link(path, page, page_request),
            next=self._build_link(path, page + 1, page_request) if page < total_pages else None,
            last=self._build_link(path, max(total_pages, 1), page_request),
        )
        return meta, links

    @staticmethod
    def _build_link(path: str, page: int, page_request: PageRequest) -> str:
        params: List[Tuple[str, object]] = [("page", page), ("limit", page_request.limit)]
        params.extend(("sortBy", f"{field}:{direction.value}") for field, direction in page_request.sort_by)
        return f"{path}?{urlencode(params, safe=':')}"
