from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


SortBy = Tuple[str, SortDirection]


class PaginationConfig(BaseModel):
    """Per-listing rules for resolving page, limit and sort parameters"""

    sortable_columns: List[str]
    default_sort_by: List[SortBy] = Field(default_factory=lambda: [("releaseDate", SortDirection.ASC)])
    default_limit: int = 50
    max_limit: int = 50


class PageRequest(BaseModel):
    page: int
    limit: int
    sort_by: List[SortBy]

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
