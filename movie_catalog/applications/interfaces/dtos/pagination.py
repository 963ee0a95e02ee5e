from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel


class PaginationMeta(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items_per_page: int
    total_items: int
    current_page: int
    total_pages: int
    sort_by: List[Tuple[str, str]]


class PaginationLinks(BaseModel):
    first: str
    previous: Optional[str] = None
    current: str
    next: Optional[str] = None
    last: str

    @model_serializer(mode="wrap")
    def _omit_missing_links(self, handler):
        # previous/next are left out entirely at the page boundaries
        return {name: link for name, link in handler(self).items() if link is not None}
