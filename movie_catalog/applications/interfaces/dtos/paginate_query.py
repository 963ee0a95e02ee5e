from typing import List, Optional

from pydantic import BaseModel, Field


class PaginateQuery(BaseModel):
    """Raw pagination parameters of a listing request"""

    page: int = Field(default=1, ge=1, description="Page number")
    limit: Optional[int] = Field(default=None, ge=1, description="Number of items per page")
    sort_by: List[str] = Field(default_factory=list, description="Sort entries as field:DIRECTION")
    path: str = Field(default="", description="Request URL without its query string")
