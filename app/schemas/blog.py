from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SortOrder = Literal["date-desc", "date-asc", "title-asc"]
SORT_ORDERS = ("date-desc", "date-asc", "title-asc")


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    category: str
    language: Optional[str] = None
    title: str = ""
    description: str = ""
    date: str = ""
    tags: List[str] = Field(default_factory=list)
    creationTimestamp: Optional[int] = None


class PostDetail(PostSummary):
    content: str


class PageWindow(BaseModel):
    pages: List[int] = Field(default_factory=list)
    first: Optional[int] = None
    last: Optional[int] = None
    leadingEllipsis: bool = False
    trailingEllipsis: bool = False
    previous: Optional[int] = None
    next: Optional[int] = None


class PostPage(BaseModel):
    items: List[PostSummary] = Field(default_factory=list)
    page: int = 1
    pageSize: int
    total: int = 0
    totalPages: int = 1
    window: PageWindow = Field(default_factory=PageWindow)
