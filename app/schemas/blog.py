from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.prismic import ContentBlock


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: Optional[str] = None
    first_publication_date: Optional[str] = None
    title: str
    subtitle: Optional[str] = None
    author: str


class PostDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: Optional[str] = None
    first_publication_date: Optional[str] = None
    title: str
    banner_url: Optional[str] = None
    author: str
    content: Tuple[ContentBlock, ...] = ()
    estimated_reading_time: int = 0


class PostPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    next_page: Optional[str] = None
    results: Tuple[PostSummary, ...] = ()


class AccumulatedListing(PostPage):
    """Posts loaded so far in one view session, oldest page first."""

    @property
    def can_load_more(self) -> bool:
        return bool(self.next_page)


class LoadMoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    listing: AccumulatedListing
    error: Optional[str] = None


class RenderedContentBlock(BaseModel):
    heading: str
    body_html: str


class PostDetailView(BaseModel):
    post: PostDetail
    rendered: List[RenderedContentBlock] = Field(default_factory=list)


class StaticPaths(BaseModel):
    paths: List[str] = Field(default_factory=list)
    fallback: bool = True
