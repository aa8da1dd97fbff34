from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Span(RawModel):
    start: int
    end: int
    type: str
    data: Optional[Dict[str, Any]] = None


class RichTextFragment(RawModel):
    type: str = "paragraph"
    text: str
    spans: List[Span] = Field(default_factory=list)


class ContentBlock(RawModel):
    heading: str
    body: List[RichTextFragment] = Field(default_factory=list)


class Banner(RawModel):
    url: Optional[str] = None


class RawPostData(RawModel):
    title: str
    subtitle: Optional[str] = None
    author: str
    banner: Banner = Field(default_factory=Banner)
    content: List[ContentBlock] = Field(default_factory=list)


class RawPost(RawModel):
    id: Optional[str] = None
    uid: Optional[str] = None
    type: Optional[str] = None
    first_publication_date: Optional[str] = None
    last_publication_date: Optional[str] = None
    data: RawPostData


class RawPostPage(RawModel):
    page: int = 1
    results_per_page: Optional[int] = None
    results_size: Optional[int] = None
    total_results_size: Optional[int] = None
    total_pages: Optional[int] = None
    next_page: Optional[str] = None
    prev_page: Optional[str] = None
    results: List[RawPost] = Field(default_factory=list)
