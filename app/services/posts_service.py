import logging
from typing import List

from app.schemas.blog import PostDetail, PostPage, PostSummary
from app.schemas.prismic import RawPost, RawPostPage
from app.utils import estimate_minutes, format_publication_date

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        client,
        document_type: str = "posts",
        page_size: int = 1,
        route_prefix: str = "/post/",
    ):
        self.client = client
        self.document_type = document_type
        self.page_size = page_size
        self.route_prefix = route_prefix

    def first_page(self) -> PostPage:
        raw = self.client.get_by_type(self.document_type, page_size=self.page_size)
        return normalize_listing(raw)

    def get_post(self, slug: str) -> PostDetail:
        raw = self.client.get_by_uid(self.document_type, slug)
        return normalize_detail(raw)

    def list_static_paths(self) -> List[str]:
        posts = self.client.get_all_by_type(self.document_type)
        paths = [f"{self.route_prefix}{post.uid}" for post in posts if post.uid]
        logger.info(f"Enumerated {len(paths)} static post paths")
        return paths


def normalize_listing(raw: RawPostPage) -> PostPage:
    """Convert a raw posts page into summaries, keeping server order."""
    return PostPage(
        next_page=raw.next_page,
        results=tuple(summarize_post(post) for post in raw.results),
    )


def summarize_post(post: RawPost) -> PostSummary:
    return PostSummary(
        uid=post.uid,
        first_publication_date=format_publication_date(post.first_publication_date),
        title=post.data.title,
        subtitle=post.data.subtitle,
        author=post.data.author,
    )


def normalize_detail(raw: RawPost) -> PostDetail:
    content = tuple(raw.data.content)
    return PostDetail(
        uid=raw.uid,
        first_publication_date=format_publication_date(raw.first_publication_date),
        title=raw.data.title,
        banner_url=raw.data.banner.url,
        author=raw.data.author,
        content=content,
        estimated_reading_time=estimate_minutes(content),
    )
