from app.errors import DocumentNotFoundError
from app.schemas.prismic import RawPostPage


def make_raw_post(
    uid="first-post",
    title="First post",
    first_publication_date="2021-04-19T00:00:00+0000",
    content=None,
    **data,
) -> dict:
    """Build a Prismic-shaped post document."""
    return {
        "id": f"id-{uid}",
        "uid": uid,
        "type": "posts",
        "first_publication_date": first_publication_date,
        "data": {
            "title": title,
            "subtitle": data.get("subtitle", f"{title} subtitle"),
            "author": data.get("author", "Ada Lovelace"),
            "banner": {"url": data.get("banner_url", "https://images.prismic.io/banner.png")},
            "content": content if content is not None else [],
        },
    }


def make_raw_page(posts, next_page=None, page=1) -> dict:
    return {
        "page": page,
        "results_per_page": len(posts),
        "results_size": len(posts),
        "next_page": next_page,
        "results": list(posts),
    }


class FakeContentClient:
    """
    Minimal content client stand-in.
    `pages` maps a next_page URL to a raw page dict or an exception to raise.
    """

    def __init__(self, first_page=None, pages=None, posts=None):
        self.first_page = first_page or make_raw_page([])
        self.pages = pages or {}
        self.posts = posts or {}
        self.calls = []

    def get_by_type(self, document_type, page_size=20, page=1):
        self.calls.append(("get_by_type", document_type, page_size))
        return RawPostPage.model_validate(self.first_page)

    def get_page(self, url):
        self.calls.append(("get_page", url))
        result = self.pages[url]
        if isinstance(result, Exception):
            raise result
        return RawPostPage.model_validate(result)

    def get_by_uid(self, document_type, uid):
        self.calls.append(("get_by_uid", document_type, uid))
        if uid not in self.posts:
            raise DocumentNotFoundError(document_type, uid)
        return RawPostPage.model_validate(make_raw_page([self.posts[uid]])).results[0]

    def get_all_by_type(self, document_type, page_size=100):
        self.calls.append(("get_all_by_type", document_type))
        page = RawPostPage.model_validate(self.first_page)
        posts = list(page.results)
        while page.next_page:
            page = self.get_page(page.next_page)
            posts.extend(page.results)
        return posts
