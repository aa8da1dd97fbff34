import pytest

from app.errors import DocumentNotFoundError, FormatError
from app.schemas.blog import PostDetail, PostSummary
from app.schemas.prismic import RawPost, RawPostPage
from app.services.posts_service import PostsService, normalize_detail, normalize_listing
from tests.conftest import FakeContentClient, make_raw_page, make_raw_post


def raw_page(*posts, next_page=None) -> RawPostPage:
    return RawPostPage.model_validate(make_raw_page(posts, next_page=next_page))


def test_normalize_listing_preserves_order_and_count():
    page = raw_page(
        make_raw_post(uid="c", title="C"),
        make_raw_post(uid="a", title="A"),
        make_raw_post(uid="b", title="B"),
        next_page="https://repo/api/v2/documents/search?page=2",
    )

    result = normalize_listing(page)

    assert [post.uid for post in result.results] == ["c", "a", "b"]
    assert result.next_page == "https://repo/api/v2/documents/search?page=2"
    assert all(isinstance(post, PostSummary) for post in result.results)


def test_normalize_listing_keeps_duplicates():
    page = raw_page(make_raw_post(uid="same"), make_raw_post(uid="same"))

    assert [post.uid for post in normalize_listing(page).results] == ["same", "same"]


def test_normalize_listing_formats_and_copies_fields():
    page = raw_page(
        make_raw_post(
            uid="hello",
            title="Hello",
            subtitle="Sub",
            author="Grace",
            first_publication_date="2021-04-19T00:00:00Z",
        )
    )

    [post] = normalize_listing(page).results

    assert post == PostSummary(
        uid="hello",
        first_publication_date="19 Abr 2021",
        title="Hello",
        subtitle="Sub",
        author="Grace",
    )


def test_normalize_listing_allows_missing_uid_and_date():
    page = raw_page(make_raw_post(uid=None, first_publication_date=None))

    [post] = normalize_listing(page).results

    assert post.uid is None
    assert post.first_publication_date is None


def test_normalize_listing_propagates_format_error():
    page = raw_page(
        make_raw_post(uid="ok"),
        make_raw_post(uid="bad", first_publication_date="yesterday"),
    )

    with pytest.raises(FormatError):
        normalize_listing(page)


def test_normalize_detail_computes_reading_time():
    raw = RawPost.model_validate(
        make_raw_post(
            uid="long",
            content=[
                {"heading": "a b c", "body": [{"type": "paragraph", "text": "d e"}]},
            ],
        )
    )

    detail = normalize_detail(raw)

    assert isinstance(detail, PostDetail)
    assert detail.estimated_reading_time == 1
    assert detail.first_publication_date == "19 Abr 2021"
    assert detail.banner_url == "https://images.prismic.io/banner.png"
    assert detail.author == "Ada Lovelace"


def test_normalize_detail_keeps_content_blocks_verbatim():
    content = [
        {
            "heading": "Intro",
            "body": [
                {
                    "type": "paragraph",
                    "text": "Bold start",
                    "spans": [{"start": 0, "end": 4, "type": "strong"}],
                },
                {"type": "list-item", "text": "one"},
            ],
        },
        {"heading": "Outro", "body": []},
    ]
    raw = RawPost.model_validate(make_raw_post(content=content))

    detail = normalize_detail(raw)

    assert [block.heading for block in detail.content] == ["Intro", "Outro"]
    assert detail.content[0].body[0].spans[0].type == "strong"
    assert detail.content[0].body[1].type == "list-item"


def test_normalize_detail_with_no_content_reads_in_zero_minutes():
    raw = RawPost.model_validate(make_raw_post(content=[]))

    assert normalize_detail(raw).estimated_reading_time == 0


def test_normalize_detail_propagates_format_error():
    raw = RawPost.model_validate(make_raw_post(first_publication_date="19/04/2021"))

    with pytest.raises(FormatError):
        normalize_detail(raw)


def test_first_page_uses_configured_type_and_page_size():
    client = FakeContentClient(
        first_page=make_raw_page([make_raw_post(uid="a")], next_page="/p2")
    )
    service = PostsService(client=client, document_type="posts", page_size=1)

    page = service.first_page()

    assert client.calls == [("get_by_type", "posts", 1)]
    assert page.next_page == "/p2"
    assert [post.uid for post in page.results] == ["a"]


def test_get_post_normalizes_detail():
    client = FakeContentClient(posts={"hello": make_raw_post(uid="hello", title="Hi")})
    service = PostsService(client=client)

    detail = service.get_post("hello")

    assert detail.title == "Hi"
    assert detail.uid == "hello"


def test_get_post_raises_when_missing():
    service = PostsService(client=FakeContentClient())

    with pytest.raises(DocumentNotFoundError):
        service.get_post("missing")


def test_list_static_paths_walks_every_page_and_skips_missing_uids():
    client = FakeContentClient(
        first_page=make_raw_page(
            [make_raw_post(uid="a"), make_raw_post(uid=None)], next_page="/p2"
        ),
        pages={"/p2": make_raw_page([make_raw_post(uid="b")])},
    )
    service = PostsService(client=client, route_prefix="/post/")

    assert service.list_static_paths() == ["/post/a", "/post/b"]
