from fastapi import Depends

from app.clients.prismic import PrismicClient
from app.services.posts_service import PostsService
from app.settings import settings


def get_prismic_client():
    client = PrismicClient(
        settings.PRISMIC_API_ENDPOINT,
        access_token=settings.PRISMIC_ACCESS_TOKEN,
        timeout=settings.PRISMIC_TIMEOUT_SECONDS,
    )
    try:
        yield client
    finally:
        client.close()


def get_posts_service(client=Depends(get_prismic_client)):
    return PostsService(
        client=client,
        document_type=settings.POSTS_DOCUMENT_TYPE,
        page_size=settings.POSTS_PAGE_SIZE,
        route_prefix=settings.POST_ROUTE_PREFIX,
    )
