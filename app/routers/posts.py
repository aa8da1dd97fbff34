import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.errors import DocumentNotFoundError, NoMorePagesError
from app.schemas.blog import (
    AccumulatedListing,
    LoadMoreResult,
    PostDetailView,
    PostPage,
    RenderedContentBlock,
    StaticPaths,
)
from app.services.pagination import load_more
from app.services.posts_service import PostsService
from app.services.rich_text import render_rich_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostPage)
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get the first page of post summaries."""
    try:
        return service.first_page()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.post("/posts/more", response_model=LoadMoreResult)
def load_more_posts(
    listing: AccumulatedListing,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Append the next page to a listing the caller already holds."""
    try:
        return load_more(listing, service.client)
    except NoMorePagesError:
        raise HTTPException(status_code=409, detail="No more posts to load")


@router.get("/posts/{slug}", response_model=PostDetailView)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        post = service.get_post(slug)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    rendered = [
        RenderedContentBlock(heading=block.heading, body_html=render_rich_text(block.body))
        for block in post.content
    ]
    return PostDetailView(post=post, rendered=rendered)


@router.get("/paths", response_model=StaticPaths)
def list_paths(service: PostsService = Depends(deps.get_posts_service)):
    """Detail addresses known at build time; others resolve on demand."""
    try:
        return StaticPaths(paths=service.list_static_paths(), fallback=True)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error enumerating post paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to enumerate posts")
