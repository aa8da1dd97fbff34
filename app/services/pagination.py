import logging
import threading
from typing import Optional

from pydantic import ValidationError

from app.errors import (
    ContentClientError,
    FormatError,
    LoadInProgressError,
    NoMorePagesError,
)
from app.schemas.blog import AccumulatedListing, LoadMoreResult, PostPage
from app.schemas.prismic import RawPostPage
from app.services.posts_service import normalize_listing

logger = logging.getLogger(__name__)


def start_listing(page: PostPage) -> AccumulatedListing:
    return AccumulatedListing(next_page=page.next_page, results=page.results)


def append_page(
    current: AccumulatedListing, next_raw: RawPostPage
) -> AccumulatedListing:
    """Return a new listing with the page's posts after the current ones."""
    page = normalize_listing(next_raw)
    return AccumulatedListing(
        next_page=page.next_page,
        results=current.results + page.results,
    )


def load_more(current: AccumulatedListing, client) -> LoadMoreResult:
    """
    Fetch current.next_page and append it.
    Failures leave the listing untouched and are reported in the result.
    """
    if not current.next_page:
        raise NoMorePagesError("Listing has no next page to load")

    try:
        raw = client.get_page(current.next_page)
        listing = append_page(current, raw)
    except (ContentClientError, FormatError, ValidationError) as e:
        logger.warning(f"Failed to load more posts from {current.next_page}: {e}")
        return LoadMoreResult(ok=False, listing=current, error=str(e))

    return LoadMoreResult(ok=True, listing=listing)


class ListingSession:
    """
    Latest listing snapshot for one view session.

    In-process API for view callers that keep their listing server-side;
    the stateless `POST /posts/more` route calls `load_more` directly.
    Only one load more may be in flight at a time.
    """

    def __init__(self, client, listing: AccumulatedListing):
        self.client = client
        self.listing = listing
        self._lock = threading.Lock()
        self.last_error: Optional[str] = None

    @property
    def can_load_more(self) -> bool:
        return self.listing.can_load_more and not self.loading

    @property
    def loading(self) -> bool:
        return self._lock.locked()

    def load_more(self) -> LoadMoreResult:
        if not self._lock.acquire(blocking=False):
            raise LoadInProgressError("A load more request is already in flight")
        try:
            result = load_more(self.listing, self.client)
            self.listing = result.listing
            self.last_error = result.error
            return result
        finally:
            self._lock.release()
