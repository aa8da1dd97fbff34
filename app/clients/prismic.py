import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import httpx
from pydantic import ValidationError

from app.errors import (
    DocumentNotFoundError,
    NetworkError,
    ResponseError,
)
from app.schemas.prismic import RawPost, RawPostPage

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PrismicClient:
    """
    Read-only client for the Prismic REST API (v2).
    Every search resolves the current master ref first; nothing is cached.
    """

    def __init__(
        self,
        endpoint: str,
        access_token: str = "",
        timeout: float = 10.0,
        http: Optional[httpx.Client] = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.access_token = access_token
        self.http = http or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def get_by_type(
        self, document_type: str, page_size: int = DEFAULT_PAGE_SIZE, page: int = 1
    ) -> RawPostPage:
        payload = self._search(
            f'[[at(document.type,"{document_type}")]]',
            pageSize=page_size,
            page=page,
        )
        return _parse_page(payload)

    def get_by_uid(self, document_type: str, uid: str) -> RawPost:
        # a quote would end the predicate string early
        if '"' in uid:
            raise DocumentNotFoundError(document_type, uid)
        payload = self._search(f'[[at(my.{document_type}.uid,"{uid}")]]')
        page = _parse_page(payload)
        if not page.results:
            raise DocumentNotFoundError(document_type, uid)
        return page.results[0]

    def get_page(self, url: str) -> RawPostPage:
        """Fetch a next_page URL exactly as the API returned it."""
        self._check_same_origin(url)
        logger.debug(f"Fetching next page {url}")
        return _parse_page(self._get_json(url))

    def get_all_by_type(
        self, document_type: str, page_size: int = MAX_PAGE_SIZE
    ) -> List[RawPost]:
        page = self.get_by_type(document_type, page_size=page_size)
        posts = list(page.results)
        while page.next_page:
            page = self.get_page(page.next_page)
            posts.extend(page.results)
        return posts

    def _check_same_origin(self, url: str) -> None:
        """Only follow page URLs that point back at this repository's API."""
        try:
            target = urlsplit(url)
            base = urlsplit(self.endpoint)
        except ValueError as e:
            raise ResponseError(f"Invalid page URL {url!r}") from e
        if (
            target.scheme != base.scheme
            or target.netloc != base.netloc
            or not target.path.startswith(f"{base.path}/")
        ):
            raise ResponseError(f"Refusing to fetch page outside {self.endpoint}: {url}")

    def master_ref(self) -> str:
        root = self._get_json(self.endpoint, params=self._auth_params())
        for ref in root.get("refs", []):
            if ref.get("isMasterRef"):
                return ref["ref"]
        raise ResponseError(f"No master ref published at {self.endpoint}")

    def _search(self, query: str, **params: Any) -> Dict[str, Any]:
        search_params = {"ref": self.master_ref(), "q": query, **params}
        search_params.update(self._auth_params())
        logger.debug(f"Searching {self.endpoint} with {query}")
        return self._get_json(f"{self.endpoint}/documents/search", params=search_params)

    def _auth_params(self) -> Dict[str, str]:
        return {"access_token": self.access_token} if self.access_token else {}

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> dict:
        try:
            response = self.http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ResponseError(
                f"{e.response.status_code} from content repository for {url}"
            ) from e
        except httpx.InvalidURL as e:
            raise ResponseError(f"Invalid URL {url!r}: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseError(f"Content repository returned invalid JSON for {url}") from e
        if not isinstance(payload, dict):
            raise ResponseError(f"Unexpected payload from {url}")
        return payload


def _parse_page(payload: dict) -> RawPostPage:
    try:
        return RawPostPage.model_validate(payload)
    except ValidationError as e:
        raise ResponseError(f"Malformed posts page: {e}") from e
