class FormatError(ValueError):
    """Raised when a publication date cannot be parsed."""


class ContentClientError(Exception):
    """Base error for content repository calls."""


class NetworkError(ContentClientError):
    """The request never produced a response."""


class ResponseError(ContentClientError):
    """The repository answered with an error status or a malformed payload."""


class DocumentNotFoundError(ContentClientError):
    def __init__(self, document_type: str, uid: str):
        super().__init__(f"No {document_type} document with uid '{uid}'")
        self.document_type = document_type
        self.uid = uid


class NoMorePagesError(RuntimeError):
    """Load more was requested on a listing without a next page."""


class LoadInProgressError(RuntimeError):
    """A load more request is already outstanding for this listing."""
