"""
Decode engine reply bodies into typed response records.
Malformed JSON and well-formed JSON of the wrong shape are reported as distinct DecodeError
subclasses; required fields are never defaulted.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from esclient.config.logging import get_logger
from esclient.schema.responses import DocumentSource, EsResult, SearchResults, Status, Version

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class DecodeError(Exception):
    """Raised when a reply body cannot be decoded into the requested record."""

    def __init__(self, message: str, body: bytes | str, cause: Exception | None = None):
        super().__init__(message)
        self.body = body
        self.cause = cause


class MalformedResponseError(DecodeError):
    """The body is not valid JSON."""


class ResponseShapeError(DecodeError):
    """The body is JSON but a required field is missing or has the wrong type."""

    @property
    def errors(self) -> list[dict[str, Any]]:
        if isinstance(self.cause, ValidationError):
            return self.cause.errors()
        return []


def decode_json(body: bytes | str) -> Any:
    """Parse a reply body as JSON. Raises MalformedResponseError."""
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        logger.warning("Reply body is not valid JSON", extra={"error_type": type(e).__name__})
        raise MalformedResponseError(f"Malformed JSON: {e}", body, cause=e) from e


def decode(model: type[M], body: bytes | str) -> M:
    """Decode a reply body into `model`. Raises MalformedResponseError or ResponseShapeError."""
    data = decode_json(body)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Reply body does not match expected shape",
            extra={"model": model.__name__, "error_count": e.error_count()},
        )
        raise ResponseShapeError(f"Unexpected {model.__name__} shape: {e}", body, cause=e) from e


def decode_status(body: bytes | str, version_type: Any = Version) -> Status:
    """Decode the server root reply (GET /)."""
    return decode(Status[version_type], body)


def decode_document(body: bytes | str, source_type: Any = DocumentSource) -> EsResult:
    """Decode a document envelope; `_source` is validated as `source_type`."""
    return decode(EsResult[source_type], body)


def decode_search(body: bytes | str, source_type: Any = DocumentSource) -> SearchResults:
    """Decode a _search reply; each hit's `_source` is validated as `source_type`."""
    return decode(SearchResults[source_type], body)
