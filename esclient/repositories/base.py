"""Shared request plumbing: server address, URL paths, dispatch, and the HEAD existence convention."""

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from esclient.config.logging import get_logger
from esclient.config.settings import get_settings
from esclient.resources.transport import BaseTransport, Method, Reply, get_transport

logger = get_logger(__name__)

IndexName = str
MappingName = str
DocumentID = str


class Server(BaseModel):
    """Base address of a search engine node, e.g. http://localhost:9200."""

    model_config = ConfigDict(frozen=True)

    url: str

    @classmethod
    def from_settings(cls) -> "Server":
        return cls(url=get_settings().es_server)


def join_path(segments: Sequence[str]) -> str:
    """Join URL segments with "/". No escaping or slash normalization."""
    return "/".join(segments)


def dispatch(
    url: str,
    method: Method,
    body: bytes | None = None,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """Send one request and return the reply untouched. Error statuses are logged, not raised."""
    if transport is None:
        transport = get_transport()
    reply = transport.send(url, method, body)
    if reply.is_error:
        logger.warning(
            "Search engine returned error status",
            extra={"method": method, "url": url, "status_code": reply.status_code},
        )
    else:
        logger.debug(
            "Search engine request completed",
            extra={"method": method, "url": url, "status_code": reply.status_code},
        )
    return reply


def existential_query(url: str, *, transport: BaseTransport | None = None) -> tuple[Reply, bool]:
    """
    HEAD `url`. Status 200 means the resource exists; any other status means it does not.
    Network failures are not statuses and propagate as TransportFailure.
    """
    reply = dispatch(url, "HEAD", None, transport=transport)
    return reply, reply.status_code == 200
