"""
HTTP transport for the search engine: one request in, one reply out, synchronous.
Every HTTP status comes back as a Reply; only network-level failures raise.
"""

import threading
from abc import ABC, abstractmethod
from typing import Literal
from urllib.parse import SplitResult, urlsplit

from opensearchpy import Urllib3HttpConnection
from opensearchpy.exceptions import ConnectionError as OSConnectionError
from pydantic import BaseModel, ConfigDict

from esclient.config.logging import get_logger
from esclient.config.transport import get_transport_config

logger = get_logger(__name__)

Method = Literal["GET", "PUT", "POST", "DELETE", "HEAD"]

# Passed as `ignore` so the connection returns error statuses instead of raising.
_ALL_STATUSES = range(100, 600)


class Reply(BaseModel):
    """Raw engine reply: status code and body bytes."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: bytes = b""

    @property
    def is_error(self) -> bool:
        """Any status of 300 or above is an application-level error."""
        return self.status_code > 299


class TransportFailure(Exception):
    """Raised when a request could not be completed at the network level."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class BaseTransport(ABC):
    """Sends a single request to an absolute URL and returns the raw reply."""

    @abstractmethod
    def send(self, url: str, method: Method, body: bytes | None = None) -> Reply:
        ...

    def close(self) -> None:
        """Release any held connections."""


class OpenSearchTransport(BaseTransport):
    """
    Transport backed by opensearch-py's urllib3 connection. One connection object per
    scheme/host/port; no retries or sniffing.
    """

    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self._connections: dict[tuple[str, str, int], Urllib3HttpConnection] = {}
        self._lock = threading.Lock()

    def _connection_for(self, parts: SplitResult) -> Urllib3HttpConnection:
        use_ssl = parts.scheme == "https"
        port = parts.port or (443 if use_ssl else 80)
        key = (parts.scheme, parts.hostname or "localhost", port)
        # one connection per host even when threads race on first use
        with self._lock:
            conn = self._connections.get(key)
            if conn is None:
                conn = Urllib3HttpConnection(
                    host=key[1],
                    port=port,
                    use_ssl=use_ssl,
                    timeout=self.timeout,
                )
                self._connections[key] = conn
        return conn

    def send(self, url: str, method: Method, body: bytes | None = None) -> Reply:
        parts = urlsplit(url)
        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"
        conn = self._connection_for(parts)
        try:
            status, _headers, raw = conn.perform_request(method, path, body=body, ignore=_ALL_STATUSES)
        except OSConnectionError as e:
            logger.warning(
                "Search engine request failed",
                extra={"method": method, "url": url, "error_type": type(e).__name__},
            )
            raise TransportFailure(f"{method} {url} failed: {type(e).__name__}", cause=e) from e
        data = raw.encode("utf-8", "surrogatepass") if isinstance(raw, str) else (raw or b"")
        return Reply(status_code=status, body=data)

    def close(self) -> None:
        with self._lock:
            connections = list(self._connections.values())
            self._connections.clear()
        for conn in connections:
            conn.close()


_transport: BaseTransport | None = None


def get_transport() -> BaseTransport:
    """Return the shared transport. Creates it on first use."""
    global _transport
    if _transport is None:
        cfg = get_transport_config()
        _transport = OpenSearchTransport(timeout=cfg["timeout"])
        logger.info("Search transport initialized", extra={"timeout": cfg["timeout"]})
    return _transport


def close_transport() -> None:
    """Close the shared transport and release connections. Call on shutdown."""
    global _transport
    if _transport is not None:
        try:
            _transport.close()
            logger.info("Search transport closed")
        except Exception as e:
            logger.warning("Error closing search transport", extra={"error": str(e)})
        _transport = None
