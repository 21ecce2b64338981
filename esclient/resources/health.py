"""Server status and health check. Used by readiness probes of applications embedding the client."""

from typing import Any

from esclient.config.logging import get_logger
from esclient.repositories.base import Server, dispatch, join_path
from esclient.resources.transport import BaseTransport, TransportFailure
from esclient.schema.responses import Status
from esclient.services.decoder import DecodeError, decode_status

logger = get_logger(__name__)


def get_status(server: Server, *, transport: BaseTransport | None = None) -> Status:
    """GET the server root and decode it. Raises DecodeError if the reply is not a status document."""
    reply = dispatch(join_path([server.url]), "GET", None, transport=transport)
    return decode_status(reply.body)


def ping_server(server: Server, *, transport: BaseTransport | None = None) -> dict[str, Any]:
    """
    Check the server answers with a status document. Returns dict with 'ok' bool and optional
    'error' string; does not raise or leak internal details.
    """
    try:
        status = get_status(server, transport=transport)
    except TransportFailure as e:
        logger.warning("Search engine ping failed", extra={"error": type(e.cause or e).__name__})
        return {"ok": False, "error": "connection_failed"}
    except DecodeError as e:
        logger.warning("Search engine ping returned unexpected body", extra={"error": type(e).__name__})
        return {"ok": False, "error": "unexpected_response"}
    return {"ok": status.ok}
