"""
Index and mapping management: create/delete/exists/open/close an index, create/delete a mapping.
Each call issues one request and returns the raw Reply; error statuses are the caller's to inspect.
"""

from enum import Enum
from typing import Any

from esclient.config.logging import get_logger
from esclient.repositories.base import (
    IndexName,
    MappingName,
    Server,
    dispatch,
    existential_query,
    join_path,
)
from esclient.resources.transport import BaseTransport, Reply
from esclient.schema.index import IndexSettings
from esclient.services.serializer import encode

logger = get_logger(__name__)

MAPPING_ACTION = "_mapping"


class OpenCloseIndex(str, Enum):
    OPEN = "_open"
    CLOSE = "_close"


def create_index(
    server: Server,
    settings: IndexSettings,
    index_name: IndexName,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """PUT server/index with the shard/replica settings."""
    url = join_path([server.url, index_name])
    reply = dispatch(url, "PUT", encode(settings), transport=transport)
    if not reply.is_error:
        logger.info(
            "Index created",
            extra={
                "index_name": index_name,
                "shards": settings.shards.root,
                "replicas": settings.replicas.root,
            },
        )
    return reply


def delete_index(server: Server, index_name: IndexName, *, transport: BaseTransport | None = None) -> Reply:
    """DELETE server/index."""
    url = join_path([server.url, index_name])
    reply = dispatch(url, "DELETE", None, transport=transport)
    if not reply.is_error:
        logger.info("Index deleted", extra={"index_name": index_name})
    return reply


def index_exists(server: Server, index_name: IndexName, *, transport: BaseTransport | None = None) -> bool:
    """HEAD server/index; True only on status 200."""
    _reply, exists = existential_query(join_path([server.url, index_name]), transport=transport)
    return exists


def open_or_close_index(
    action: OpenCloseIndex,
    server: Server,
    index_name: IndexName,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """POST server/index/_open or server/index/_close."""
    url = join_path([server.url, index_name, action.value])
    return dispatch(url, "POST", None, transport=transport)


def open_index(server: Server, index_name: IndexName, *, transport: BaseTransport | None = None) -> Reply:
    return open_or_close_index(OpenCloseIndex.OPEN, server, index_name, transport=transport)


def close_index(server: Server, index_name: IndexName, *, transport: BaseTransport | None = None) -> Reply:
    return open_or_close_index(OpenCloseIndex.CLOSE, server, index_name, transport=transport)


def create_mapping(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    mapping: Any,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """
    PUT server/index/mapping/_mapping. `mapping` is any JSON-encodable value or pydantic model,
    e.g. {"tweet": {"properties": {"message": {"type": "string"}}}}.
    """
    url = join_path([server.url, index_name, mapping_name, MAPPING_ACTION])
    return dispatch(url, "PUT", encode(mapping), transport=transport)


def delete_mapping(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """DELETE server/index/mapping/_mapping."""
    url = join_path([server.url, index_name, mapping_name, MAPPING_ACTION])
    return dispatch(url, "DELETE", None, transport=transport)
