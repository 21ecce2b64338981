"""Document operations addressed by server/index/mapping/doc_id: index (PUT), get, exists (HEAD), delete."""

from typing import Any

from esclient.config.logging import get_logger
from esclient.repositories.base import (
    DocumentID,
    IndexName,
    MappingName,
    Server,
    dispatch,
    existential_query,
    join_path,
)
from esclient.resources.transport import BaseTransport, Reply
from esclient.services.serializer import encode

logger = get_logger(__name__)


def _document_url(server: Server, index_name: IndexName, mapping_name: MappingName, doc_id: DocumentID) -> str:
    return join_path([server.url, index_name, mapping_name, doc_id])


def index_document(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    document: Any,
    doc_id: DocumentID,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """
    PUT the document under doc_id. Re-indexing the same id replaces the stored document
    and bumps its version. `document` is a pydantic model or any JSON-encodable value.
    """
    url = _document_url(server, index_name, mapping_name, doc_id)
    reply = dispatch(url, "PUT", encode(document), transport=transport)
    if not reply.is_error:
        logger.debug(
            "Document indexed",
            extra={"index_name": index_name, "mapping_name": mapping_name, "doc_id": doc_id},
        )
    return reply


def get_document(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    doc_id: DocumentID,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """GET the document envelope. Decode the body with decode_document()."""
    return dispatch(_document_url(server, index_name, mapping_name, doc_id), "GET", None, transport=transport)


def document_exists(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    doc_id: DocumentID,
    *,
    transport: BaseTransport | None = None,
) -> bool:
    """HEAD the document; True only on status 200."""
    url = _document_url(server, index_name, mapping_name, doc_id)
    _reply, exists = existential_query(url, transport=transport)
    return exists


def delete_document(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    doc_id: DocumentID,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    url = _document_url(server, index_name, mapping_name, doc_id)
    reply = dispatch(url, "DELETE", None, transport=transport)
    if not reply.is_error:
        logger.debug("Document deleted", extra={"index_name": index_name, "doc_id": doc_id})
    return reply
