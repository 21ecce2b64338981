"""Search requests: POST a Search body to an index or to one mapping type within it."""

from esclient.repositories.base import IndexName, MappingName, Server, dispatch, join_path
from esclient.resources.transport import BaseTransport, Reply
from esclient.schema.search import Search
from esclient.services.serializer import encode

SEARCH_ACTION = "_search"


def search_by_index(
    server: Server,
    index_name: IndexName,
    search: Search,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """POST server/index/_search. Decode the body with decode_search()."""
    url = join_path([server.url, index_name, SEARCH_ACTION])
    return dispatch(url, "POST", encode(search), transport=transport)


def search_by_type(
    server: Server,
    index_name: IndexName,
    mapping_name: MappingName,
    search: Search,
    *,
    transport: BaseTransport | None = None,
) -> Reply:
    """POST server/index/mapping/_search."""
    url = join_path([server.url, index_name, mapping_name, SEARCH_ACTION])
    return dispatch(url, "POST", encode(search), transport=transport)
