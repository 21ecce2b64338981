"""
esclient - a client for a document-search engine's HTTP/JSON API.

Build values, compose filters, send:

    from esclient import ExistsFilter, Search, Server, query_string_query, search_by_index

    server = Server(url="http://localhost:9200")
    search = Search(
        query=query_string_query("quick brown").with_options(default_operator="AND"),
        filter=ExistsFilter(field="title") & ExistsFilter(field="author"),
    )
    reply = search_by_index(server, "books", search)
"""

__version__ = "0.1.0"

from esclient.repositories.base import Server, dispatch, existential_query, join_path
from esclient.repositories.documents import (
    delete_document,
    document_exists,
    get_document,
    index_document,
)
from esclient.repositories.indices import (
    OpenCloseIndex,
    close_index,
    create_index,
    create_mapping,
    delete_index,
    delete_mapping,
    index_exists,
    open_index,
)
from esclient.repositories.search import search_by_index, search_by_type
from esclient.resources.health import get_status, ping_server
from esclient.resources.transport import (
    BaseTransport,
    OpenSearchTransport,
    Reply,
    TransportFailure,
    close_transport,
    get_transport,
)
from esclient.schema.filters import (
    AndFilter,
    BoolFilter,
    ExistsFilter,
    Filter,
    GeoBoundingBoxFilter,
    GeoDistanceFilter,
    IdentityFilter,
    OrFilter,
    all_of,
    and_filter,
    any_of,
    empty_filter,
    or_filter,
)
from esclient.schema.geo import (
    Distance,
    DistanceType,
    DistanceUnit,
    GeoBoundingBox,
    GeoBoundingBoxConstraint,
    GeoConstraint,
    GeoFilterType,
    LatLon,
    OptimizeBbox,
)
from esclient.schema.index import (
    IndexSettings,
    ReplicaCount,
    ShardCount,
    default_index_settings,
    make_replica_count,
    make_shard_count,
)
from esclient.schema.query import (
    BooleanOperator,
    BoolMatch,
    DefaultField,
    Fields,
    MustMatch,
    MustNotMatch,
    QueryField,
    QueryStringQuery,
    ShouldMatch,
    Term,
    query_string_query,
)
from esclient.schema.responses import (
    EsResult,
    Hit,
    SearchHits,
    SearchResults,
    ShardResults,
    Status,
    Version,
)
from esclient.schema.search import Search
from esclient.services.decoder import (
    DecodeError,
    MalformedResponseError,
    ResponseShapeError,
    decode_document,
    decode_search,
    decode_status,
)
from esclient.services.serializer import encode, to_json

__all__ = [
    "__version__",
    # Addressing and transport
    "Server",
    "join_path",
    "dispatch",
    "existential_query",
    "BaseTransport",
    "OpenSearchTransport",
    "Reply",
    "TransportFailure",
    "get_transport",
    "close_transport",
    # Operations
    "get_status",
    "ping_server",
    "create_index",
    "delete_index",
    "index_exists",
    "open_index",
    "close_index",
    "OpenCloseIndex",
    "create_mapping",
    "delete_mapping",
    "index_document",
    "get_document",
    "document_exists",
    "delete_document",
    "search_by_index",
    "search_by_type",
    # Index settings
    "ShardCount",
    "ReplicaCount",
    "IndexSettings",
    "make_shard_count",
    "make_replica_count",
    "default_index_settings",
    # Filters
    "Filter",
    "AndFilter",
    "OrFilter",
    "IdentityFilter",
    "BoolFilter",
    "ExistsFilter",
    "GeoBoundingBoxFilter",
    "GeoDistanceFilter",
    "empty_filter",
    "and_filter",
    "or_filter",
    "all_of",
    "any_of",
    # Geo
    "LatLon",
    "GeoBoundingBox",
    "GeoBoundingBoxConstraint",
    "GeoConstraint",
    "Distance",
    "DistanceUnit",
    "DistanceType",
    "GeoFilterType",
    "OptimizeBbox",
    # Queries
    "Term",
    "BoolMatch",
    "MustMatch",
    "MustNotMatch",
    "ShouldMatch",
    "BooleanOperator",
    "QueryField",
    "DefaultField",
    "Fields",
    "QueryStringQuery",
    "query_string_query",
    "Search",
    # Responses
    "Version",
    "Status",
    "EsResult",
    "ShardResults",
    "Hit",
    "SearchHits",
    "SearchResults",
    "DecodeError",
    "MalformedResponseError",
    "ResponseShapeError",
    "decode_status",
    "decode_document",
    "decode_search",
    # Serialization
    "to_json",
    "encode",
]
