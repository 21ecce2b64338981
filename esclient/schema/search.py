"""Search request body: an optional query_string query, an optional filter, and paging."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, model_serializer

from esclient.schema.filters import Filter
from esclient.schema.query import QueryStringQuery


class Search(BaseModel):
    """
    Body for POST .../_search. With a filter, the query is wrapped in a `filtered`
    query (match_all when no query is given) so the filter does not affect scoring.
    """

    model_config = ConfigDict(frozen=True)

    query: QueryStringQuery | None = None
    filter: InstanceOf[Filter] | None = None
    size: int | None = Field(default=None, ge=0)
    from_: int | None = Field(default=None, ge=0)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        query = {"query_string": self.query.model_dump()} if self.query is not None else {"match_all": {}}
        if self.filter is not None:
            query = {"filtered": {"query": query, "filter": self.filter.model_dump()}}
        body: dict[str, Any] = {"query": query}
        if self.size is not None:
            body["size"] = self.size
        if self.from_ is not None:
            body["from"] = self.from_
        return body
