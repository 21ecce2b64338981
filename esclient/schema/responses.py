"""
Response records decoded from engine replies. Structural mirrors of the engine's JSON;
underscore-prefixed wire keys (_index, _source, ...) are mapped through aliases.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Version(ResponseModel):
    number: str
    build_hash: str
    build_timestamp: datetime
    build_snapshot: bool
    lucene_version: str


class Status(ResponseModel, Generic[T]):
    """Reply to GET on the server root."""

    ok: bool
    status: int
    name: str
    version: T
    tagline: str


class EsResult(ResponseModel, Generic[T]):
    """Per-document envelope returned by document GET/PUT. `found` is absent on writes."""

    index: str = Field(alias="_index")
    type: str = Field(alias="_type")
    id: str = Field(alias="_id")
    version: int = Field(alias="_version")
    found: bool | None = None
    source: T = Field(alias="_source")


class ShardResults(ResponseModel):
    total: int
    successful: int
    failed: int


class Hit(ResponseModel, Generic[T]):
    index: str = Field(alias="_index")
    type: str = Field(alias="_type")
    id: str = Field(alias="_id")
    score: float | None = Field(alias="_score")
    source: T = Field(alias="_source")


class SearchHits(ResponseModel, Generic[T]):
    total: int
    max_score: float | None
    hits: list[Hit[T]]


class SearchResults(ResponseModel, Generic[T]):
    took: int
    timed_out: bool
    shards: ShardResults = Field(alias="_shards")
    hits: SearchHits[T]


DocumentSource = dict[str, Any]
