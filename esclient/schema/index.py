"""Index creation value types. Shard and replica counts validate on construction."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, model_serializer

MIN_COUNT = 1
MAX_COUNT = 1000

BoundedCount = Annotated[int, Field(ge=MIN_COUNT, le=MAX_COUNT, strict=True)]


class ShardCount(RootModel[BoundedCount]):
    """Number of primary shards, in [1, 1000]."""

    model_config = ConfigDict(frozen=True)


class ReplicaCount(RootModel[BoundedCount]):
    """Number of replicas per shard, in [1, 1000]."""

    model_config = ConfigDict(frozen=True)


def make_shard_count(n: int) -> ShardCount | None:
    """Return a ShardCount, or None if n is outside [1, 1000]."""
    try:
        return ShardCount(n)
    except ValidationError:
        return None


def make_replica_count(n: int) -> ReplicaCount | None:
    """Return a ReplicaCount, or None if n is outside [1, 1000]."""
    try:
        return ReplicaCount(n)
    except ValidationError:
        return None


class IndexSettings(BaseModel):
    """Settings sent when creating an index. Serializes to {"settings": {"shards", "replicas"}}."""

    model_config = ConfigDict(frozen=True)

    shards: ShardCount
    replicas: ReplicaCount

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"settings": {"shards": self.shards.root, "replicas": self.replicas.root}}


def default_index_settings() -> IndexSettings:
    """3 shards, 2 replicas."""
    return IndexSettings(shards=ShardCount(3), replicas=ReplicaCount(2))
