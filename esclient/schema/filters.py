"""
Filter algebra: a recursive, immutable tree of filters that serializes to the engine's filter DSL.

IdentityFilter (match_all) is the neutral element of AND composition. `a & b` and
`a | b` wrap both operands in a fresh two-element and/or filter and never flatten,
so `a & b & c` is And[And[a, b], c] (Python operators associate to the left).
Trees differ structurally but match the same documents.
"""

from functools import reduce
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, InstanceOf, model_serializer, model_validator

from esclient.schema.geo import (
    Distance,
    DistanceType,
    GeoBoundingBoxConstraint,
    GeoConstraint,
    GeoFilterType,
    OptimizeBbox,
)
from esclient.schema.query import BoolMatch

DEFAULT_CACHE = False


class Filter(BaseModel):
    """
    Base of every filter. Supports `&` (and) and `|` (or) composition.
    Only the concrete variants below can be built, and children must be filter instances.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _concrete_only(cls, data: Any) -> Any:
        if cls is Filter:
            raise ValueError("Filter is abstract; build one of its variants")
        return data

    def __and__(self, other: "Filter") -> "AndFilter":
        return and_filter(self, other)

    def __or__(self, other: "Filter") -> "OrFilter":
        return or_filter(self, other)


class AndFilter(Filter):
    filters: tuple[InstanceOf[Filter], ...]
    cache: bool = DEFAULT_CACHE

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"and": [f.model_dump() for f in self.filters], "_cache": self.cache}


class OrFilter(Filter):
    filters: tuple[InstanceOf[Filter], ...]
    cache: bool = DEFAULT_CACHE

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"or": [f.model_dump() for f in self.filters], "_cache": self.cache}


class IdentityFilter(Filter):
    """Matches every document."""

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"match_all": {}}


class BoolFilter(Filter):
    match: InstanceOf[BoolMatch]
    cache: bool = DEFAULT_CACHE

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"bool": self.match.model_dump(), "_cache": self.cache}


class ExistsFilter(Filter):
    """Documents with a non-null value in `field`. The engine always caches it."""

    field: str

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"exists": {"field": self.field}}


class GeoBoundingBoxFilter(Filter):
    constraint: GeoBoundingBoxConstraint
    filter_type: GeoFilterType = GeoFilterType.MEMORY
    cache: bool = DEFAULT_CACHE

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {
            "geo_bounding_box": {
                self.constraint.field: self.constraint.box.model_dump(),
                "type": self.filter_type.value,
                "_cache": self.cache,
            }
        }


class GeoDistanceFilter(Filter):
    constraint: GeoConstraint
    distance: Distance
    cache: bool = DEFAULT_CACHE
    distance_type: DistanceType | None = None
    optimize_bbox: OptimizeBbox | None = None

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "distance": self.distance.model_dump(),
            self.constraint.field: self.constraint.point.model_dump(),
        }
        if self.distance_type is not None:
            body["distance_type"] = self.distance_type.value
        if self.optimize_bbox is not None:
            body["optimize_bbox"] = self.optimize_bbox.value
        body["_cache"] = self.cache
        return {"geo_distance": body}


def empty_filter() -> IdentityFilter:
    """The identity of AND composition."""
    return IdentityFilter()


def and_filter(a: Filter, b: Filter) -> AndFilter:
    return AndFilter(filters=(a, b), cache=DEFAULT_CACHE)


def or_filter(a: Filter, b: Filter) -> OrFilter:
    return OrFilter(filters=(a, b), cache=DEFAULT_CACHE)


def all_of(filters: Iterable[Filter]) -> Filter:
    """Conjunction of every filter, folded left from the identity. Empty input matches everything."""
    return reduce(and_filter, filters, empty_filter())


def any_of(filters: Iterable[Filter]) -> Filter:
    """Disjunction of every filter, folded left. Requires at least one filter."""
    filters = list(filters)
    if not filters:
        raise ValueError("any_of() needs at least one filter")
    return reduce(or_filter, filters)
