"""
Query DSL value types: term matches, bool clauses, and the query_string query.
Each type serializes to the engine's JSON shape through model_dump().
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

TermValue = str | int | float | bool


class Term(BaseModel):
    """Exact value match on one field: {"term": {field: value}}."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str
    value: TermValue

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"term": {self.field: self.value}}


class BoolMatch(BaseModel):
    """Base for the clauses of a bool filter. Only the concrete clauses can be built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _concrete_only(cls, data: Any) -> Any:
        if cls is BoolMatch:
            raise ValueError("use MustMatch, MustNotMatch or ShouldMatch")
        return data


class MustMatch(BoolMatch):
    term: Term

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"must": self.term.model_dump()}


class MustNotMatch(BoolMatch):
    term: Term

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"must_not": self.term.model_dump()}


class ShouldMatch(BoolMatch):
    terms: tuple[Term, ...]

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"should": [t.model_dump() for t in self.terms]}


class BooleanOperator(str, Enum):
    AND = "AND"
    OR = "OR"


class QueryField(BaseModel):
    """Which fields a query_string query runs against. Only the concrete selectors can be built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _concrete_only(cls, data: Any) -> Any:
        if cls is QueryField:
            raise ValueError("use DefaultField or Fields")
        return data


class DefaultField(QueryField):
    name: str

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"default_field": self.name}


class Fields(QueryField):
    """Several fields, optionally combined with dis_max and a tie breaker."""

    names: tuple[str, ...]
    use_dis_max: bool = True
    tie_breaker: float = 0.0

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {
            "fields": list(self.names),
            "use_dis_max": self.use_dis_max,
            "tie_breaker": self.tie_breaker,
        }


# Optional knobs in wire order; the attribute name is the wire name.
QUERY_STRING_OPTIONS = (
    "default_operator",
    "analyzer",
    "allow_leading_wildcard",
    "lowercase_expanded_terms",
    "enable_position_increments",
    "fuzzy_max_expansions",
    "fuzziness",
    "fuzzy_prefix_length",
    "phrase_slop",
    "boost",
    "analyze_wildcard",
    "auto_generate_phrase_queries",
    "minimum_should_match",
    "lenient",
    "locale",
)


class QueryStringQuery(BaseModel):
    """
    A query_string query. Only `query` is required; every option left as None is
    omitted from the serialized body so the engine default applies.
    Build with query_string_query(text) and refine with with_options(...).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str
    # engine default: _all
    field: DefaultField | Fields | None = None
    # engine default: OR
    default_operator: BooleanOperator | None = None
    analyzer: str | None = None
    allow_leading_wildcard: bool | None = None
    lowercase_expanded_terms: bool | None = None
    enable_position_increments: bool | None = None
    fuzzy_max_expansions: int | None = Field(default=None, ge=0)
    # e.g. "AUTO", "0.5", "2"
    fuzziness: str | None = None
    fuzzy_prefix_length: int | None = Field(default=None, ge=0)
    # 0 means exact phrase matches
    phrase_slop: int | None = Field(default=None, ge=0)
    boost: float | None = None
    analyze_wildcard: bool | None = None
    auto_generate_phrase_queries: bool | None = None
    # free-form: "75%", "3<90%"
    minimum_should_match: str | None = None
    lenient: bool | None = None
    locale: str | None = None

    def with_options(self, **changes: Any) -> "QueryStringQuery":
        """Return a copy with the given options set. Unknown or invalid options raise ValidationError."""
        return type(self).model_validate({**dict(self), **changes})

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        body: dict[str, Any] = {"query": self.query}
        if self.field is not None:
            body.update(self.field.model_dump())
        for name in QUERY_STRING_OPTIONS:
            value = getattr(self, name)
            if value is None:
                continue
            body[name] = value.value if isinstance(value, Enum) else value
        return body


def query_string_query(query: str) -> QueryStringQuery:
    """A query_string query with every option left at the engine default."""
    return QueryStringQuery(query=query)
