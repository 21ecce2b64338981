"""Geo and distance value records used by geo filters. No validation beyond type shape."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class DistanceUnit(str, Enum):
    """Distance units; values are the engine's unit suffixes."""

    MILES = "mi"
    YARDS = "yd"
    FEET = "ft"
    INCHES = "in"
    KILOMETERS = "km"
    METERS = "m"
    CENTIMETERS = "cm"
    MILLIMETERS = "mm"
    NAUTICAL_MILES = "nmi"


class DistanceType(str, Enum):
    """How geo_distance computes distances."""

    ARC = "arc"
    SLOPPY_ARC = "sloppy_arc"
    PLANE = "plane"


class GeoFilterType(str, Enum):
    """Execution mode of a geo_bounding_box filter."""

    MEMORY = "memory"
    INDEXED = "indexed"


class OptimizeBbox(str, Enum):
    """Bounding-box pre-check used by geo_distance."""

    MEMORY = "memory"
    INDEXED = "indexed"
    NONE = "none"


class LatLon(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)


class GeoBoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_left: LatLon
    bottom_right: LatLon


class GeoBoundingBoxConstraint(BaseModel):
    """A bounding box applied to a geo_point field."""

    model_config = ConfigDict(frozen=True)

    field: str
    box: GeoBoundingBox


class GeoConstraint(BaseModel):
    """A reference point applied to a geo_point field."""

    model_config = ConfigDict(frozen=True)

    field: str
    point: LatLon


def format_coefficient(coefficient: float) -> str:
    """Render 200.0 as "200" and 12.5 as "12.5"."""
    if float(coefficient).is_integer():
        return str(int(coefficient))
    return repr(float(coefficient))


class Distance(BaseModel):
    """A distance such as 12.5 miles. Serializes to "<coefficient><unit>", e.g. "12.5mi"."""

    model_config = ConfigDict(frozen=True)

    coefficient: float = Field(allow_inf_nan=False)
    unit: DistanceUnit

    @model_serializer
    def _serialize(self) -> str:
        return f"{format_coefficient(self.coefficient)}{self.unit.value}"
