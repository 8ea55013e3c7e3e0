"""Request and response models for the road snapping and speed limit services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from geoapi.types import LatLng

SNAP_TO_ROADS_PATH = "/v1/snapToRoads"
NEAREST_ROADS_PATH = "/v1/nearestRoads"
SPEED_LIMITS_PATH = "/v1/speedLimits"
ROADS_HOST = "https://roads.googleapis.com"


class SpeedLimitUnit(str, Enum):
    """Unit in which speed limits are requested and reported."""

    MPH = "MPH"
    KPH = "KPH"


def _join_points(points: list[LatLng]) -> str:
    return "|".join(str(p) for p in points)


def _unit(value: Any) -> SpeedLimitUnit | str:
    try:
        return SpeedLimitUnit(value)
    except ValueError:
        return value


@dataclass
class SnappedPoint:
    """A path point snapped to a road.

    ``original_index`` is None for interpolated points.
    """

    location: LatLng = field(default_factory=lambda: LatLng(0.0, 0.0))
    original_index: int | None = None
    place_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SnappedPoint":
        index = data.get("originalIndex")
        location = data.get("location")
        return cls(
            location=LatLng.from_dict(location) if location else LatLng(0.0, 0.0),
            original_index=int(index) if index is not None else None,
            place_id=data.get("placeId", ""),
        )


def _snapped_points(data: Mapping[str, Any]) -> list[SnappedPoint]:
    return [SnappedPoint.from_dict(p) for p in data.get("snappedPoints") or []]


@dataclass
class SnapToRoadRequest:
    """A path to be snapped to roads, optionally interpolated."""

    path: list[LatLng] = field(default_factory=list)
    interpolate: bool = False

    def validate(self) -> None:
        """Raise ValueError if the request cannot be sent."""
        if not self.path:
            raise ValueError("maps: Path empty")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters of the request."""
        query = {"path": [_join_points(self.path)]}
        if self.interpolate:
            query["interpolate"] = ["true"]
        return query


@dataclass
class SnapToRoadResponse:
    """The snapped points of a path."""

    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SnapToRoadResponse":
        return cls(snapped_points=_snapped_points(data))


@dataclass
class NearestRoadsRequest:
    """Independent points to be snapped to their nearest roads."""

    points: list[LatLng] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValueError if the request cannot be sent."""
        if not self.points:
            raise ValueError("maps: Points empty")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters of the request."""
        return {"points": [_join_points(self.points)]}


@dataclass
class NearestRoadsResponse:
    """The points snapped to their nearest roads."""

    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NearestRoadsResponse":
        return cls(snapped_points=_snapped_points(data))


@dataclass
class SpeedLimitsRequest:
    """A path or place identifiers whose speed limits are wanted.

    ``units`` defaults to the service's own choice (KPH) when left empty.
    """

    path: list[LatLng] = field(default_factory=list)
    place_id: list[str] = field(default_factory=list)
    units: SpeedLimitUnit | str = ""

    def validate(self) -> None:
        """Raise ValueError if the request cannot be sent."""
        if not self.path and not self.place_id:
            raise ValueError("maps: Path and PlaceID both empty")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters of the request."""
        query: dict[str, list[str]] = {}
        if self.path:
            query["path"] = [_join_points(self.path)]
        if self.place_id:
            query["placeId"] = list(self.place_id)
        if self.units:
            units = self.units
            query["units"] = [units.value if isinstance(units, Enum) else str(units)]
        return query


@dataclass
class SpeedLimit:
    """The speed limit of one road segment."""

    place_id: str = ""
    speed_limit: float = 0.0
    units: SpeedLimitUnit | str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpeedLimit":
        return cls(
            place_id=data.get("placeId", ""),
            speed_limit=float(data.get("speedLimit", 0.0)),
            units=_unit(data.get("units", "")),
        )


@dataclass
class SpeedLimitsResponse:
    """Speed limits and the snapped points they apply to."""

    speed_limits: list[SpeedLimit] = field(default_factory=list)
    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpeedLimitsResponse":
        return cls(
            speed_limits=[SpeedLimit.from_dict(s) for s in data.get("speedLimits") or []],
            snapped_points=_snapped_points(data),
        )