"""Shared value types used across the geo API request and response models."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping


def _format_coordinate(value: float) -> str:
    """Format a float in the shortest fixed-point form, without an exponent."""
    text = format(Decimal(repr(float(value))).normalize(), "f")
    return text


@dataclass(frozen=True)
class LatLng:
    """A point given by latitude and longitude in degrees."""

    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{_format_coordinate(self.lat)},{_format_coordinate(self.lng)}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LatLng":
        """Build a point from either the lat/lng or latitude/longitude form."""
        if "lat" in data or "lng" in data:
            return cls(float(data.get("lat", 0.0)), float(data.get("lng", 0.0)))
        if "latitude" in data or "longitude" in data:
            return cls(
                float(data.get("latitude", 0.0)), float(data.get("longitude", 0.0))
            )
        raise ValueError(f"not a location: {dict(data)!r}")


class Mode(str, Enum):
    """Travel mode."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(str, Enum):
    """Route features to avoid."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"


class Units(str, Enum):
    """Unit system for human readable distances."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TransitMode(str, Enum):
    """Transit mode for directions or distance matrix requests."""

    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(str, Enum):
    """Bias for which transit routes are returned."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class TrafficModel(str, Enum):
    """Traffic prediction model for future directions."""

    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


class PriceLevel(str, Enum):
    """Price levels for the Places API."""

    FREE = "0"
    INEXPENSIVE = "1"
    MODERATE = "2"
    EXPENSIVE = "3"
    VERY_EXPENSIVE = "4"


class Component(str, Enum):
    """Keys for the parts of a structured address."""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class RankBy(str, Enum):
    """Order in which place search results are listed."""

    PROMINENCE = "prominence"
    DISTANCE = "distance"


@dataclass
class Distance:
    """A distance between two points, as text and in meters."""

    human_readable: str = ""
    meters: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Distance":
        return cls(
            human_readable=data.get("text", ""),
            meters=int(data.get("value", 0)),
        )


@dataclass
class OpeningHoursOpenClose:
    """A weekday (0 is Sunday) and an hhmm time of day."""

    day: int = 0
    time: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OpeningHoursOpenClose":
        return cls(day=int(data.get("day", 0)), time=data.get("time", ""))


@dataclass
class OpeningHoursPeriod:
    """When a place opens and closes on one day."""

    open: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)
    close: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OpeningHoursPeriod":
        return cls(
            open=OpeningHoursOpenClose.from_dict(data.get("open") or {}),
            close=OpeningHoursOpenClose.from_dict(data.get("close") or {}),
        )


@dataclass
class OpeningHours:
    """Opening hours of a place; flags are None when absent from the response."""

    open_now: bool | None = None
    periods: list[OpeningHoursPeriod] = field(default_factory=list)
    weekday_text: list[str] = field(default_factory=list)
    permanently_closed: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OpeningHours":
        return cls(
            open_now=data.get("open_now"),
            periods=[OpeningHoursPeriod.from_dict(p) for p in data.get("periods") or []],
            weekday_text=list(data.get("weekday_text") or []),
            permanently_closed=data.get("permanently_closed"),
        )


@dataclass
class Photo:
    """A photo attached to a search result."""

    photo_reference: str = ""
    height: int = 0
    width: int = 0
    html_attributions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Photo":
        return cls(
            photo_reference=data.get("photo_reference", ""),
            height=int(data.get("height", 0)),
            width=int(data.get("width", 0)),
            html_attributions=list(data.get("html_attributions") or []),
        )


@dataclass
class PlaceEditorialSummary:
    """A short textual overview of a place and its language."""

    language: str = ""
    overview: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PlaceEditorialSummary":
        return cls(
            language=data.get("language", ""),
            overview=data.get("overview", ""),
        )