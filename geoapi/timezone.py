"""Request and response models for the time zone service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from geoapi.types import LatLng

TIMEZONE_HOST = "https://maps.googleapis.com"
TIMEZONE_PATH = "/maps/api/timezone/json"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_ACCEPTED_STATUSES = {"", "OK", "ZERO_RESULTS"}


def _unix_seconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(seconds=1)


@dataclass
class TimezoneRequest:
    """A location and moment whose time zone is wanted.

    Naive timestamps are taken as UTC.
    """

    location: LatLng | None = None
    timestamp: datetime = field(default=_ZERO_TIME)
    language: str = ""

    def validate(self) -> None:
        """Raise ValueError if the request cannot be sent."""
        if self.location is None:
            raise ValueError("maps: Location missing")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters of the request."""
        self.validate()
        query = {
            "location": [str(self.location)],
            "timestamp": [str(_unix_seconds(self.timestamp))],
        }
        if self.language:
            query["language"] = [self.language]
        return query


@dataclass
class TimezoneResult:
    """Offsets (in seconds) and names of the time zone at a location."""

    dst_offset: int = 0
    raw_offset: int = 0
    time_zone_id: str = ""
    time_zone_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimezoneResult":
        """Build a result, raising ValueError for an error status."""
        status = data.get("status", "")
        if status not in _ACCEPTED_STATUSES:
            message = data.get("error_message", "")
            detail = f"{status} - {message}" if message else status
            raise ValueError(f"maps: {detail}")
        return cls(
            dst_offset=int(data.get("dstOffset", 0)),
            raw_offset=int(data.get("rawOffset", 0)),
            time_zone_id=data.get("timeZoneId", ""),
            time_zone_name=data.get("timeZoneName", ""),
        )