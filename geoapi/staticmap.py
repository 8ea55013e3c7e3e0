"""Request model and image decoding for the static map image service."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from PIL import Image

from geoapi.types import LatLng

STATIC_MAP_HOST = "https://maps.googleapis.com"
STATIC_MAP_PATH = "/maps/api/staticmap"


class MapType(str, Enum):
    """Kind of map to draw."""

    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"


class Format(str, Enum):
    """Image format of the returned map."""

    PNG8 = "png8"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"


class MarkerSize(str, Enum):
    """Size of a marker."""

    TINY = "tiny"
    MID = "mid"
    SMALL = "small"


class Anchor(str, Enum):
    """Placement of a custom icon relative to its marker location."""

    TOP = "top"
    BOTTOM = "Bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOPLEFT = "topleft"
    TOPRIGHT = "topright"
    BOTTOMLEFT = "bottomleft"
    BOTTOMRIGHT = "bottomright"


def _text(value: object) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _encode_signed(value: int) -> str:
    shifted = value << 1
    if value < 0:
        shifted = ~shifted
    chunks = []
    while shifted >= 0x20:
        chunks.append(chr((0x20 | (shifted & 0x1F)) + 63))
        shifted >>= 5
    chunks.append(chr(shifted + 63))
    return "".join(chunks)


def _encode_polyline(points: Iterable[LatLng]) -> str:
    """Encode points in the compact polyline text format."""
    out = []
    prev_lat = prev_lng = 0
    for point in points:
        lat = round(point.lat * 1e5)
        lng = round(point.lng * 1e5)
        out.append(_encode_signed(lat - prev_lat))
        out.append(_encode_signed(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(out)


@dataclass
class CustomIcon:
    """An icon that replaces the default map pin."""

    icon_url: str = ""
    anchor: Anchor | str = ""
    scale: int = 0

    def __str__(self) -> str:
        parts = []
        if self.icon_url:
            parts.append(f"icon:{self.icon_url}")
        if self.anchor:
            parts.append(f"anchor:{_text(self.anchor)}")
        if self.scale:
            parts.append(f"scale:{self.scale}")
        return "|".join(parts)


@dataclass
class Marker:
    """A map pin at one or more locations or at an address."""

    color: str = ""
    label: str = ""
    size: MarkerSize | str = ""
    custom_icon: CustomIcon = field(default_factory=CustomIcon)
    location: list[LatLng] = field(default_factory=list)
    location_address: str = ""

    def __str__(self) -> str:
        parts = []
        if self.custom_icon != CustomIcon():
            parts.append(str(self.custom_icon))
        else:
            if self.color:
                parts.append(f"color:{self.color}")
            if self.label:
                parts.append(f"label:{self.label}")
            if self.size:
                parts.append(f"size:{_text(self.size)}")
        parts.extend(str(point) for point in self.location)
        if self.location_address:
            parts.append(self.location_address)
        return "|".join(parts)


@dataclass
class Path:
    """Connected points drawn over the map, optionally as a filled polygon."""

    weight: int = 0
    color: str = ""
    fill_color: str = ""
    geodesic: bool = False
    location: list[LatLng] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.fill_color:
            parts.append(f"fillcolor:{self.fill_color}")
        if self.weight:
            parts.append(f"weight:{self.weight}")
        if self.geodesic:
            parts.append("geodesic:true")
        if not self.location:
            return "|".join(parts)

        encoded = f"enc:{_encode_polyline(self.location)}"
        points = [str(point) for point in self.location]
        if len("|".join(points)) > len(encoded):
            parts.append(encoded)
        else:
            parts.extend(points)
        return "|".join(parts)


@dataclass
class StaticMapRequest:
    """Parameters of a static map image request."""

    center: str = ""
    zoom: int = 0
    size: str = ""
    scale: int = 0
    format: Format | str = ""
    language: str = ""
    region: str = ""
    map_type: MapType | str = ""
    map_id: str = ""
    markers: list[Marker] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    visible: list[LatLng] = field(default_factory=list)
    map_styles: list[str] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValueError if the request cannot be sent."""
        if not self.markers and not self.center and self.zoom == 0:
            raise ValueError("maps: Center & Zoom required if Markers empty")
        if not self.size:
            raise ValueError("maps: Size empty")

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters of the request."""
        query: dict[str, list[str]] = {}
        if self.center:
            query["center"] = [self.center]
        if self.zoom > 0:
            query["zoom"] = [str(self.zoom)]
        if self.size:
            query["size"] = [self.size]
        if self.scale > 0:
            query["scale"] = [str(self.scale)]
        if self.format:
            query["format"] = [_text(self.format)]
        if self.language:
            query["language"] = [self.language]
        if self.region:
            query["region"] = [self.region]
        if self.map_type:
            query["maptype"] = [_text(self.map_type)]
        if self.map_id:
            query["map_id"] = [self.map_id]
        if self.markers:
            query["markers"] = [str(marker) for marker in self.markers]
        if self.paths:
            query["path"] = [str(path) for path in self.paths]
        if self.visible:
            query["visible"] = ["|".join(str(point) for point in self.visible)]
        if self.map_styles:
            query["style"] = list(self.map_styles)
        return query


def decode_static_map(status: int, body: bytes) -> Image.Image:
    """Decode a static map response body into an image.

    Raises RuntimeError when the service answered with a status other than 200.
    """
    if status != 200:
        text = body.decode("utf-8", errors="replace")
        raise RuntimeError(f"Maps Static API: {status} - {text}")
    image = Image.open(io.BytesIO(body))
    image.load()
    return image