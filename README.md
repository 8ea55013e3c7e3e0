# geoapi

Typed request and response models for three mapping web services:

- **Roads** (`geoapi.roads`): snap a path to roads, find the nearest roads, look up speed limits.
- **Time Zone** (`geoapi.timezone`): find the time zone at a location for a given moment.
- **Static Maps** (`geoapi.staticmap`): build map image requests with markers, paths and styles, and decode the image that comes back.

Alongside these the package has:

- `geoapi.types`: shared value types such as `LatLng`, `Distance`, `OpeningHours`, `Photo` and `PlaceEditorialSummary`, and enumerations such as `Mode`, `Avoid`, `Units`, `TrafficModel` and `PriceLevel`.
- `geoapi.placetypes`: the `PlaceType` and `AutocompletePlaceType` vocabularies with case-insensitive parsers.
- `geoapi.fieldmasks`: the `PlaceDetailsFieldMask` and `PlaceSearchFieldMask` vocabularies with parsers and helpers that turn lists of masks into their wire names.
- `geoapi.transport`: `UserAgentTransport`, which adds the library's user agent to outgoing `urllib.request.Request` objects.

## Installation

```
pip install geoapi
```

For running the tests:

```
pip install "geoapi[test]"
pytest
```

## Building requests

Each request class checks its own required fields with `validate()`, which raises `ValueError` when something is missing. `params()` returns the query parameters as a dictionary mapping each name to a list of values, ready for `urllib.parse.urlencode(..., doseq=True)`.

```python
from urllib.parse import urlencode

from geoapi.roads import (
    ROADS_HOST,
    SNAP_TO_ROADS_PATH,
    SnapToRoadRequest,
    SpeedLimitsRequest,
    SpeedLimitUnit,
)
from geoapi.types import LatLng

snap = SnapToRoadRequest(
    path=[LatLng(-35.27801, 149.12958), LatLng(-35.28032, 149.12907)],
    interpolate=True,
)
snap.validate()
query = snap.params()
# {"path": ["-35.27801,149.12958|-35.28032,149.12907"], "interpolate": ["true"]}

query["key"] = ["placeholder"]
url = f"{ROADS_HOST}{SNAP_TO_ROADS_PATH}?{urlencode(query, doseq=True)}"

limits = SpeedLimitsRequest(
    place_id=["ChIJ1Wi6I2pNFmsRQL9GbW7qABM"],
    units=SpeedLimitUnit.MPH,
)
limits.validate()
```

`TimezoneRequest` takes a `LatLng` and a `datetime`; a naive timestamp is taken as UTC and is sent as whole Unix seconds.

## Parsing responses

Response classes are built from decoded JSON with `from_dict`:

```python
import json

from geoapi.roads import SnapToRoadResponse
from geoapi.timezone import TimezoneResult

points = SnapToRoadResponse.from_dict(json.loads(body)).snapped_points
zone = TimezoneResult.from_dict({"status": "OK", "timeZoneId": "America/Los_Angeles", "rawOffset": -28800})
```

A `SnappedPoint` has `original_index` set to `None` for interpolated points. `TimezoneResult.from_dict` raises `ValueError` when the response carries a status other than `OK` or `ZERO_RESULTS`; for `ZERO_RESULTS` it returns an empty result. `LatLng.from_dict` accepts both the `lat`/`lng` and the `latitude`/`longitude` forms.

## Static maps

```python
from geoapi.staticmap import MapType, Marker, StaticMapRequest, decode_static_map
from geoapi.types import LatLng

request = StaticMapRequest(
    center="Brooklyn Bridge,New York,NY",
    zoom=13,
    size="600x300",
    map_type=MapType.ROADMAP,
    markers=[Marker(location=[LatLng(40.7061, -73.9969)])],
)
request.validate()
query = request.params()

image = decode_static_map(status, body)  # a Pillow image; RuntimeError on a non-200 status
```

A `Marker` with a `CustomIcon` uses the icon's settings in place of its color, label and size. A `Path` is sent in the compact encoded polyline form whenever that is shorter than the plain list of coordinates.

## Place types and field masks

```python
from geoapi.fieldmasks import parse_place_details_field_mask, place_details_field_masks_as_strings
from geoapi.placetypes import parse_place_type

parse_place_type("Cafe")                     # PlaceType.CAFE
parse_place_details_field_mask("geometry")   # PlaceDetailsFieldMask.GEOMETRY
place_details_field_masks_as_strings([parse_place_details_field_mask("name")])  # ["name"]
```

Unknown names raise `ValueError`.

## User agent transport

```python
import urllib.request

from geoapi.transport import UserAgentTransport

transport = UserAgentTransport()  # sends with urllib.request.urlopen by default
response = transport.round_trip(urllib.request.Request(url))
```

The request is copied before the header is set, so the caller's request is left unchanged. An existing User-Agent is kept and the library's agent is appended after a `;`.

## What the package does not do

There is no service client: the package does not hold an API key, build full request URLs for you, send the requests, retry them or read the responses. You compose the URL from the host and path constants and `params()`, send it with any HTTP library (or `UserAgentTransport`), and pass the decoded body to the matching `from_dict` or to `decode_static_map`. There are no request models for directions, distance matrix, geocoding or places; the types for those services (travel modes, place types, field masks and so on) are provided as vocabularies only.