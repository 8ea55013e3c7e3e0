import json
from urllib.parse import urlencode

import pytest

from geoapi.roads import (
    NearestRoadsRequest,
    NearestRoadsResponse,
    SnappedPoint,
    SnapToRoadRequest,
    SnapToRoadResponse,
    SpeedLimit,
    SpeedLimitsRequest,
    SpeedLimitsResponse,
    SpeedLimitUnit,
)
from geoapi.types import LatLng

SNAPPED_JSON = """{
  "snappedPoints": [
    {"location": {"latitude": -35.2784167, "longitude": 149.1294692},
     "originalIndex": 0, "placeId": "ChIJoR7CemhNFmsRQB9QbW7qABM"},
    {"location": {"latitude": -35.280321693840129, "longitude": 149.12908274880189},
     "originalIndex": 1, "placeId": "ChIJiy6YT2hNFmsRkHZAbW7qABM"},
    {"location": {"latitude": -35.2803415, "longitude": 149.1290788},
     "placeId": "ChIJiy6YT2hNFmsRkHZAbW7qABM"},
    {"location": {"latitude": -35.2803415, "longitude": 149.1290788},
     "placeId": "ChIJI2FUTGhNFmsRcHpAbW7qABM"},
    {"location": {"latitude": -35.280451499999991, "longitude": 149.1290784},
     "placeId": "ChIJI2FUTGhNFmsRcHpAbW7qABM"},
    {"location": {"latitude": -35.2805167, "longitude": 149.1290879},
     "placeId": "ChIJI2FUTGhNFmsRcHpAbW7qABM"},
    {"location": {"latitude": -35.2805901, "longitude": 149.1291104},
     "placeId": "ChIJI2FUTGhNFmsRcHpAbW7qABM"},
    {"location": {"latitude": -35.2805901, "longitude": 149.1291104},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.280734599999995, "longitude": 149.1291517},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.2807852, "longitude": 149.1291716},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.2808499, "longitude": 149.1292099},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.280923099999995, "longitude": 149.129278},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.280960897210818, "longitude": 149.1293250692261},
     "originalIndex": 2, "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.284728724835304, "longitude": 149.12835061713685},
     "originalIndex": 7, "placeId": "ChIJW5JAZmpNFmsRegG0-Jc80sM"}
  ]
}"""

EXPECTED_POINTS = [
    SnappedPoint(LatLng(-35.2784167, 149.1294692), 0, "ChIJoR7CemhNFmsRQB9QbW7qABM"),
    SnappedPoint(LatLng(-35.28032169384013, 149.1290827488019), 1, "ChIJiy6YT2hNFmsRkHZAbW7qABM"),
    SnappedPoint(LatLng(-35.2803415, 149.1290788), None, "ChIJiy6YT2hNFmsRkHZAbW7qABM"),
    SnappedPoint(LatLng(-35.2803415, 149.1290788), None, "ChIJI2FUTGhNFmsRcHpAbW7qABM"),
    SnappedPoint(LatLng(-35.28045149999999, 149.1290784), None, "ChIJI2FUTGhNFmsRcHpAbW7qABM"),
    SnappedPoint(LatLng(-35.2805167, 149.1290879), None, "ChIJI2FUTGhNFmsRcHpAbW7qABM"),
    SnappedPoint(LatLng(-35.2805901, 149.1291104), None, "ChIJI2FUTGhNFmsRcHpAbW7qABM"),
    SnappedPoint(LatLng(-35.2805901, 149.1291104), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.280734599999995, 149.1291517), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.2807852, 149.1291716), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.2808499, 149.1292099), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.280923099999995, 149.129278), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.28096089721082, 149.1293250692261), 2, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.284728724835304, 149.12835061713685), 7, "ChIJW5JAZmpNFmsRegG0-Jc80sM"),
]

PATH = [
    LatLng(-35.27801, 149.12958),
    LatLng(-35.28032, 149.12907),
    LatLng(-35.28099, 149.12929),
    LatLng(-35.28144, 149.12984),
    LatLng(-35.28194, 149.13003),
    LatLng(-35.28282, 149.12956),
    LatLng(-35.28302, 149.12881),
    LatLng(-35.28473, 149.12836),
]

PLACE_IDS = [
    "ChIJ1Wi6I2pNFmsRQL9GbW7qABM",
    "ChIJ58xCoGlNFmsRUEZUbW7qABM",
    "ChIJ9RhaiGlNFmsR0IxAbW7qABM",
    "ChIJabjuhGlNFmsREIxAbW7qABM",
    "ChIJcSAlFWpNFmsRMHlUbW7qABM",
    "ChIJI2FUTGhNFmsRcHpAbW7qABM",
    "ChIJiy6YT2hNFmsRkHZAbW7qABM",
    "ChIJoR7CemhNFmsRQB9QbW7qABM",
    "ChIJP2m_FWpNFmsRIHlUbW7qABM",
    "ChIJtV7La2pNFmsRAGpHbW7qABM",
    "ChIJW5JAZmpNFmsRegG0-Jc80sM",
    "ChIJW9R7smlNFmsRMH1AbW7qABM",
    "ChIJy8c0r2lNFmsRQEZUbW7qABM",
]


def _query(params):
    return urlencode(sorted(params.items()), doseq=True)


def test_snap_to_road_response():
    resp = SnapToRoadResponse.from_dict(json.loads(SNAPPED_JSON))
    assert resp == SnapToRoadResponse(snapped_points=EXPECTED_POINTS)


def test_snap_to_road_request_valid():
    request = SnapToRoadRequest(path=PATH)
    request.validate()
    assert request.params()["path"][0].startswith("-35.27801,149.12958|")


def test_snap_to_road_no_path():
    with pytest.raises(ValueError, match="Path empty"):
        SnapToRoadRequest().validate()


def test_snap_to_road_request_url():
    request = SnapToRoadRequest(path=[LatLng(1, 2), LatLng(3, 4)], interpolate=True)
    assert _query(request.params()) == "interpolate=true&path=1%2C2%7C3%2C4"


def test_snap_to_road_without_interpolate():
    request = SnapToRoadRequest(path=[LatLng(1, 2)])
    assert request.params() == {"path": ["1,2"]}


def test_nearest_roads_response():
    resp = NearestRoadsResponse.from_dict(json.loads(SNAPPED_JSON))
    assert resp == NearestRoadsResponse(snapped_points=EXPECTED_POINTS)


def test_nearest_roads_no_points():
    with pytest.raises(ValueError, match="Points empty"):
        NearestRoadsRequest().validate()


def test_nearest_roads_params():
    request = NearestRoadsRequest(points=[LatLng(1, 2), LatLng(3, 4)])
    assert _query(request.params()) == "points=1%2C2%7C3%2C4"


def test_speed_limits_response():
    data = {
        "speedLimits": [
            {"placeId": pid, "speedLimit": 60, "units": "KPH"} for pid in PLACE_IDS
        ]
    }
    resp = SpeedLimitsResponse.from_dict(data)
    assert resp == SpeedLimitsResponse(
        speed_limits=[SpeedLimit(pid, 60.0, SpeedLimitUnit.KPH) for pid in PLACE_IDS],
        snapped_points=[],
    )


def test_speed_limits_no_place_ids():
    with pytest.raises(ValueError, match="both empty"):
        SpeedLimitsRequest().validate()


def test_speed_limits_place_ids_only_params():
    request = SpeedLimitsRequest(place_id=PLACE_IDS[:2])
    request.validate()
    assert request.params() == {"placeId": PLACE_IDS[:2]}


def test_speed_limits_request_url():
    request = SpeedLimitsRequest(
        path=[LatLng(-35.27801, 149.12958), LatLng(-35.28032, 149.12907)],
        place_id=PLACE_IDS[:2],
        units=SpeedLimitUnit.MPH,
    )
    assert _query(request.params()) == (
        "path=-35.27801%2C149.12958%7C-35.28032%2C149.12907"
        "&placeId=ChIJ1Wi6I2pNFmsRQL9GbW7qABM"
        "&placeId=ChIJ58xCoGlNFmsRUEZUbW7qABM&units=MPH"
    )


def test_snapped_point_without_index():
    point = SnappedPoint.from_dict(
        {"location": {"latitude": 1.5, "longitude": 2.5}, "placeId": "p"}
    )
    assert point == SnappedPoint(LatLng(1.5, 2.5), None, "p")