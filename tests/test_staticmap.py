import io
from urllib.parse import urlencode

import pytest
from PIL import Image

from geoapi.staticmap import (
    Anchor,
    CustomIcon,
    Format,
    MapType,
    Marker,
    Path,
    StaticMapRequest,
    decode_static_map,
)
from geoapi.types import LatLng


def _encode(params):
    return urlencode(sorted(params.items()), doseq=True)


def _png(width, height):
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_static_map_query():
    request = StaticMapRequest(
        center="Brooklyn Bridge,New York,NY",
        size="600x300",
        zoom=13,
        scale=2,
        language="EN-us",
        format="PNG",
        region="US",
        map_type=MapType("roadmap"),
    )
    request.validate()
    assert _encode(request.params()) == (
        "center=Brooklyn+Bridge%2CNew+York%2CNY&format=PNG&language=EN-us"
        "&maptype=roadmap&region=US&scale=2&size=600x300&zoom=13"
    )


def test_decode_static_map_dimensions():
    image = decode_static_map(200, _png(640, 400))
    assert image.size == (640, 400)


def test_decode_static_map_error_status():
    with pytest.raises(RuntimeError, match="Maps Static API: 500 - boom"):
        decode_static_map(500, b"boom")


def test_map_styles():
    request = StaticMapRequest(map_styles=["x", "y"])
    assert _encode(request.params()) == "style=x&style=y"


def test_custom_icon_markers():
    marker = Marker(
        custom_icon=CustomIcon(icon_url="[email]", anchor="topleft", scale=2),
        location=[LatLng(3.1225951401, 101.6404967928)],
    )
    request = StaticMapRequest(markers=[marker])
    assert request.params()["markers"] == [
        "icon:[email]|anchor:topleft|scale:2|3.1225951401,101.6404967928"
    ]


def test_markers_with_location_and_address():
    marker = Marker(
        location=[LatLng(3.1225951401, 101.6404967928)],
        location_address="my Marker address",
    )
    request = StaticMapRequest(markers=[marker])
    assert request.params()["markers"] == [
        "3.1225951401,101.6404967928|my Marker address"
    ]


def test_marker_style_ignored_with_custom_icon():
    marker = Marker(
        color="red",
        label="A",
        custom_icon=CustomIcon(icon_url="icon.png"),
        location=[LatLng(1, 2)],
    )
    assert str(marker) == "icon:icon.png|1,2"


def test_marker_plain_style():
    marker = Marker(color="blue", label="S", size="tiny", location=[LatLng(1, 2)])
    assert str(marker) == "color:blue|label:S|size:tiny|1,2"


def test_custom_icon_enum_anchor():
    icon = CustomIcon(icon_url="a.png", anchor=Anchor.BOTTOM)
    assert str(icon) == "icon:a.png|anchor:Bottom"


def test_empty_custom_icon_string():
    assert str(CustomIcon()) == ""


def test_path_short_uses_points():
    path = Path(color="0xff0000ff", weight=5, location=[LatLng(1, 2)])
    assert str(path) == "color:0xff0000ff|weight:5|1,2"


def test_path_long_uses_encoding():
    path = Path(
        location=[
            LatLng(38.5, -120.2),
            LatLng(40.7, -120.95),
            LatLng(43.252, -126.453),
        ]
    )
    assert str(path) == "enc:_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_path_style_without_location():
    path = Path(fill_color="0xFFFF0033", geodesic=True)
    assert str(path) == "fillcolor:0xFFFF0033|geodesic:true"


def test_params_visible_paths_and_format_enum():
    request = StaticMapRequest(
        center="Paris",
        zoom=3,
        size="100x100",
        format=Format.JPG_BASELINE,
        map_id="abc",
        paths=[Path(location=[LatLng(1, 2)])],
        visible=[LatLng(1, 2), LatLng(3, 4)],
    )
    params = request.params()
    assert params["format"] == ["jpg-baseline"]
    assert params["map_id"] == ["abc"]
    assert params["path"] == ["1,2"]
    assert params["visible"] == ["1,2|3,4"]


def test_validate_requires_center_or_markers():
    with pytest.raises(ValueError, match="Center & Zoom required"):
        StaticMapRequest(size="10x10").validate()


def test_validate_requires_size():
    with pytest.raises(ValueError, match="Size empty"):
        StaticMapRequest(center="Paris").validate()


def test_validate_accepts_markers_without_center():
    request = StaticMapRequest(size="10x10", markers=[Marker(location=[LatLng(1, 2)])])
    request.validate()
    assert request.params()["size"] == ["10x10"]
    assert "center" not in request.params()