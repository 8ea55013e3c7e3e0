"""Field masks that select which fields place details and search return."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class PlaceDetailsFieldMask(str, Enum):
    """A field to be returned by a place details request."""

    ADDRESS_COMPONENT = "address_component"
    ADR_ADDRESS = "adr_address"
    BUSINESS_STATUS = "business_status"
    CURBSIDE_PICKUP = "curbside_pickup"
    DELIVERY = "delivery"
    DINE_IN = "dine_in"
    EDITORIAL_SUMMARY = "editorial_summary"
    FORMATTED_ADDRESS = "formatted_address"
    FORMATTED_PHONE_NUMBER = "formatted_phone_number"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_NORTHEAST_LAT = "geometry/viewport/northeast/lat"
    GEOMETRY_VIEWPORT_NORTHEAST_LNG = "geometry/viewport/northeast/lng"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    GEOMETRY_VIEWPORT_SOUTHWEST_LAT = "geometry/viewport/southwest/lat"
    GEOMETRY_VIEWPORT_SOUTHWEST_LNG = "geometry/viewport/southwest/lng"
    ICON = "icon"
    ID = "id"
    INTERNATIONAL_PHONE_NUMBER = "international_phone_number"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    CURRENT_OPENING_HOURS = "current_opening_hours"
    SECONDARY_OPENING_HOURS = "secondary_opening_hours"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PRICE_LEVEL = "price_level"
    RATINGS = "rating"
    USER_RATINGS_TOTAL = "user_ratings_total"
    RESERVABLE = "reservable"
    REVIEWS = "reviews"
    SERVES_BEER = "serves_beer"
    SERVES_BREAKFAST = "serves_breakfast"
    SERVES_BRUNCH = "serves_brunch"
    SERVES_DINNER = "serves_dinner"
    SERVES_LUNCH = "serves_lunch"
    SERVES_VEGETARIAN_FOOD = "serves_vegetarian_food"
    SERVES_WINE = "serves_wine"
    TAKEOUT = "takeout"
    TYPES = "types"
    URL = "url"
    UTC_OFFSET = "utc_offset"
    VICINITY = "vicinity"
    WEBSITE = "website"
    WHEELCHAIR_ACCESSIBLE_ENTRANCE = "wheelchair_accessible_entrance"


class PlaceSearchFieldMask(str, Enum):
    """A field to be returned by a place search request."""

    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_NORTHEAST_LAT = "geometry/viewport/northeast/lat"
    GEOMETRY_VIEWPORT_NORTHEAST_LNG = "geometry/viewport/northeast/lng"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    GEOMETRY_VIEWPORT_SOUTHWEST_LAT = "geometry/viewport/southwest/lat"
    GEOMETRY_VIEWPORT_SOUTHWEST_LNG = "geometry/viewport/southwest/lng"
    ICON = "icon"
    ID = "id"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    OPENING_HOURS_OPEN_NOW = "opening_hours/open_now"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    USER_RATINGS_TOTAL = "user_ratings_total"
    REFERENCE = "reference"
    TYPES = "types"
    VICINITY = "vicinity"


def parse_place_details_field_mask(value: str) -> PlaceDetailsFieldMask:
    """Parse a place details field name, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return PlaceDetailsFieldMask(value.lower())
    except ValueError:
        raise ValueError(f'Unknown PlaceDetailsFieldMask "{value}"') from None


def parse_place_search_field_mask(value: str) -> PlaceSearchFieldMask:
    """Parse a place search field name, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return PlaceSearchFieldMask(value.lower())
    except ValueError:
        raise ValueError(f'Unknown PlaceSearchFieldMask "{value}"') from None


def _as_strings(fields: Iterable[str]) -> list[str]:
    return [f.value if isinstance(f, Enum) else str(f) for f in fields]


def place_details_field_masks_as_strings(
    fields: Iterable[PlaceDetailsFieldMask],
) -> list[str]:
    """Return the wire names of the given details field masks, in order."""
    return _as_strings(fields)


def place_search_field_masks_as_strings(
    fields: Iterable[PlaceSearchFieldMask],
) -> list[str]:
    """Return the wire names of the given search field masks, in order."""
    return _as_strings(fields)