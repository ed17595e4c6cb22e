"""Parsing of command-line tokens into exactly one typed coordinate."""

from __future__ import annotations

import re
from collections.abc import Sequence

from domain.models import GeographicCoordinate, Hemisphere, MGSCoordinate, UTMCoordinate
from shared.constants import MAX_UTM_ZONE, MIN_UTM_ZONE
from shared.exceptions import ValidationError

from services.coordinate_converter import Coordinate

ZONE_TOKEN_RE = re.compile(r'^([0-9]+)([NS]?)$')
ZONE_TOKEN_MAX_LEN = 3


def _parse_float(text: str, what: str) -> float:
    try:
        return float(text)
    except ValueError:
        msg = f'Expected a numeric {what} but got "{text}".'
        raise ValidationError(msg) from None


def _parse_zone_number(text: str, original: str) -> int:
    if not (text.isascii() and text.isdigit()):
        msg = f'Expected a zone in {MIN_UTM_ZONE:02d}..{MAX_UTM_ZONE} but got "{original}".'
        raise ValidationError(msg)
    zone = int(text)
    if not (MIN_UTM_ZONE <= zone <= MAX_UTM_ZONE):
        msg = f'Expected a zone in {MIN_UTM_ZONE:02d}..{MAX_UTM_ZONE} but got "{original}".'
        raise ValidationError(msg)
    return zone


def parse_geographic(lon_text: str, lat_text: str) -> GeographicCoordinate:
    lon = _parse_float(lon_text, 'longitude')
    lat = _parse_float(lat_text, 'latitude')
    try:
        return GeographicCoordinate.from_lonlat(lon, lat)
    except ValidationError as e:
        msg = f'Not a geographically sensible longitude and latitude: {lon}, {lat}. {e}'
        raise ValidationError(msg) from e


def parse_mgs(text: str) -> MGSCoordinate:
    """Parse an MGS cell written as ``ZZ/QQQQQQQQQQQQ``."""
    zone_text, sep, key_text = text.partition('/')
    if not sep:
        msg = (
            'With one argument, expected an MGS tile like 42/012301230123, '
            f'with the slash, but got "{text}".'
        )
        raise ValidationError(msg)
    zone = _parse_zone_number(zone_text, zone_text)
    return MGSCoordinate.from_key_string(zone, key_text)


def parse_utm_zone(token: str) -> tuple[int, Hemisphere]:
    """
    Parse a UTM zone token like ``1``, ``23N`` or ``42S``.

    A token without a hemisphere letter is taken as northern.
    """
    match = ZONE_TOKEN_RE.match(token)
    if not (1 <= len(token) <= ZONE_TOKEN_MAX_LEN) or match is None:
        msg = f'Expected a UTM zone like 1, 23N, or 42S, but got "{token}".'
        raise ValidationError(msg)
    digits, letter = match.groups()
    hemi = Hemisphere.from_char(letter) if letter else Hemisphere.NORTH
    return _parse_zone_number(digits, token), hemi


def parse_utm(zone_token: str, easting_text: str, northing_text: str) -> UTMCoordinate:
    zone, hemi = parse_utm_zone(zone_token)
    easting = _parse_float(easting_text, 'UTM easting')
    northing = _parse_float(northing_text, 'UTM northing')
    return UTMCoordinate.from_parts(zone, hemi, easting, northing)


def parse_coordinate(tokens: Sequence[str]) -> Coordinate:
    """
    Dispatch on token count: 1 is MGS, 2 is lon/lat, 3 is UTM.

    Raises:
        ValidationError: wrong token count or any malformed token

    """
    if len(tokens) == 1:
        return parse_mgs(tokens[0])
    if len(tokens) == 2:
        return parse_geographic(tokens[0], tokens[1])
    if len(tokens) == 3:
        return parse_utm(tokens[0], tokens[1], tokens[2])
    msg = (
        'Expected 1 argument (MGS coord), 2 (lon lat), or 3 (UTM), '
        f'but got {len(tokens)}.\nSee --help.'
    )
    raise ValidationError(msg)
