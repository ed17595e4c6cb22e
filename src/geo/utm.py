"""UTM zone derivation and geographic <-> UTM conversion."""

from __future__ import annotations

import logging
import math

from domain.models import GeographicCoordinate, Hemisphere, UTMCoordinate
from geo.projection import (
    Projector,
    default_projector,
    geographic_crs_descriptor,
    utm_crs_descriptor,
)
from shared.constants import (
    LON_MAX,
    MAX_UTM_ZONE,
    UTM_ZONE_LON_OFFSET_DEG,
    UTM_ZONE_WIDTH_DEG,
    ZONE_SATURATION_MAX,
)
from shared.exceptions import ConversionError, ValidationError

logger = logging.getLogger(__name__)


def zone_for_longitude(lon: float) -> int:
    """
    Return the UTM zone number for a longitude in [-180, 180].

    Longitudes outside that range are not checked and yield meaningless
    zones, saturated into 0..255. The antimeridian itself (180) belongs to
    zone 60.
    """
    if lon == LON_MAX:
        return MAX_UTM_ZONE
    zone = math.floor((lon + UTM_ZONE_LON_OFFSET_DEG) / UTM_ZONE_WIDTH_DEG) + 1
    return max(0, min(ZONE_SATURATION_MAX, zone))


def utm_zone_for(geo: GeographicCoordinate) -> tuple[int, Hemisphere]:
    """Canonical (zone, hemisphere) for a geographic point."""
    return (
        zone_for_longitude(geo.longitude),
        Hemisphere.from_latitude_or_signed_offset(geo.latitude),
    )


def geographic_to_utm(
    geo: GeographicCoordinate, projector: Projector | None = None
) -> UTMCoordinate:
    """
    Project a geographic point into its canonical UTM zone.

    Raises:
        ConversionError: if pyproj fails

    """
    projector = projector or default_projector
    zone, hemi = utm_zone_for(geo)
    easting, northing = projector.project(
        geographic_crs_descriptor(),
        utm_crs_descriptor(zone, hemi),
        (geo.longitude, geo.latitude),
    )
    try:
        return UTMCoordinate.from_parts(zone, hemi, easting, northing)
    except ValidationError as e:
        msg = f'Projection of {geo} produced an invalid UTM coordinate: {e}'
        raise ConversionError(msg) from e


def utm_to_geographic(
    utm: UTMCoordinate, projector: Projector | None = None
) -> GeographicCoordinate:
    """
    Unproject a UTM coordinate to longitude/latitude.

    A result outside geographic bounds is a conversion fault, not bad input.
    """
    projector = projector or default_projector
    lon, lat = projector.project(
        utm_crs_descriptor(utm.zone, utm.hemisphere),
        geographic_crs_descriptor(),
        (utm.easting, utm.northing),
    )
    try:
        return GeographicCoordinate.from_lonlat(lon, lat)
    except ValidationError as e:
        msg = f'Lon/lat out of bounds after unprojecting {utm}: {e}'
        raise ConversionError(msg) from e
