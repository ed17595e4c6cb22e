"""MGS quadkey encoding on top of the per-zone UTM grid.

Each zone is a 4096x4096 grid of 5 km cells centered on the zone origin
(central meridian at the equator). Grid x grows east, grid y grows south.
A quadkey digit packs one bit of each index: x bit -> 1, y bit -> 2.
"""

from __future__ import annotations

import math

from domain.models import Hemisphere, MGSCoordinate, QuadKey, UTMCoordinate
from shared.constants import (
    MGS_CELL_SIZE_M,
    MGS_GRID_HALF,
    MGS_GRID_SIZE,
    MGS_LEVEL,
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING_SOUTH,
)
from shared.exceptions import ConversionError, DecodeError


def encode_cell(ix: int, iy: int) -> QuadKey:
    """Interleave grid indices into a quadkey, most significant level first."""
    if not (0 <= ix < MGS_GRID_SIZE and 0 <= iy < MGS_GRID_SIZE):
        msg = f'Grid cell ({ix}, {iy}) is outside the {MGS_GRID_SIZE}x{MGS_GRID_SIZE} zone grid.'
        raise ConversionError(msg)
    digits = []
    for bit in range(MGS_LEVEL - 1, -1, -1):
        digits.append(((ix >> bit) & 1) + ((iy >> bit) & 1) * 2)
    return tuple(digits)  # type: ignore[return-value]


def decode_key(key: QuadKey) -> tuple[int, int]:
    """
    Split a quadkey back into (ix, iy) grid indices.

    Raises:
        DecodeError: on a digit outside 0..3

    """
    ix = 0
    iy = 0
    for z, digit in enumerate(key):
        mask = 1 << (MGS_LEVEL - 1 - z)
        if digit == 0:
            continue
        if digit == 1:
            ix |= mask
        elif digit == 2:
            iy |= mask
        elif digit == 3:
            ix |= mask
            iy |= mask
        else:
            msg = f'Quadkey digit not in 0..3: {digit!r} at position {z}'
            raise DecodeError(msg)
    return ix, iy


def utm_to_mgs(utm: UTMCoordinate) -> MGSCoordinate:
    """Quantize a UTM coordinate to the MGS cell containing it."""
    x = utm.easting - UTM_FALSE_EASTING
    y = utm.northing
    if utm.hemisphere is Hemisphere.SOUTH:
        y -= UTM_FALSE_NORTHING_SOUTH

    # meters from the zone origin -> cells
    x /= MGS_CELL_SIZE_M
    y /= MGS_CELL_SIZE_M

    ix = math.floor(x + MGS_GRID_HALF)
    iy = math.floor(MGS_GRID_HALF - y)
    return MGSCoordinate(zone=utm.zone, key=encode_cell(ix, iy))


def mgs_to_utm(mgs: MGSCoordinate) -> UTMCoordinate:
    """Return the UTM centerpoint of an MGS cell."""
    ix, iy = decode_key(mgs.key)

    # cell center, origin moved to the zone origin, y flipped back to north
    x = ix - MGS_GRID_HALF + 0.5
    y = MGS_GRID_HALF - iy - 0.5

    # a signed offset, not a latitude, but the sign rule is the same
    hemi = Hemisphere.from_latitude_or_signed_offset(y)

    x *= MGS_CELL_SIZE_M
    y *= MGS_CELL_SIZE_M

    x += UTM_FALSE_EASTING
    if y < 0.0:
        y += UTM_FALSE_NORTHING_SOUTH

    return UTMCoordinate(zone=mgs.zone, hemisphere=hemi, easting=x, northing=y)
