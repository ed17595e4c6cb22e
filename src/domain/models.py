"""Coordinate value types: geographic, UTM and MGS."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from shared.constants import (
    GEOGRAPHIC_DECIMALS,
    LAT_MAX,
    LAT_MIN,
    LON_MAX,
    LON_MIN,
    MAX_UTM_ZONE,
    MGS_DIGITS,
    MGS_LEVEL,
    MIN_UTM_ZONE,
)
from shared.exceptions import ValidationError

# Twelve base-4 digits, coarsest level first
QuadKey = tuple[int, int, int, int, int, int, int, int, int, int, int, int]


class Hemisphere(str, Enum):
    NORTH = 'N'
    SOUTH = 'S'

    @classmethod
    def from_char(cls, letter: str) -> Hemisphere:
        if letter == 'N':
            return cls.NORTH
        if letter == 'S':
            return cls.SOUTH
        msg = f'Expected a hemisphere (N or S) but got {letter!r}.'
        raise ValidationError(msg)

    @classmethod
    def from_latitude_or_signed_offset(cls, value: float) -> Hemisphere:
        """
        Classify a latitude, or any signed north/south offset, by its sign.

        Only finite negative values are South; zero, negative zero, NaN and
        both infinities count as North.
        """
        if math.isfinite(value) and value < 0.0:
            return cls.SOUTH
        return cls.NORTH

    def as_display_suffix(self) -> str:
        return self.value

    def as_projection_hemisphere_flag(self) -> str:
        return '+south' if self is Hemisphere.SOUTH else ''


def _first_error_message(exc: PydanticValidationError) -> str:
    err = exc.errors()[0]
    ctx_error = err.get('ctx', {}).get('error')
    if ctx_error is not None:
        return str(ctx_error)
    loc = '.'.join(str(part) for part in err['loc'])
    return f'{loc}: {err["msg"]}' if loc else err['msg']


def _build(model_cls: type[BaseModel], **fields: Any) -> Any:
    """Construct a model, converting pydantic failures to ValidationError."""
    try:
        return model_cls(**fields)
    except PydanticValidationError as e:
        raise ValidationError(_first_error_message(e)) from e


def _check_zone(zone: int) -> int:
    if not (MIN_UTM_ZONE <= zone <= MAX_UTM_ZONE):
        msg = f'Expected a zone in {MIN_UTM_ZONE}..{MAX_UTM_ZONE} but got {zone}.'
        raise ValueError(msg)
    return zone


class GeographicCoordinate(BaseModel):
    """WGS84 longitude/latitude in decimal degrees, bounds inclusive."""

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    @model_validator(mode='after')
    def validate_bounds(self) -> GeographicCoordinate:
        # NaN fails both comparisons and is rejected here too
        if not (
            LON_MIN <= self.longitude <= LON_MAX
            and LAT_MIN <= self.latitude <= LAT_MAX
        ):
            msg = (
                f'Expected lon and lat in ranges ({LON_MIN:g}..{LON_MAX:g}, '
                f'{LAT_MIN:g}..{LAT_MAX:g}) but got '
                f'({self.longitude}, {self.latitude}).'
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_lonlat(cls, longitude: float, latitude: float) -> GeographicCoordinate:
        return _build(cls, longitude=longitude, latitude=latitude)

    def to_display_block(self) -> str:
        lon = f'{self.longitude:.{GEOGRAPHIC_DECIMALS}f}'
        lat = f'{self.latitude:.{GEOGRAPHIC_DECIMALS}f}'
        return f'Lon, lat: {lon}, {lat}\nLat/lon: {lat}/{lon}'

    def __str__(self) -> str:
        return (
            f'{self.longitude:.{GEOGRAPHIC_DECIMALS}f}, '
            f'{self.latitude:.{GEOGRAPHIC_DECIMALS}f}'
        )


class UTMCoordinate(BaseModel):
    """
    UTM position within one zone.

    Easting carries the 500 km false easting; northing carries the 10 000 km
    false northing in the southern hemisphere.
    """

    model_config = ConfigDict(frozen=True)

    zone: int
    hemisphere: Hemisphere
    easting: float
    northing: float

    @field_validator('zone')
    @classmethod
    def validate_zone(cls, v: int) -> int:
        return _check_zone(v)

    @field_validator('easting', 'northing')
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            msg = f'Expected a finite UTM easting/northing but got {v}.'
            raise ValueError(msg)
        return v

    @classmethod
    def from_parts(
        cls,
        zone: int,
        hemisphere: Hemisphere,
        easting: float,
        northing: float,
    ) -> UTMCoordinate:
        return _build(
            cls,
            zone=zone,
            hemisphere=hemisphere,
            easting=easting,
            northing=northing,
        )

    def __str__(self) -> str:
        return (
            f'{self.zone}{self.hemisphere.as_display_suffix()} '
            f'{int(self.easting)} {int(self.northing)}'
        )


class MGSCoordinate(BaseModel):
    """A level-12 MGS cell: UTM zone plus a 12-digit base-4 quadkey."""

    model_config = ConfigDict(frozen=True)

    zone: int
    key: QuadKey

    @field_validator('zone')
    @classmethod
    def validate_zone(cls, v: int) -> int:
        return _check_zone(v)

    @field_validator('key')
    @classmethod
    def validate_digits(cls, v: QuadKey) -> QuadKey:
        bad = [d for d in v if not 0 <= d <= 3]
        if bad:
            msg = f'Quadkey digits must be in 0..3 but got {bad[0]}.'
            raise ValueError(msg)
        return v

    @classmethod
    def from_key_string(cls, zone: int, key_string: str) -> MGSCoordinate:
        """
        Build from a zone and a quadkey written as 12 characters of 0-3.

        Raises:
            ValidationError: wrong key length, bad digit or zone out of range.

        """
        if len(key_string) != MGS_LEVEL:
            msg = (
                f'Expected a quadkey of length {MGS_LEVEL} but got '
                f'"{key_string}" (length {len(key_string)}).'
            )
            raise ValidationError(msg)
        bad = [c for c in key_string if c not in MGS_DIGITS]
        if bad:
            msg = f'Expected quadkey digits 0-3 but got "{bad[0]}" in "{key_string}".'
            raise ValidationError(msg)
        return _build(cls, zone=zone, key=tuple(int(c) for c in key_string))

    def key_to_string(self) -> str:
        return ''.join(str(d) for d in self.key)

    def __str__(self) -> str:
        return f'{self.zone}/{self.key_to_string()}'
