"""Geo module - UTM zones, projection and the MGS grid."""

from .mgs import decode_key, encode_cell, mgs_to_utm, utm_to_mgs
from .projection import (
    Projector,
    default_projector,
    geographic_crs_descriptor,
    utm_crs_descriptor,
)
from .utm import (
    geographic_to_utm,
    utm_to_geographic,
    utm_zone_for,
    zone_for_longitude,
)

__all__ = [
    'Projector',
    'decode_key',
    'default_projector',
    'encode_cell',
    'geographic_crs_descriptor',
    'geographic_to_utm',
    'mgs_to_utm',
    'utm_crs_descriptor',
    'utm_to_geographic',
    'utm_to_mgs',
    'utm_zone_for',
    'zone_for_longitude',
]
