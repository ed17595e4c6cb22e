"""Services package - parsing and canonical conversion."""

from services.coordinate_converter import (
    Coordinate,
    ConversionResult,
    CoordinateConverter,
)
from services.input_parser import (
    parse_coordinate,
    parse_geographic,
    parse_mgs,
    parse_utm,
    parse_utm_zone,
)

__all__ = [
    'ConversionResult',
    'Coordinate',
    'CoordinateConverter',
    'parse_coordinate',
    'parse_geographic',
    'parse_mgs',
    'parse_utm',
    'parse_utm_zone',
]
