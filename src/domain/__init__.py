"""Domain layer - coordinate value types."""
from domain.models import (
    GeographicCoordinate,
    Hemisphere,
    MGSCoordinate,
    QuadKey,
    UTMCoordinate,
)

__all__ = [
    'GeographicCoordinate',
    'Hemisphere',
    'MGSCoordinate',
    'QuadKey',
    'UTMCoordinate',
]
