"""Canonical conversion of any coordinate into all three representations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.models import GeographicCoordinate, MGSCoordinate, UTMCoordinate
from geo.mgs import mgs_to_utm, utm_to_mgs
from geo.projection import Projector, default_projector
from geo.utm import geographic_to_utm, utm_to_geographic

logger = logging.getLogger(__name__)

Coordinate = GeographicCoordinate | UTMCoordinate | MGSCoordinate


@dataclass(frozen=True)
class ConversionResult:
    """One point in all three forms, UTM and MGS in the canonical zone."""

    geographic: GeographicCoordinate
    utm: UTMCoordinate
    mgs: MGSCoordinate

    def render(self) -> str:
        return f'{self.geographic.to_display_block()}\n{self.utm}\n{self.mgs}'


class CoordinateConverter:
    """
    Converts geographic, UTM or MGS input into all three forms.

    UTM and MGS input is never echoed back in its own zone. The input is
    taken to longitude/latitude first and UTM/MGS are derived from there,
    so output zones always follow the point's true longitude. A cell given
    in a neighbouring zone therefore comes back as a different cell in the
    canonical zone, shifted by up to about half a cell; this happens
    silently and also for input that was already canonical.
    """

    def __init__(self, projector: Projector | None = None) -> None:
        self.projector = projector or default_projector

    def to_geographic(self, coord: Coordinate) -> GeographicCoordinate:
        """Take any supported coordinate to longitude/latitude."""
        if isinstance(coord, GeographicCoordinate):
            return coord
        if isinstance(coord, MGSCoordinate):
            coord = mgs_to_utm(coord)
        if isinstance(coord, UTMCoordinate):
            return utm_to_geographic(coord, self.projector)
        msg = f'Unsupported coordinate type: {type(coord).__name__}'
        raise TypeError(msg)

    def from_geographic(self, geo: GeographicCoordinate) -> ConversionResult:
        utm = geographic_to_utm(geo, self.projector)
        mgs = utm_to_mgs(utm)
        return ConversionResult(geographic=geo, utm=utm, mgs=mgs)

    def convert(self, coord: Coordinate) -> ConversionResult:
        """
        Produce the canonical geographic, UTM and MGS forms of a point.

        Raises:
            ConversionError: if projection fails or yields an impossible point
            DecodeError: if an MGS key holds a digit outside 0..3

        """
        geo = self.to_geographic(coord)
        result = self.from_geographic(geo)
        if not isinstance(coord, GeographicCoordinate) and coord.zone != result.utm.zone:
            logger.info(
                'Canonicalized %s from zone %d to zone %d',
                coord,
                coord.zone,
                result.utm.zone,
            )
        return result
