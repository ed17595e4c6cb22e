"""PROJ-string CRS descriptors and a pyproj-backed point projector."""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import TYPE_CHECKING

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from shared.constants import DATUM, ELLIPSOID, TRANSFORMER_CACHE_SIZE_DEFAULT
from shared.exceptions import ConversionError

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import Hemisphere

logger = logging.getLogger(__name__)


def geographic_crs_descriptor() -> str:
    """PROJ string for WGS84 longitude/latitude."""
    return f'+proj=longlat +ellps={ELLIPSOID} +datum={DATUM} +no_defs +type=crs'


def utm_crs_descriptor(zone: int, hemisphere: Hemisphere) -> str:
    """PROJ string for one UTM zone; the south flag is omitted in the north."""
    parts = [
        '+proj=utm',
        f'+zone={zone}',
        hemisphere.as_projection_hemisphere_flag(),
        f'+ellps={ELLIPSOID}',
        f'+datum={DATUM}',
        '+units=m',
        '+no_defs',
        '+type=crs',
    ]
    return ' '.join(p for p in parts if p)


def build_transformer(src_crs: str, dst_crs: str) -> Transformer:
    """
    Build an always_xy transformer between two PROJ strings.

    Raises:
        ConversionError: if either CRS or the transformer cannot be built.

    """
    logger.debug('Building transformer %s -> %s', src_crs, dst_crs)
    try:
        return Transformer.from_crs(
            CRS.from_proj4(src_crs), CRS.from_proj4(dst_crs), always_xy=True
        )
    except (CRSError, ProjError) as e:
        msg = f'pyproj failed to make a transformer from "{src_crs}" to "{dst_crs}": {e}'
        raise ConversionError(msg) from e


class Projector:
    """
    Projects single points between CRS descriptors.

    Transformers are memoized per (source, destination) pair unless caching
    is disabled; results never depend on the cache.
    """

    def __init__(
        self,
        cache_transformers: bool = True,
        cache_size: int = TRANSFORMER_CACHE_SIZE_DEFAULT,
    ) -> None:
        self.cache_transformers = cache_transformers
        self._factory: Callable[[str, str], Transformer]
        if cache_transformers:
            self._factory = lru_cache(maxsize=cache_size)(build_transformer)
        else:
            self._factory = build_transformer

    def transformer(self, src_crs: str, dst_crs: str) -> Transformer:
        return self._factory(src_crs, dst_crs)

    def clear_cache(self) -> None:
        if self.cache_transformers:
            self._factory.cache_clear()  # type: ignore[attr-defined]

    def project(
        self, src_crs: str, dst_crs: str, point: tuple[float, float]
    ) -> tuple[float, float]:
        """
        Convert one (x, y) point from src_crs to dst_crs.

        Args:
            src_crs: Source PROJ string
            dst_crs: Destination PROJ string
            point: (x, y) in source axis order (lon, lat for geographic)

        Returns:
            (x, y) in destination axis order

        Raises:
            ConversionError: on any pyproj failure or non-finite output

        """
        transformer = self.transformer(src_crs, dst_crs)
        try:
            x, y = transformer.transform(point[0], point[1], errcheck=True)
        except ProjError as e:
            msg = f'pyproj failed to convert {point} from "{src_crs}" to "{dst_crs}": {e}'
            raise ConversionError(msg) from e
        if not (math.isfinite(x) and math.isfinite(y)):
            msg = f'pyproj returned a non-finite result ({x}, {y}) for {point}'
            raise ConversionError(msg)
        return float(x), float(y)


default_projector = Projector()
