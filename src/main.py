"""Command-line entry point: any of lon/lat, UTM or MGS in, all three out."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from geo.projection import Projector
from services.coordinate_converter import CoordinateConverter
from services.input_parser import parse_coordinate
from settings import AppSettings, load_settings
from shared.constants import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    LOG_FORMAT,
)
from shared.exceptions import ConversionError, ValidationError

logger = logging.getLogger(__name__)

DESCRIPTION = (
    'mgsconv converts coordinates for working with Maxar ARD. Give it any of '
    'WGS84 (lon, lat), UTM, or Maxar Grid System coordinates to get all three.'
)

EPILOG = """\
usage by argument count:
  mgsconv <MGS cell in ZZ/QKQKQKQKQKQK format>
  mgsconv <longitude> <latitude>
  mgsconv <UTM zone> <easting> <northing>

example:
  $ mgsconv -99.09357951534054 19.29675919163688
  Lon, lat: -99.09358, 19.29676
  Lat/lon: 19.29676/-99.09358
  14N 490168 2133666
  14/033113131312

conventions:
  1. MGS cells are treated as their centers in conversions, and are read
     and written only at level 12.
  2. WGS84 (lon/lat) and UTM coordinates are read at any precision but
     written at ~1 meter precision (integer for UTM, 5 decimals for WGS84).
  3. MGS and UTM coordinates are read in any zone but written in their
     canonical zone.
"""

OPTIONS_WITH_VALUES = frozenset({'--config', '--log-level'})


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging to stderr, plus a file when one is configured."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mgsconv',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--config',
        help='Path to a TOML config file (default: $MGSCONV_CONFIG or '
        '~/.config/mgsconv/config.toml)',
    )
    parser.add_argument(
        '--log-level',
        help='Override the configured log level (DEBUG, INFO, WARNING, ...)',
    )
    parser.add_argument(
        'coords',
        nargs='+',
        metavar='COORD',
        help='MGS cell, lon lat, or UTM zone easting northing',
    )
    return parser


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def mark_positional_numbers(argv: Sequence[str]) -> list[str]:
    """
    Insert ``--`` before the first negative number that is not an option value.

    argparse only recognizes plain negative numbers such as ``-99.5`` as
    positionals; ``-1e-5`` or ``-inf`` would otherwise be read as options.
    """
    tokens = list(argv)
    takes_value = False
    for i, token in enumerate(tokens):
        if token == '--':
            break
        if takes_value:
            takes_value = False
            continue
        if token in OPTIONS_WITH_VALUES:
            takes_value = True
            continue
        if token.startswith('-') and _is_number(token):
            return [*tokens[:i], '--', *tokens[i:]]
    return tokens


def build_converter(settings: AppSettings) -> CoordinateConverter:
    projector = Projector(
        cache_transformers=settings.cache_transformers,
        cache_size=settings.transformer_cache_size,
    )
    return CoordinateConverter(projector)


def run(tokens: Sequence[str], converter: CoordinateConverter) -> str:
    coord = parse_coordinate(tokens)
    return converter.convert(coord).render()


def main(argv: Sequence[str] | None = None) -> int:
    """Main application entry point."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = build_parser().parse_args(mark_positional_numbers(argv))
    except SystemExit as e:
        # argparse exits with 2 on usage errors, which is reserved for faults
        if e.code:
            return EXIT_INVALID_INPUT
        raise

    try:
        settings = load_settings(args.config)
        if args.log_level:
            settings = AppSettings.model_validate(
                {**settings.model_dump(), 'log_level': args.log_level}
            )
    except (FileNotFoundError, ValueError) as e:
        print(e, file=sys.stderr)
        return EXIT_INVALID_INPUT

    setup_logging(settings.log_level, settings.log_file)

    try:
        message = run(args.coords, build_converter(settings))
    except ValidationError as e:
        print(e, file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ConversionError as e:
        logger.error(f'Conversion failed: {e}', exc_info=True)
        print(f'Internal error: {e}', file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    print(message)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
