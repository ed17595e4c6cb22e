"""Shared constants and exceptions."""
from shared.exceptions import (
    ConversionError,
    DecodeError,
    MgsConvError,
    ValidationError,
)

__all__ = [
    'ConversionError',
    'DecodeError',
    'MgsConvError',
    'ValidationError',
]
