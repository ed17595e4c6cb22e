"""Error taxonomy for coordinate parsing and conversion.

Validation errors are the caller's fault and are reported back as a message.
Conversion errors mean the projection library or an internal invariant broke;
the request is abandoned without partial output.
"""


class MgsConvError(Exception):
    """Base exception for all mgsconv errors."""


class ValidationError(MgsConvError, ValueError):
    """Malformed or out-of-range input.

    Raised for geographic coordinates outside their bounds, malformed UTM
    zone tokens, and MGS keys of the wrong length or with non base-4 digits.
    """


class ConversionError(MgsConvError, RuntimeError):
    """Projection failure or an impossible intermediate result."""


class DecodeError(ConversionError):
    """MGS key digit outside 0..3 encountered while decoding."""
