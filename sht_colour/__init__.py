"""sht-colour: conversions between SHT colour codes, hex and exact RGB.

SHT codes are short human-readable colour names: a hue letter
(r o y g c b v m, or n for grey) followed by counted modifiers, n for tone
(toward grey), s for shade (toward black) and t for tint (toward white). Each
modifier step halves the remaining distance to its pole, so every value is an
exact Fraction.

    >>> code = parse_sht('rt')
    >>> code.to_hex(1)
    '#F88'
    >>> str(Rgb.from_hex('#F00').to_sht(1))
    'r'
"""

from sht_colour.core.convert import rgb_to_sht, sht_to_rgb, sht_to_rgb_exact
from sht_colour.core.errors import (
    CodeProblem,
    HexFormatError,
    HexFormatErrorKind,
    InvalidCode,
    InvalidPrecision,
    OutOfRangeChannel,
    ParseError,
    ParseErrorKind,
    ShtError,
)
from sht_colour.core.hexcodec import format_hex, parse_hex
from sht_colour.core.model import MAX_DEPTH, Hue, Modifier, Rgb, ShtCode
from sht_colour.core.palette import nearest, ramp, rgb_distance
from sht_colour.core.sht_parser import format_sht, parse_sht

__all__ = [
    'MAX_DEPTH',
    'CodeProblem',
    'HexFormatError',
    'HexFormatErrorKind',
    'Hue',
    'InvalidCode',
    'InvalidPrecision',
    'Modifier',
    'OutOfRangeChannel',
    'ParseError',
    'ParseErrorKind',
    'Rgb',
    'ShtCode',
    'ShtError',
    'format_hex',
    'format_sht',
    'nearest',
    'parse_hex',
    'parse_sht',
    'ramp',
    'rgb_distance',
    'rgb_to_sht',
    'sht_to_rgb',
    'sht_to_rgb_exact',
]
