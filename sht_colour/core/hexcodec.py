"""Fixed-width hex colour codec.

'#' followed by 3k hex digits, k digits per channel in R, G, B order. A channel
value v in [0, 1] is written as round(v * (16**k - 1)), half to even, and read
back as digits / (16**k - 1). Digits are case-insensitive on input and
uppercase on output.
"""

import re
from fractions import Fraction

from sht_colour.core.errors import HexFormatError, HexFormatErrorKind
from sht_colour.core.model import Rgb, check_precision

_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')


def _split_digits(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f'hex colour must be a str, got {type(text).__name__}')
    if not text:
        raise HexFormatError(HexFormatErrorKind.EMPTY_CODE, text)
    if text[0] != '#':
        raise HexFormatError(HexFormatErrorKind.MISSING_OCTOTHORPE, text)
    digits = text[1:]
    if not digits or len(digits) % 3:
        raise HexFormatError(
            HexFormatErrorKind.INVALID_DIGIT_COUNT, text, f'{len(digits)} digits is not a positive multiple of 3'
        )
    if not _HEX_DIGITS.fullmatch(digits):
        raise HexFormatError(HexFormatErrorKind.DIGIT_PARSE_ERROR, text)
    return digits


def hex_precision(text: str) -> int:
    """Digits per channel of a well-formed hex colour."""
    return len(_split_digits(text)) // 3


def parse_hex(text: str, precision: int | None = None) -> Rgb:
    """Parse '#F00', '#ff8000', ... into an Rgb. If precision is given the width must match."""
    digits = _split_digits(text)
    width = len(digits) // 3
    if precision is not None and width != check_precision(precision):
        raise HexFormatError(
            HexFormatErrorKind.PRECISION_MISMATCH, text, f'{width} digits per channel, expected {precision}'
        )
    denominator = 16**width - 1
    red, green, blue = (Fraction(int(digits[i : i + width], 16), denominator) for i in range(0, len(digits), width))
    return Rgb(red, green, blue)


def format_hex(rgb: Rgb, precision: int) -> str:
    """Write an Rgb as '#' + 3 * precision uppercase hex digits."""
    width = check_precision(precision)
    return '#' + ''.join(f'{value:0{width}X}' for value in rgb.grid(width))
