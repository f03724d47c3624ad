"""Single-pass parser and canonical serializer for SHT codes.

Grammar: one hue letter, then any number of modifier letters (n, s, t) in any
order. Each modifier letter adds one to that modifier's count. The first
character is always read as a hue and every later one as a modifier, so `n` is
grey at the start of a code and tone anywhere after it.

The scan stops at the first problem and reports it as a ParseError; there is no
backtracking and no partial result.
"""

import string

from sht_colour.core.errors import ParseError, ParseErrorKind
from sht_colour.core.model import MAX_DEPTH, Hue, Modifier, ShtCode

_EXCLUSIVE = {Modifier.SHADE: Modifier.TINT, Modifier.TINT: Modifier.SHADE}


def parse_sht(text: str) -> ShtCode:
    """Parse an SHT code such as 'r', 'ot' or 'bnss'."""
    if not isinstance(text, str):
        raise TypeError(f'SHT code must be a str, got {type(text).__name__}')
    if not text:
        raise ParseError(ParseErrorKind.EMPTY_INPUT, text, 0)

    hue = Hue.from_letter(text[0])
    if hue is None:
        raise ParseError(ParseErrorKind.UNKNOWN_HUE_LETTER, text, 0, f'{text[0]!r} is not a hue letter')

    counts = {modifier: 0 for modifier in Modifier}
    for position, char in enumerate(text[1:], start=1):
        modifier = Modifier.from_letter(char)
        if modifier is None:
            if char in string.ascii_letters:
                raise ParseError(
                    ParseErrorKind.UNKNOWN_MODIFIER_LETTER, text, position, f'{char!r} is not a modifier letter'
                )
            raise ParseError(ParseErrorKind.TRAILING_GARBAGE, text, position, f'unexpected {char!r}')

        other = _EXCLUSIVE.get(modifier)
        if other is not None and counts[other]:
            raise ParseError(
                ParseErrorKind.CONFLICTING_MODIFIERS,
                text,
                position,
                f'{modifier.label} after {other.label}',
            )
        if counts[modifier] == MAX_DEPTH:
            raise ParseError(
                ParseErrorKind.MODIFIER_DEPTH_EXCEEDED,
                text,
                position,
                f'more than {MAX_DEPTH} {modifier.label} steps',
            )
        counts[modifier] += 1

    return ShtCode(
        hue=hue,
        tone=counts[Modifier.TONE],
        shade=counts[Modifier.SHADE],
        tint=counts[Modifier.TINT],
    )


def format_sht(code: ShtCode) -> str:
    """Canonical text: hue letter, then tone, shade and tint letters grouped in that order."""
    return code.hue.letter + code.letters
