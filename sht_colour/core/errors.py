"""Exception hierarchy for sht-colour.

Every error raised by the core derives from ShtError and ValueError, so callers
can catch either. The core never catches its own errors; the CLI turns them into
error rows.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction


class ShtError(ValueError):
    """Base class for all sht-colour errors."""


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = 'empty-input'
    UNKNOWN_HUE_LETTER = 'unknown-hue-letter'
    UNKNOWN_MODIFIER_LETTER = 'unknown-modifier-letter'
    CONFLICTING_MODIFIERS = 'conflicting-modifiers'
    MODIFIER_DEPTH_EXCEEDED = 'modifier-depth-exceeded'
    TRAILING_GARBAGE = 'trailing-garbage'


class ParseError(ShtError):
    """Malformed SHT text. `position` is the index of the offending character."""

    def __init__(self, kind: ParseErrorKind, text: str, position: int, detail: str = ''):
        self.kind = kind
        self.text = text
        self.position = position
        message = f'{kind.value} at position {position} in {text!r}'
        if detail:
            message += f': {detail}'
        super().__init__(message)


class CodeProblem(str, Enum):
    NOT_AN_INTEGER = 'not-an-integer'
    NEGATIVE_COUNT = 'negative-count'
    DEPTH_EXCEEDED = 'depth-exceeded'
    CONFLICTING_MODIFIERS = 'conflicting-modifiers'


class InvalidCode(ShtError):
    """An ShtCode was built with counts that break the model invariants."""

    def __init__(self, problems: list[CodeProblem]):
        self.problems = problems
        super().__init__('invalid SHT code: ' + ', '.join(p.value for p in problems))


class OutOfRangeChannel(ShtError):
    """An RGB channel lies outside [0, 1]."""

    def __init__(self, channel: str, value: Fraction):
        self.channel = channel
        self.value = value
        super().__init__(f'{channel} channel {value} is outside [0, 1]')


class HexFormatErrorKind(str, Enum):
    EMPTY_CODE = 'empty-code'
    MISSING_OCTOTHORPE = 'missing-octothorpe'
    INVALID_DIGIT_COUNT = 'invalid-digit-count'
    DIGIT_PARSE_ERROR = 'digit-parse-error'
    PRECISION_MISMATCH = 'precision-mismatch'


class HexFormatError(ShtError):
    """Malformed hex colour text."""

    def __init__(self, kind: HexFormatErrorKind, text: str, detail: str = ''):
        self.kind = kind
        self.text = text
        message = f'{kind.value} in {text!r}'
        if detail:
            message += f': {detail}'
        super().__init__(message)


class InvalidPrecision(ShtError):
    """Precision must be a positive int."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'precision must be a positive integer, got {value!r}')
