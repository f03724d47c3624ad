"""Value types for sht-colour: Hue, Modifier, ShtCode, Rgb.

Hues and modifiers are closed enums. The order of members is significant: it is
the hue index used for tie-breaking and the canonical modifier order used for
serialization and for the forward conversion.

ShtCode and Rgb are frozen dataclasses. Conversion helpers on them import the
converter lazily so this module stays at the bottom of the import graph.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction
from numbers import Rational

from sht_colour.core.errors import CodeProblem, InvalidCode, InvalidPrecision, OutOfRangeChannel

HALF = Fraction(1, 2)
MAX_DEPTH = 16  # per modifier kind; a 17th halving is below half a 16-bit grid step
CHANNELS = ('red', 'green', 'blue')


class Hue(Enum):
    """Hue anchors in tie-break order: letter, label, base RGB."""

    RED = ('r', 'red', (1, 0, 0))
    ORANGE = ('o', 'orange', (1, HALF, 0))
    YELLOW = ('y', 'yellow', (1, 1, 0))
    GREEN = ('g', 'green', (0, 1, 0))
    CYAN = ('c', 'cyan', (0, 1, 1))
    BLUE = ('b', 'blue', (0, 0, 1))
    VIOLET = ('v', 'violet', (HALF, 0, 1))
    MAGENTA = ('m', 'magenta', (1, 0, 1))
    GREY = ('n', 'grey', (HALF, HALF, HALF))

    def __init__(self, letter: str, label: str, base: tuple) -> None:
        self.letter = letter
        self.label = label
        self.base = tuple(Fraction(c) for c in base)

    @property
    def index(self) -> int:
        return _HUE_INDEX[self]

    @property
    def achromatic(self) -> bool:
        return self is Hue.GREY

    @classmethod
    def from_letter(cls, letter: str) -> Hue | None:
        return _HUES_BY_LETTER.get(letter)


class Modifier(Enum):
    """Modifier kinds in canonical order: letter, label, pole."""

    TONE = ('n', 'tone', HALF)
    SHADE = ('s', 'shade', 0)
    TINT = ('t', 'tint', 1)

    def __init__(self, letter: str, label: str, pole) -> None:
        self.letter = letter
        self.label = label
        self.pole = Fraction(pole)

    def apply(self, value: Fraction, times: int = 1) -> Fraction:
        """Move `value` toward the pole, halving the remaining distance `times` times."""
        return self.pole + (value - self.pole) / 2**times

    @classmethod
    def from_letter(cls, letter: str) -> Modifier | None:
        return _MODIFIERS_BY_LETTER.get(letter)

    @classmethod
    def from_label(cls, label: str) -> Modifier:
        for modifier in cls:
            if modifier.label == label or modifier.letter == label:
                return modifier
        raise KeyError(f'Unknown modifier: {label}. Available: {", ".join(m.label for m in cls)}')


_HUE_INDEX = {hue: i for i, hue in enumerate(Hue)}
_HUES_BY_LETTER = {hue.letter: hue for hue in Hue}
_MODIFIERS_BY_LETTER = {modifier.letter: modifier for modifier in Modifier}


def _count_problems(counts: tuple) -> list[CodeProblem]:
    problems: list[CodeProblem] = []

    def note(problem: CodeProblem) -> None:
        if problem not in problems:
            problems.append(problem)

    for count in counts:
        if isinstance(count, bool) or not isinstance(count, int):
            note(CodeProblem.NOT_AN_INTEGER)
        elif count < 0:
            note(CodeProblem.NEGATIVE_COUNT)
        elif count > MAX_DEPTH:
            note(CodeProblem.DEPTH_EXCEEDED)
    _tone, shade, tint = counts
    if CodeProblem.NOT_AN_INTEGER not in problems and shade > 0 and tint > 0:
        note(CodeProblem.CONFLICTING_MODIFIERS)
    return problems


@dataclass(frozen=True)
class ShtCode:
    """A hue anchor plus counted modifiers. Immutable; tint and shade are exclusive."""

    hue: Hue
    tone: int = 0
    shade: int = 0
    tint: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.hue, Hue):
            raise TypeError(f'hue must be a Hue, got {self.hue!r}')
        problems = _count_problems((self.tone, self.shade, self.tint))
        if problems:
            raise InvalidCode(problems)

    @classmethod
    def parse(cls, text: str) -> ShtCode:
        from sht_colour.core.sht_parser import parse_sht

        return parse_sht(text)

    @property
    def modifiers(self) -> dict[Modifier, int]:
        """Modifier -> count, in canonical order."""
        return {Modifier.TONE: self.tone, Modifier.SHADE: self.shade, Modifier.TINT: self.tint}

    def count(self, modifier: Modifier) -> int:
        return self.modifiers[modifier]

    @property
    def total(self) -> int:
        return self.tone + self.shade + self.tint

    @property
    def letters(self) -> str:
        """Canonical modifier-letter sequence, without the hue letter."""
        return ''.join(modifier.letter * count for modifier, count in self.modifiers.items())

    @property
    def sort_key(self) -> tuple[int, int, str]:
        """Tie-break order for nearest-code search."""
        return (self.total, self.hue.index, self.letters)

    def with_modifier(self, modifier: Modifier, count: int) -> ShtCode:
        """Return a copy with `modifier` set to `count`."""
        return replace(self, **{modifier.label: count})

    def to_rgb(self, precision: int) -> Rgb:
        from sht_colour.core.convert import sht_to_rgb

        return sht_to_rgb(self, precision)

    def to_rgb_exact(self) -> Rgb:
        from sht_colour.core.convert import sht_to_rgb_exact

        return sht_to_rgb_exact(self)

    def to_hex(self, precision: int) -> str:
        from sht_colour.core.hexcodec import format_hex

        return format_hex(self.to_rgb(precision), precision)

    def __str__(self) -> str:
        from sht_colour.core.sht_parser import format_sht

        return format_sht(self)


def _to_fraction(value: object, channel: str) -> Fraction:
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f'{channel} channel must be an exact rational, got {value!r}')
    if isinstance(value, (Rational, str)):
        return Fraction(value)
    raise TypeError(f'{channel} channel must be an exact rational, got {value!r}')


@dataclass(frozen=True)
class Rgb:
    """Three exact rational channels. Range is checked by consumers, not here."""

    red: Fraction
    green: Fraction
    blue: Fraction

    def __post_init__(self) -> None:
        for channel in CHANNELS:
            object.__setattr__(self, channel, _to_fraction(getattr(self, channel), channel))

    @classmethod
    def from_hex(cls, text: str, precision: int | None = None) -> Rgb:
        from sht_colour.core.hexcodec import parse_hex

        return parse_hex(text, precision)

    def components(self) -> tuple[Fraction, Fraction, Fraction]:
        return (self.red, self.green, self.blue)

    def check_range(self) -> Rgb:
        """Raise OutOfRangeChannel for the first channel outside [0, 1]."""
        for channel, value in zip(CHANNELS, self.components()):
            if not 0 <= value <= 1:
                raise OutOfRangeChannel(channel, value)
        return self

    def grid(self, precision: int) -> tuple[int, int, int]:
        """Channels in integer grid units at `precision`, rounded half to even."""
        self.check_range()
        return tuple(quantize(value, precision) for value in self.components())

    def to_hex(self, precision: int) -> str:
        from sht_colour.core.hexcodec import format_hex

        return format_hex(self, precision)

    def to_sht(self, precision: int) -> ShtCode:
        from sht_colour.core.convert import rgb_to_sht

        return rgb_to_sht(self, precision)


def check_precision(precision: object) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
        raise InvalidPrecision(precision)
    return precision


def grid_denominator(precision: int) -> int:
    """Largest channel value expressible with `precision` hex digits."""
    return 16 ** check_precision(precision) - 1


def quantize(value: Fraction, precision: int) -> int:
    # round() on a Fraction rounds half to even
    return round(value * grid_denominator(precision))
