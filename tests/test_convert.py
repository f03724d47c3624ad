"""Tests for sht_colour.core.convert: forward and inverse conversion."""

from fractions import Fraction

import pytest
from sht_colour.core.convert import candidates, grid_table, rgb_to_sht, sht_to_rgb, sht_to_rgb_exact
from sht_colour.core.errors import InvalidPrecision, OutOfRangeChannel
from sht_colour.core.hexcodec import format_hex, parse_hex
from sht_colour.core.model import HALF, MAX_DEPTH, Hue, Modifier, Rgb, ShtCode
from sht_colour.core.sht_parser import parse_sht

ANCHORS = [ShtCode(hue) for hue in Hue]
SINGLE_STEPS = [
    ShtCode(hue).with_modifier(modifier, 1)
    for hue in Hue
    for modifier in Modifier
    if not (hue is Hue.GREY and modifier is Modifier.TONE)
]


class TestForward:
    @pytest.mark.parametrize(
        ('code', 'expected'),
        [
            ('r', '#F00'),
            ('o', '#F80'),
            ('y', '#FF0'),
            ('g', '#0F0'),
            ('c', '#0FF'),
            ('b', '#00F'),
            ('v', '#80F'),
            ('m', '#F0F'),
            ('n', '#888'),
            ('rt', '#F88'),
            ('rtt', '#FBB'),
            ('rs', '#800'),
            ('rss', '#400'),
            ('rn', '#B44'),
        ],
    )
    def test_precision_1(self, code, expected):
        assert sht_to_rgb(parse_sht(code), 1) == parse_hex(expected)
        assert format_hex(sht_to_rgb(parse_sht(code), 1), 1) == expected

    @pytest.mark.parametrize(
        ('code', 'expected'),
        [
            ('r', '#FF0000'),
            ('n', '#808080'),
            ('rs', '#800000'),
            ('rt', '#FF8080'),
            ('rn', '#BF4040'),
            ('cs', '#008080'),
        ],
    )
    def test_precision_2(self, code, expected):
        assert parse_sht(code).to_hex(2) == expected

    def test_red_is_hex_f00(self):
        assert parse_sht('r').to_rgb(1) == Rgb.from_hex('#F00')

    def test_grey_exact_midpoint(self):
        assert sht_to_rgb_exact(parse_sht('n')) == Rgb(HALF, HALF, HALF)
        assert sht_to_rgb_exact(parse_sht('nnnn')) == Rgb(HALF, HALF, HALF)

    def test_grey_rounds_half_to_even(self):
        grey = parse_sht('n')
        assert grey.to_rgb(1) == Rgb(Fraction(8, 15), Fraction(8, 15), Fraction(8, 15))
        assert grey.to_hex(1) == '#888'
        assert grey.to_hex(3) == '#800800800'

    def test_tone_applied_before_tint(self):
        # tone: (3/4, 1/4, 1/4), then tint: (7/8, 5/8, 5/8)
        assert sht_to_rgb_exact(parse_sht('rtn')) == Rgb(Fraction(7, 8), Fraction(5, 8), Fraction(5, 8))

    def test_repeatable(self):
        code = parse_sht('onnsss')
        assert sht_to_rgb(code, 2) == sht_to_rgb(code, 2)

    @pytest.mark.parametrize('precision', [1, 2])
    def test_every_output_in_range(self, precision):
        for code in candidates():
            rgb = sht_to_rgb(code, precision)
            assert all(0 <= value <= 1 for value in rgb.components()), code

    def test_invalid_precision(self):
        with pytest.raises(InvalidPrecision):
            sht_to_rgb(parse_sht('r'), 0)

    def test_requires_code(self):
        with pytest.raises(TypeError):
            sht_to_rgb_exact('r')


class TestCandidates:
    def test_count(self):
        assert len(candidates()) == len(Hue) * (MAX_DEPTH + 1) * (2 * MAX_DEPTH + 1)

    def test_sorted_by_tie_break_key(self):
        keys = [code.sort_key for code in candidates()]
        assert keys == sorted(keys)
        assert candidates()[0] == ShtCode(Hue.RED)

    def test_lexical_order_within_hue(self):
        order = {code: i for i, code in enumerate(candidates())}
        assert order[parse_sht('rn')] < order[parse_sht('rs')] < order[parse_sht('rt')]
        assert order[parse_sht('rt')] < order[parse_sht('on')]

    def test_grid_table_read_only(self):
        table = grid_table(1)
        assert table.shape == (len(candidates()), 3)
        with pytest.raises(ValueError):
            table[0, 0] = 1

    def test_wide_precision_uses_python_ints(self):
        table = grid_table(16)
        assert table.dtype == object
        assert table[0].tolist() == [16**16 - 1, 0, 0]


class TestInverse:
    def test_hex_f00_is_red(self):
        assert Rgb.from_hex('#F00').to_sht(1) == parse_sht('r')

    def test_hex_888_is_grey(self):
        assert rgb_to_sht(Rgb.from_hex('#888'), 1) == parse_sht('n')
        assert rgb_to_sht(Rgb(HALF, HALF, HALF), 1) == parse_sht('n')

    @pytest.mark.parametrize('precision', [1, 2])
    @pytest.mark.parametrize('code', ANCHORS + SINGLE_STEPS, ids=str)
    def test_canonical_codes_round_trip(self, code, precision):
        assert rgb_to_sht(sht_to_rgb(code, precision), precision) == code

    def test_two_step_code_round_trips(self):
        assert rgb_to_sht(Rgb.from_hex('#400'), 1) == parse_sht('rss')

    def test_toned_grey_aliases_to_grey(self):
        assert rgb_to_sht(sht_to_rgb(parse_sht('nnn'), 2), 2) == parse_sht('n')

    @pytest.mark.parametrize('precision', [1, 2, 3])
    def test_forward_of_inverse_is_stable(self, precision):
        for code in candidates()[::50]:
            rgb = sht_to_rgb(code, precision)
            assert sht_to_rgb(rgb_to_sht(rgb, precision), precision) == rgb, code

    def test_fewest_steps_wins(self):
        # grey needs 4 tints to reach #FFF at precision 1, every hue needs 5
        assert rgb_to_sht(Rgb(1, 1, 1), 1) == parse_sht('ntttt')
        assert rgb_to_sht(Rgb(0, 0, 0), 1) == parse_sht('nssss')

    def test_lower_hue_index_wins(self):
        # '#F40' is 4 grid units from both red and orange
        assert rgb_to_sht(Rgb.from_hex('#F40'), 1) == parse_sht('r')

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeChannel) as excinfo:
            rgb_to_sht(Rgb(Fraction(3, 2), 0, 0), 1)
        assert excinfo.value.channel == 'red'
        assert excinfo.value.value == Fraction(3, 2)

    def test_accepts_plain_triple(self):
        assert rgb_to_sht((1, 0, 0), 2) == parse_sht('r')

    def test_invalid_precision(self):
        with pytest.raises(InvalidPrecision):
            rgb_to_sht(Rgb(1, 0, 0), True)
