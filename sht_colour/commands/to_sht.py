"""Find the nearest SHT code for hex colours.

Searches every valid code (9 hues, up to 16 tone steps combined with up to 16
shade or tint steps) for the smallest Chebyshev distance to the input, measured
in grid units at PRECISION. Ties go to fewer modifier steps, then the earlier
hue (r o y g c b v m n), then the alphabetically smaller modifier letters.

Output per colour: nearest code, that code's own hex, and the distance
(0 means an exact match at this precision).

Precision comes from -p, else SHT_PRECISION, else the digit count of each input.

Example:
    sht-colour to-sht '#F00' '#888'          # r, n
    sht-colour to-sht '#1E90FF' -p 2 --json
"""

from sht_colour.core.convert import rgb_to_sht
from sht_colour.core.env import resolve_precision
from sht_colour.core.errors import ShtError
from sht_colour.core.hexcodec import hex_precision, parse_hex
from sht_colour.core.palette import rgb_distance
from sht_colour.core.types import Command, Report

command = Command(
    name='to-sht',
    help='Find the nearest SHT code for hex colours.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colours', nargs='+', metavar='HEX', help="Hex colours, e.g. '#F00' '#ff8000'")


@command.run
def run(args, report: Report) -> None:
    configured = resolve_precision(args.precision)
    report.precision = configured
    for text in args.colours:
        try:
            rgb = parse_hex(text)
            precision = configured or hex_precision(text)
            code = rgb_to_sht(rgb, precision)
            report.add(
                text,
                {
                    'code': str(code),
                    'code_hex': code.to_hex(precision),
                    'distance': rgb_distance(rgb, code.to_rgb(precision), precision),
                },
            )
        except ShtError as exc:
            report.add_error(text, exc)
