"""Convert SHT codes to hex and exact RGB at a given precision.

Each code is parsed, expanded to its exact RGB triple (tone first, then shade
or tint, each step halving the distance to white, black or grey) and rounded to
the grid of PRECISION hex digits per channel, half to even.

Output per code: canonical code, hex, and the rounded channels as fractions.

Precision comes from -p, else SHT_PRECISION, else 2.

Example:
    sht-colour to-rgb r ot bnss
    sht-colour to-rgb n -p 1          # n  #888  rgb(8/15, 8/15, 8/15)
    sht-colour to-rgb rt rs rn --json
"""

from sht_colour.core.env import DEFAULT_PRECISION, resolve_precision
from sht_colour.core.errors import ShtError
from sht_colour.core.sht_parser import parse_sht
from sht_colour.core.types import Command, Report

command = Command(
    name='to-rgb',
    help='Convert SHT codes to hex and exact RGB.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('codes', nargs='+', metavar='CODE', help='SHT codes, e.g. r ot bnss')


@command.run
def run(args, report: Report) -> None:
    precision = resolve_precision(args.precision) or DEFAULT_PRECISION
    report.precision = precision
    for text in args.codes:
        try:
            code = parse_sht(text)
            rgb = code.to_rgb(precision)
            report.add(
                text,
                {
                    'code': str(code),
                    'hex': code.to_hex(precision),
                    'rgb': [str(value) for value in rgb.components()],
                },
            )
        except ShtError as exc:
            report.add_error(text, exc)
