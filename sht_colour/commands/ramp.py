"""Generate a palette ramp by repeating one modifier on a code.

Starts from CODE and applies the modifier (tint by default) up to STEPS more
times, stopping at the 16-step depth limit. Each row shows the code and its hex.
Tint on a shaded code, or shade on a tinted one, is rejected.

Example:
    sht-colour ramp b                     # b bt btt bttt btttt, toward white
    sht-colour ramp o -m shade -s 3 -p 1
"""

from sht_colour.core.env import DEFAULT_PRECISION, resolve_precision
from sht_colour.core.model import Modifier
from sht_colour.core.palette import ramp
from sht_colour.core.sht_parser import parse_sht
from sht_colour.core.types import Command, Report

command = Command(
    name='ramp',
    help='Repeat one modifier on a code to build a palette ramp.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('code', metavar='CODE', help='Starting SHT code')
    parser.add_argument(
        '-m',
        '--modifier',
        default='tint',
        choices=[modifier.label for modifier in Modifier],
        help='Modifier to repeat (default: tint)',
    )
    parser.add_argument('-s', '--steps', type=int, default=4, help='Number of extra steps (default: 4)')


@command.run
def run(args, report: Report) -> None:
    precision = resolve_precision(args.precision) or DEFAULT_PRECISION
    report.precision = precision
    modifier = Modifier.from_label(args.modifier)
    try:
        codes = ramp(parse_sht(args.code), modifier, args.steps)
    except ValueError as exc:
        report.add_error(args.code, exc)
        return
    for step, code in enumerate(codes):
        report.add(args.code, {'step': step, 'code': str(code), 'hex': code.to_hex(precision)})
