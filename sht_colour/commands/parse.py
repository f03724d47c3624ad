"""Parse SHT codes and show their structure.

Prints the hue and the count of each modifier (tone n, shade s, tint t) and the
canonical form: hue letter, then modifier letters grouped as n, s, t.
Invalid codes are reported with the failure class, e.g. trailing-garbage or
conflicting-modifiers.

Example:
    sht-colour parse rtn          # red  tone=1  shade=0  tint=1  -> rnt
    sht-colour parse 'rt s' rts   # both rejected
"""

from sht_colour.core.errors import ShtError
from sht_colour.core.sht_parser import format_sht, parse_sht
from sht_colour.core.types import Command, Report

command = Command(
    name='parse',
    help='Parse SHT codes and show hue, modifier counts and canonical form.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('codes', nargs='+', metavar='CODE', help='SHT codes to parse')


@command.run
def run(args, report: Report) -> None:
    for text in args.codes:
        try:
            code = parse_sht(text)
        except ShtError as exc:
            report.add_error(text, exc)
            continue
        report.add(
            text,
            {
                'hue': code.hue.label,
                'modifiers': {modifier.label: count for modifier, count in code.modifiers.items()},
                'code': format_sht(code),
            },
        )
