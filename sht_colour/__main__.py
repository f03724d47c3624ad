"""sht-colour: Convert between SHT colour codes, hex and exact RGB.

Usage: sht-colour <command> <inputs...> [options]

Commands are auto-discovered from sht_colour/commands/.
Each command module's docstring is its documentation.
Run `sht-colour help <command>` for full module docs.

Environment variables / .env loading:
  SHT_PRECISION sets the default precision (hex digits per channel).
  OS environment variables are always used first.
  If a variable is not set, sht-colour looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from sht_colour import registry
from sht_colour.core.env import load_env
from sht_colour.core.errors import ShtError
from sht_colour.core.model import MAX_DEPTH, Hue, Modifier
from sht_colour.core.report import format_json, format_text
from sht_colour.core.types import Report

_POLE_NAMES = {Modifier.TONE: 'grey', Modifier.SHADE: 'black', Modifier.TINT: 'white'}


def _short_help(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  sht-colour to-rgb r ot bnss\n'
        "  sht-colour to-sht '#F00' '#888' --json\n"
        '  sht-colour parse rtn\n'
        '  sht-colour ramp b -m shade -s 3 -p 1\n'
        '  sht-colour help to-sht\n'
        '  sht-colour grammar\n'
    )
    parser = argparse.ArgumentParser(
        prog='sht-colour',
        description='Convert between SHT colour codes, hex and exact RGB.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        cmd.add_arguments(p)
        p.add_argument('-p', '--precision', type=int, default=None, help='Hex digits per channel')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand: prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    # `grammar` subcommand: prints the letter tables
    sub.add_parser('grammar', help='Print the SHT hue and modifier letters')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: sht-colour help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _print_grammar() -> None:
    """Print the hue and modifier letter tables."""
    print('Hue letters (first character):')
    for hue in Hue:
        base = ', '.join(str(value) for value in hue.base)
        print(f'  {hue.letter}  {hue.label:<8} ({base})')
    print()
    print(f'Modifier letters (after the hue, any order, up to {MAX_DEPTH} of each):')
    for modifier in Modifier:
        print(f'  {modifier.letter}  {modifier.label:<6} halves the distance to {_POLE_NAMES[modifier]}')
    print()
    print('Tint and shade cannot be combined. Canonical order: hue, then n, s, t.')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else: OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'sht-colour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    if args.command == 'grammar':
        _print_grammar()
        return

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report)
    except ShtError as exc:
        print(f'sht-colour: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Exit status must be set after output so every row is visible
    if report.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
