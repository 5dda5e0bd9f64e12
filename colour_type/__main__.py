"""colour-type — parse, convert and transform RGB colours from the command line.

Usage: colour-type <command> <value>... [options]

Commands are auto-discovered from colour_type/commands/.
Each command module's docstring is its documentation.
Run `colour-type help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-type looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colour_type import registry
from colour_type.core.env import Settings, load_env
from colour_type.core.report import format_json, format_text
from colour_type.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colour_type.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colour-type show '#abc' 255,136,0\n"
        '  colour-type show --decimal 16746496 --json\n'
        "  colour-type negate '#1a2b3c'\n"
        "  colour-type monochrome '#333' '#ccc'\n"
        '  colour-type palette logo.png --limit 3 --hex\n'
        '  colour-type help palette\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  COLOUR_TYPE_PALETTE_LIMIT, COLOUR_TYPE_PALETTE_PRECISION, COLOUR_TYPE_STRICT\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-type',
        description='Parse, convert and transform RGB colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('values', nargs='+', help='Colours (hex, r,g,b) or image paths for palette')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-s',
            '--strict',
            action='store_true',
            default=None,
            help='Reject malformed hex text instead of skipping bad characters',
        )
        p.add_argument('--decimal', action='store_true', help='Read digit-only values as packed integers')
        if name == 'palette':
            p.add_argument('-l', '--limit', type=int, default=None, help='Number of colours (default: 5)')
            p.add_argument('-p', '--precision', type=int, default=None, help='Pixel sampling stride (default: 5)')
            p.add_argument('-x', '--hex', action='store_true', help='List colours as #rrggbb')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_help(name, cmd.help)}')
        print('\nRun: colour-type help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _apply_settings(args: argparse.Namespace, settings: Settings) -> None:
    """Fill options left unset on the command line from the environment."""
    if args.strict is None:
        args.strict = settings.strict
    if getattr(args, 'limit', None) is None:
        args.limit = settings.palette_limit
    if getattr(args, 'precision', None) is None:
        args.precision = settings.palette_precision
    if not hasattr(args, 'hex'):
        args.hex = False


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colour-type: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    _apply_settings(args, Settings.from_env())

    report = Report(command=args.command)
    registry.get(args.command).execute(list(args.values), report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    if not report.ok:
        for message in report.errors:
            print(f'colour-type: {message}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
