"""colormatch — find the closest catalogue colours to an RGB colour.

Usage: colormatch <command> [options]

Commands are auto-discovered from colormatch/commands/.
Each command module's docstring is its documentation.
Run `colormatch help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colormatch looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colormatch import registry
from colormatch.core.env import load_settings


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colormatch.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colormatch match '#0F4C81'\n"
        '  colormatch match 255,255,255 -n 3 --json\n'
        '  colormatch convert fff\n'
        '  colormatch palette --palette my-colours.json\n'
        "  colormatch swatch '#FF6F61' ./tmp/coral.png\n"
        '  colormatch help match\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  COLORMATCH_COUNT    default number of matches (default 5)\n'
        '  COLORMATCH_PALETTE  JSON palette file to use instead of the built-in one\n'
    )
    parser = argparse.ArgumentParser(
        prog='colormatch',
        description='Find the closest catalogue colours to an RGB colour.',
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

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: colormatch help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    try:
        # Load .env before anything else — OS env vars always win
        settings = load_settings(env_file=args.env_file)
        if settings.env_path:
            print(f'colormatch: loaded {settings.env_path}', file=sys.stderr)
        return registry.get(args.command).execute(args, settings)
    except (ValueError, OSError) as e:
        print(f'colormatch: error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
