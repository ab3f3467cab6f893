"""List the reference palette in display order.

Shows id, name, hex, RGB, catalogue code and year ('-' when the colour
has no associated year).

Example:
    colormatch palette
    colormatch palette --json --palette my-colours.json
"""

from colormatch.commands._common import add_palette_argument, resolve_palette
from colormatch.core.report import format_palette_json, format_palette_text
from colormatch.core.types import Command

command = Command(name='palette', help='List the reference palette.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    add_palette_argument(parser)


@command.run
def run(args, settings) -> int:
    palette = resolve_palette(args, settings)
    print(format_palette_json(palette) if args.json else format_palette_text(palette))
    return 0
