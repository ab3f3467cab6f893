"""Rank palette colours by distance to a query colour.

The query may be hex ('#0F4C81', '0f4c81', 'fff', 'FF0F4C81' with alpha)
or decimal ('15,76,129', 'rgb(15, 76, 129)'). Distance is plain Euclidean
distance in RGB space; equal distances keep palette order.

Hex strings of unsupported length resolve to black rather than failing.

Default count comes from COLORMATCH_COUNT (default 5).

Example:
    colormatch match '#0F4C81' -n 3
    colormatch match 255,255,255 --json
"""

from colormatch.commands._common import add_palette_argument, resolve_count, resolve_palette
from colormatch.core.hexcodec import parse_colour, rgb_to_hex
from colormatch.core.matcher import rank_matches
from colormatch.core.report import format_json, format_text
from colormatch.core.types import Command, MatchReport

command = Command(name='match', help='Rank palette colours against a query colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help="Query colour: hex or 'r,g,b'")
    parser.add_argument(
        '-n',
        '--count',
        type=int,
        default=None,
        help='Number of matches (default: $COLORMATCH_COUNT or 5)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    add_palette_argument(parser)


@command.run
def run(args, settings) -> int:
    query = parse_colour(args.colour)
    palette = resolve_palette(args, settings)
    report = MatchReport(
        query=query,
        query_hex=rgb_to_hex(query),
        palette_name=palette.name,
        matches=rank_matches(query, palette, resolve_count(args, settings)),
    )
    print(format_json(report) if args.json else format_text(report))
    return 0
