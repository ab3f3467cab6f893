"""Helpers shared by command modules."""

import sys

from colormatch.core.env import Settings
from colormatch.core.palette import load_palette, load_palette_file
from colormatch.core.types import Palette


def add_palette_argument(parser) -> None:
    parser.add_argument(
        '--palette',
        metavar='FILE',
        default=None,
        help='JSON palette file (default: $COLORMATCH_PALETTE, else the built-in palette)',
    )


def resolve_palette(args, settings: Settings) -> Palette:
    """--palette beats COLORMATCH_PALETTE beats the built-in palette."""
    path = getattr(args, 'palette', None) or settings.palette_path
    if not path:
        return load_palette()
    palette = load_palette_file(path)
    print(f'colormatch: loaded palette {path} ({len(palette)} colours)', file=sys.stderr)
    return palette


def resolve_count(args, settings: Settings) -> int:
    count = getattr(args, 'count', None)
    return settings.count if count is None else count
