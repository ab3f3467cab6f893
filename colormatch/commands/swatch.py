"""Render the query colour and its matches as a PNG swatch strip.

The first (wider) block is the query colour; the following blocks are the
ranked matches, closest first, each labelled with name, hex and distance.
Labels are ASCII only so the default bitmap font can draw them.
Label text is black or white depending on block luminance.

Example:
    colormatch swatch '#0F4C81' ./tmp/classic-blue.png -n 5
"""

import os
import sys

import numpy as np
from PIL import Image, ImageDraw

from colormatch.commands._common import add_palette_argument, resolve_count, resolve_palette
from colormatch.core.hexcodec import parse_colour, rgb_to_hex
from colormatch.core.matcher import rank_matches
from colormatch.core.types import RGB, Command, Match

command = Command(name='swatch', help='Write a PNG swatch strip of the query colour and its matches.')

BLOCK_WIDTH = 160
BLOCK_HEIGHT = 120
LABEL_HEIGHT = 36


def _label_colour(rgb: RGB) -> tuple[int, int, int]:
    r, g, b = rgb
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return (0, 0, 0) if luminance > 140 else (255, 255, 255)


def render_swatch(query: RGB, matches: list[Match]) -> Image.Image:
    """Build the swatch image: query block (double width) then one block per match."""
    blocks = [(query, 2 * BLOCK_WIDTH, ['query', rgb_to_hex(query)])]
    for entry, dist in matches:
        blocks.append((entry.rgb, BLOCK_WIDTH, [entry.name, f'{entry.hex}  d={dist:.1f}']))

    width = sum(w for _rgb, w, _label in blocks)
    arr = np.zeros((BLOCK_HEIGHT, width, 3), dtype=np.uint8)
    x = 0
    for rgb, w, _label in blocks:
        arr[:, x : x + w] = rgb
        x += w

    img = Image.fromarray(arr)
    draw = ImageDraw.Draw(img)
    x = 0
    for rgb, w, label in blocks:
        fill = _label_colour(rgb)
        y = BLOCK_HEIGHT - LABEL_HEIGHT
        for text in label:
            draw.text((x + 6, y), text, fill=fill)
            y += LABEL_HEIGHT // 2
        x += w
    return img


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help="Query colour: hex or 'r,g,b'")
    parser.add_argument('output', help='Path of the PNG to write')
    parser.add_argument(
        '-n',
        '--count',
        type=int,
        default=None,
        help='Number of matches (default: $COLORMATCH_COUNT or 5)',
    )
    add_palette_argument(parser)


@command.run
def run(args, settings) -> int:
    query = parse_colour(args.colour)
    palette = resolve_palette(args, settings)
    matches = rank_matches(query, palette, resolve_count(args, settings))

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    render_swatch(query, matches).save(args.output)
    print(f'colormatch: wrote {args.output} ({len(matches)} matches)', file=sys.stderr)
    return 0
