"""Decode a colour and print its canonical hex, RGB and alpha.

Hex input: 3 digits (nibbles doubled), 6 digits (RRGGBB) or 8 digits
(AARRGGBB). Any other length decodes to black with alpha 255.
Decimal input ('r,g,b') always has alpha 255.

Example:
    colormatch convert fff
    colormatch convert 80FF6F61 --json
"""

import json

from colormatch.core.hexcodec import hex_to_argb, is_decimal_colour, parse_colour, rgb_to_hex
from colormatch.core.types import Command

command = Command(name='convert', help='Show canonical hex, RGB and alpha for a colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help="Colour: hex or 'r,g,b'")
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args, settings) -> int:
    rgb = parse_colour(args.colour)
    alpha = 255 if is_decimal_colour(args.colour) else hex_to_argb(args.colour)[0]
    hex_value = rgb_to_hex(rgb)

    if args.json:
        print(json.dumps({'input': args.colour, 'hex': hex_value, 'rgb': list(rgb), 'alpha': alpha}, indent=2))
    else:
        r, g, b = rgb
        print(f'{args.colour} -> {hex_value}  rgb({r}, {g}, {b})  alpha {alpha}')
    return 0
