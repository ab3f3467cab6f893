"""Hex <-> RGB conversion.

Parsing strips leading/trailing non-alphanumeric characters (so '#' and
whitespace are ignored) and reads the leading run of
hex digits. The length of the stripped string decides the layout:

  3 digits  RGB, each nibble doubled (F -> FF), alpha 255
  6 digits  RRGGBB, alpha 255
  8 digits  AARRGGBB
  other     (0, 0, 0) with alpha 255, never an error

Serialisation always emits '#RRGGBB' in uppercase.
"""

import math
import re
from collections.abc import Sequence

from colormatch.core.types import RGB, as_rgb

_EDGE_JUNK = re.compile(r'^[^0-9A-Za-z]+|[^0-9A-Za-z]+$')
_HEX_RUN = re.compile(r'[0-9A-Fa-f]*')
_DECIMAL = re.compile(r'^(?:rgb\s*\(\s*)?(\d+)\s*[,\s]\s*(\d+)\s*[,\s]\s*(\d+)\s*\)?$', re.IGNORECASE)


def hex_to_argb(value: str) -> tuple[int, int, int, int]:
    """Parse a hex colour string into (a, r, g, b)."""
    digits = _EDGE_JUNK.sub('', value)
    run = _HEX_RUN.match(digits).group(0)
    n = int(run, 16) if run else 0

    if len(digits) == 3:
        return 255, (n >> 8) * 17, (n >> 4 & 0xF) * 17, (n & 0xF) * 17
    if len(digits) == 6:
        return 255, n >> 16, n >> 8 & 0xFF, n & 0xFF
    if len(digits) == 8:
        return n >> 24, n >> 16 & 0xFF, n >> 8 & 0xFF, n & 0xFF
    return 255, 0, 0, 0


def hex_to_rgb(value: str) -> RGB:
    """Parse a hex colour string, dropping alpha."""
    _a, r, g, b = hex_to_argb(value)
    return RGB(r, g, b)


def _channel(value: float) -> int:
    # Clamp, then round half away from zero
    clamped = min(max(float(value), 0.0), 255.0)
    return int(math.floor(clamped + 0.5))


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Format a colour as '#RRGGBB'. Channels may be floats; they are clamped and rounded."""
    r, g, b = (_channel(c) for c in rgb)
    return f'#{r:02X}{g:02X}{b:02X}'


def is_decimal_colour(text: str) -> bool:
    """True for decimal input such as '15,76,129' or 'rgb(15 76 129)'."""
    return _DECIMAL.match(text.strip()) is not None


def parse_colour(text: str) -> RGB:
    """Parse user input: hex ('#0F4C81', 'fff') or decimal ('15,76,129', 'rgb(15 76 129)').

    Decimal channels outside [0, 255] raise ValueError. Hex input follows
    hex_to_rgb, including its fallback to black.
    """
    text = text.strip()
    m = _DECIMAL.match(text)
    if m:
        return as_rgb([int(g) for g in m.groups()])
    if not text:
        raise ValueError('empty colour')
    return hex_to_rgb(text)
