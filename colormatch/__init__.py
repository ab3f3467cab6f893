"""colormatch — find the closest catalogue colours to an RGB colour."""

from colormatch.core.hexcodec import hex_to_rgb, parse_colour, rgb_to_hex
from colormatch.core.matcher import distance, nearest_colour, rank, rank_matches
from colormatch.core.palette import load_palette, load_palette_file
from colormatch.core.types import RGB, Match, Palette, PaletteEntry

__all__ = [
    'RGB',
    'Match',
    'Palette',
    'PaletteEntry',
    'distance',
    'hex_to_rgb',
    'load_palette',
    'load_palette_file',
    'nearest_colour',
    'parse_colour',
    'rank',
    'rank_matches',
    'rgb_to_hex',
]
