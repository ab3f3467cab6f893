"""Rank palette colours by RGB Euclidean distance to a query colour.

Plain linear RGB distance: no gamma correction, no perceptual colour space.
Channels are widened to int before subtracting so (0 - 200) never wraps.
"""

from collections.abc import Iterable, Sequence

import numpy as np

from colormatch.core.types import Match, PaletteEntry

DEFAULT_COUNT = 5


def distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Euclidean distance between two RGB colours."""
    return float(np.linalg.norm(np.subtract(a, b, dtype=int)))


def rank_matches(query: Sequence[int], palette: Iterable[PaletteEntry], count: int = DEFAULT_COUNT) -> list[Match]:
    """Return up to count (entry, distance) pairs, closest first.

    Equal distances keep palette order. An empty palette or count <= 0
    gives an empty list.
    """
    entries = list(palette)
    if count <= 0 or not entries:
        return []

    colours = np.array([e.rgb for e in entries], dtype=int)
    dists = np.linalg.norm(colours - np.asarray(query, dtype=int), axis=-1)
    order = np.argsort(dists, kind='stable')[:count]
    return [Match(entries[i], float(dists[i])) for i in order]


def rank(query: Sequence[int], palette: Iterable[PaletteEntry], count: int = DEFAULT_COUNT) -> list[PaletteEntry]:
    """Return up to count palette entries, closest to query first."""
    return [m.entry for m in rank_matches(query, palette, count)]


def nearest_colour(
    query: Sequence[int], palette: Iterable[PaletteEntry], threshold: float | None = None
) -> Match | None:
    """Closest entry to query, or None if the palette is empty or nothing is within threshold."""
    best = rank_matches(query, palette, 1)
    if not best:
        return None
    if threshold is not None and best[0].distance > threshold:
        return None
    return best[0]
