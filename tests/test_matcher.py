"""Tests for colormatch.core.matcher — distance, ranking and nearest colour."""

import math

import numpy as np
from colormatch.core.matcher import DEFAULT_COUNT, distance, nearest_colour, rank, rank_matches
from colormatch.core.palette import load_palette
from colormatch.core.types import Palette, PaletteEntry


def _entry(entry_id: str, hex_value: str) -> PaletteEntry:
    return PaletteEntry.from_hex(entry_id, entry_id.upper(), hex_value, catalog_code=f'00-{entry_id}')


class TestDistance:
    def test_same_colour(self):
        assert distance((15, 76, 129), (15, 76, 129)) == 0.0

    def test_black_white(self):
        assert math.isclose(distance((0, 0, 0), (255, 255, 255)), math.sqrt(3 * 255**2))

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert distance(a, b) == distance(b, a)

    def test_known_value(self):
        assert distance((0, 0, 0), (3, 4, 0)) == 5.0

    def test_uses_int_not_uint8(self):
        """No uint8 wraparound — (0 - 200) must not wrap."""
        a = np.array([0, 0, 0], dtype=np.uint8)
        b = np.array([200, 200, 200], dtype=np.uint8)
        assert distance(a, b) > 300


class TestRank:
    def test_exact_classic_blue(self):
        top = rank((15, 76, 129), load_palette(), 1)
        assert len(top) == 1
        assert top[0].name == 'Classic Blue'
        assert top[0].hex == '#0F4C81'

    def test_exact_match_distance_zero(self):
        match = rank_matches((15, 76, 129), load_palette(), 1)[0]
        assert match.distance == 0.0

    def test_white_top_three(self):
        names = [e.name for e in rank((255, 255, 255), load_palette(), 3)]
        assert names == ['Pure White', 'Rose Quartz', 'Cool Gray']

    def test_sorted_by_distance(self):
        query = (120, 90, 60)
        result = rank(query, load_palette(), 100)
        dists = [distance(query, e.rgb) for e in result]
        assert dists == sorted(dists)

    def test_matches_report_their_distances(self):
        query = (40, 200, 10)
        for entry, dist in rank_matches(query, load_palette(), 5):
            assert dist == distance(query, entry.rgb)

    def test_length_is_min_of_count_and_palette(self):
        palette = load_palette()
        for n in (1, 5, len(palette), len(palette) + 10):
            assert len(rank((1, 2, 3), palette, n)) == min(n, len(palette))

    def test_count_larger_than_palette_returns_everything(self):
        palette = load_palette()
        result = rank((128, 128, 128), palette, 1000)
        assert sorted(e.id for e in result) == sorted(e.id for e in palette)

    def test_non_positive_count_is_empty(self):
        assert rank((1, 2, 3), load_palette(), 0) == []
        assert rank((1, 2, 3), load_palette(), -4) == []

    def test_empty_palette_is_empty(self):
        assert rank((1, 2, 3), Palette(name='empty'), 5) == []
        assert rank((1, 2, 3), [], 5) == []

    def test_default_count(self):
        assert len(rank((1, 2, 3), load_palette())) == DEFAULT_COUNT == 5

    def test_ties_keep_palette_order(self):
        # (0,0,10) and (0,10,0) are both 10 away from black
        palette = Palette(
            name='ties',
            entries=(_entry('c', '#0A0000'), _entry('a', '#00000A'), _entry('b', '#000A00')),
        )
        assert [e.id for e in rank((0, 0, 0), palette, 3)] == ['c', 'a', 'b']

    def test_does_not_mutate_palette(self):
        palette = load_palette()
        before = list(palette)
        rank((200, 10, 10), palette, 5)
        assert list(palette) == before

    def test_deterministic(self):
        palette = load_palette()
        assert rank((77, 77, 77), palette, 10) == rank((77, 77, 77), palette, 10)


class TestNearestColour:
    def test_exact_black(self):
        match = nearest_colour((0, 0, 0), load_palette())
        assert match is not None
        assert match.entry.name == 'Jet Black'
        assert match.distance == 0.0

    def test_near_emerald(self):
        match = nearest_colour((2, 150, 113), load_palette())
        assert match.entry.name == 'Emerald'
        assert match.distance < 5

    def test_beyond_threshold_returns_none(self):
        assert nearest_colour((128, 1, 250), load_palette(), threshold=10) is None

    def test_empty_palette_returns_none(self):
        assert nearest_colour((0, 0, 0), []) is None
