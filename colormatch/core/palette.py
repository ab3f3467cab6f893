"""Reference palette: the embedded catalogue colours, plus JSON palette files.

The embedded palette is built once per process on first use and shared;
it is immutable so callers may hold on to it freely.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from colormatch.core.types import Palette, PaletteEntry, RGB, as_rgb

DEFAULT_PALETTE_NAME = 'pantone'

# (id, name, hex, (r, g, b), catalog_code, year)
_PANTONE: list[tuple[str, str, str, tuple[int, int, int], str, int | None]] = [
    # Colours of the year
    ('p1', 'Classic Blue', '#0F4C81', (15, 76, 129), '19-4052', 2020),
    ('p2', 'Living Coral', '#FF6F61', (255, 111, 97), '16-1546', 2019),
    ('p3', 'Ultra Violet', '#6B5B95', (107, 91, 149), '18-3838', 2018),
    ('p4', 'Greenery', '#88B04B', (136, 176, 75), '15-0343', 2017),
    ('p5', 'Rose Quartz', '#F7CAC9', (247, 202, 201), '13-1520', 2016),
    ('p6', 'Serenity', '#91A8D0', (145, 168, 208), '15-3919', 2016),
    ('p7', 'Marsala', '#955251', (149, 82, 81), '18-1438', 2015),
    ('p8', 'Radiant Orchid', '#B565A7', (181, 101, 167), '18-3224', 2014),
    ('p9', 'Emerald', '#009473', (0, 148, 115), '17-5641', 2013),
    ('p10', 'Tangerine Tango', '#DD4124', (221, 65, 36), '17-1463', 2012),
    ('p11', 'Honeysuckle', '#D65076', (214, 80, 118), '18-2120', 2011),
    ('p12', 'Turquoise', '#45B8AC', (69, 184, 172), '15-5519', 2010),
    ('p13', 'Mimosa', '#EFC050', (239, 192, 80), '14-0848', 2009),
    ('p14', 'Blue Iris', '#5A5B9F', (90, 91, 159), '18-3943', 2008),
    ('p15', 'Chili Pepper', '#9B1B30', (155, 27, 48), '19-1557', 2007),
    # Basics
    ('b1', 'True Red', '#BF1932', (191, 25, 50), '19-1664', None),
    ('b2', 'Sun Yellow', '#FEDD00', (254, 221, 0), '14-0852', None),
    ('b3', 'Green Flash', '#79C753', (121, 199, 83), '16-6340', None),
    ('b4', 'Blue Depths', '#263056', (38, 48, 86), '19-3929', None),
    ('b5', 'Pure White', '#FFFFFF', (255, 255, 255), '11-0601', None),
    ('b6', 'Jet Black', '#000000', (0, 0, 0), '19-0303', None),
    ('b7', 'Warm Gray', '#D6D2C4', (214, 210, 196), '14-4105', None),
    ('b8', 'Cool Gray', '#D0D0CE', (208, 208, 206), '14-4102', None),
]

_palette: Palette | None = None


def load_palette() -> Palette:
    """Return the embedded palette, building it on first call."""
    global _palette
    if _palette is None:
        entries = [
            PaletteEntry(id=i, name=n, hex=h, rgb=RGB(*rgb), catalog_code=code, year=year)
            for i, n, h, rgb, code, year in _PANTONE
        ]
        _palette = Palette(name=DEFAULT_PALETTE_NAME, entries=tuple(entries))
    return _palette


def _record_rgb(raw: Any) -> RGB:
    if isinstance(raw, Mapping):
        return as_rgb([raw['r'], raw['g'], raw['b']])
    return as_rgb(list(raw))


def _entry_from_record(index: int, record: Mapping[str, Any]) -> PaletteEntry:
    missing = [k for k in ('id', 'name', 'hex', 'catalog_code') if k not in record]
    if missing:
        raise ValueError(f'palette record {index}: missing {", ".join(missing)}')

    year = record.get('year')
    try:
        entry = PaletteEntry.from_hex(
            id=str(record['id']),
            name=str(record['name']),
            hex=str(record['hex']),
            catalog_code=str(record['catalog_code']),
            year=int(year) if year is not None else None,
        )
        if record.get('rgb') is not None and _record_rgb(record['rgb']) != entry.rgb:
            raise ValueError(f'hex {entry.hex} does not match rgb {record["rgb"]}')
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f'palette record {index} ({record.get("id")}): {e}') from e
    return entry


def palette_from_records(records: Iterable[Mapping[str, Any]], name: str = 'custom') -> Palette:
    """Build a palette from dict records (id, name, hex, catalog_code, optional rgb/year)."""
    entries = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ValueError(f'palette record {index}: expected an object, got {type(record).__name__}')
        entries.append(_entry_from_record(index, record))
    return Palette(name=name, entries=tuple(entries))


def load_palette_file(path: str | Path) -> Palette:
    """Load a palette from a JSON file: a list of records, or {"colors": [...]}."""
    path = Path(path)
    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f'{path}: invalid JSON: {e}') from e

    name = path.stem
    if isinstance(data, Mapping):
        name = str(data.get('name', name))
        data = data.get('colors')
    if not isinstance(data, list):
        raise ValueError(f'{path}: expected a list of colours')
    return palette_from_records(data, name=name)
