"""Shared types for colormatch: RGB, PaletteEntry, Palette, Match, MatchReport, Command."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple

_CANONICAL_HEX = re.compile(r'^#[0-9A-F]{6}$')


class RGB(NamedTuple):
    """An 8-bit-per-channel colour. Compares equal to a plain (r, g, b) tuple."""

    r: int
    g: int
    b: int

    @classmethod
    def of(cls, r: int, g: int, b: int) -> RGB:
        """Build an RGB, rejecting channels outside [0, 255]."""
        for label, value in (('r', r), ('g', g), ('b', b)):
            if not 0 <= value <= 255:
                raise ValueError(f'channel {label}={value} outside [0, 255]')
        return cls(int(r), int(g), int(b))


@dataclass(frozen=True)
class PaletteEntry:
    """One reference colour. hex and rgb always describe the same colour."""

    id: str
    name: str
    hex: str  # canonical #RRGGBB
    rgb: RGB
    catalog_code: str
    year: int | None = None

    def __post_init__(self) -> None:
        # Local import: hexcodec depends on RGB from this module
        from colormatch.core.hexcodec import hex_to_rgb

        if not _CANONICAL_HEX.match(self.hex):
            raise ValueError(f'{self.id}: hex {self.hex!r} is not canonical #RRGGBB')
        rgb = RGB.of(*self.rgb)
        if hex_to_rgb(self.hex) != rgb:
            raise ValueError(f'{self.id}: hex {self.hex} does not match rgb {tuple(rgb)}')
        object.__setattr__(self, 'rgb', rgb)

    @classmethod
    def from_hex(
        cls, id: str, name: str, hex: str, catalog_code: str, year: int | None = None
    ) -> PaletteEntry:
        """Build an entry whose rgb is derived from hex (hex is canonicalised)."""
        from colormatch.core.hexcodec import hex_to_rgb, rgb_to_hex

        rgb = hex_to_rgb(hex)
        return cls(id=id, name=name, hex=rgb_to_hex(rgb), rgb=rgb, catalog_code=catalog_code, year=year)

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'hex': self.hex,
            'rgb': list(self.rgb),
            'catalog_code': self.catalog_code,
            'year': self.year,
        }


@dataclass(frozen=True)
class Palette:
    """Ordered, read-only collection of PaletteEntry. Ids are unique."""

    name: str
    entries: tuple[PaletteEntry, ...] = ()

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        seen: set[str] = set()
        for entry in entries:
            if entry.id in seen:
                raise ValueError(f'palette {self.name!r}: duplicate id {entry.id!r}')
            seen.add(entry.id)
        object.__setattr__(self, 'entries', entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self.entries[index]

    def get(self, entry_id: str) -> PaletteEntry | None:
        """Look up an entry by id."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None


class Match(NamedTuple):
    """A palette entry paired with its distance from the query colour."""

    entry: PaletteEntry
    distance: float


@dataclass
class MatchReport:
    """A query colour and its ranked matches, for text/JSON output."""

    query: RGB
    query_hex: str
    palette_name: str = ''
    matches: list[Match] = field(default_factory=list)


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='match', help='Rank palette colours against a query')

        @command.arguments
        def arguments(parser):
            parser.add_argument(...)

        @command.run
        def run(args, settings):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._arguments_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any, settings: Any) -> int:
        """Execute the command's run function, returning its exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args, settings) or 0


def as_rgb(colour: Sequence[int]) -> RGB:
    """Coerce any 3-sequence of ints into a validated RGB."""
    if len(colour) != 3:
        raise ValueError(f'expected 3 channels, got {len(colour)}')
    return RGB.of(*colour)
