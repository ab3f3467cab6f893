"""Report builder — text and JSON output for match results and palette listings."""

import json
from typing import Any

from colormatch.core.types import MatchReport, Palette, PaletteEntry


def _entry_line(entry: PaletteEntry) -> str:
    year = str(entry.year) if entry.year is not None else '-'
    r, g, b = entry.rgb
    return f'{entry.name:<16} {entry.hex}  ({r:>3},{g:>3},{b:>3})  {entry.catalog_code:<8} {year}'


def format_text(report: MatchReport) -> str:
    """Format a match report as human-readable text."""
    r, g, b = report.query
    header = f'colormatch: {report.query_hex} ({r},{g},{b})'
    if report.palette_name:
        header += f' — {report.palette_name} ({len(report.matches)} matches)'
    lines = [header, '']

    if not report.matches:
        lines.append('  no matches')
    for i, (entry, dist) in enumerate(report.matches, start=1):
        lines.append(f'{i:>3}. {_entry_line(entry)}  Δ={dist:.1f}')
    return '\n'.join(lines)


def format_json(report: MatchReport) -> str:
    """Format a match report as JSON."""
    obj: dict[str, Any] = {
        'query': {'hex': report.query_hex, 'rgb': list(report.query)},
        'palette': report.palette_name,
        'matches': [],
    }
    for entry, dist in report.matches:
        item = entry.to_dict()
        item['distance'] = round(dist, 3)
        obj['matches'].append(item)
    return json.dumps(obj, indent=2)


def format_palette_text(palette: Palette) -> str:
    """List a palette, one entry per line, in palette order."""
    lines = [f'colormatch: palette {palette.name} ({len(palette)} colours)', '']
    for entry in palette:
        lines.append(f'  {entry.id:<5} {_entry_line(entry)}')
    return '\n'.join(lines)


def format_palette_json(palette: Palette) -> str:
    return json.dumps({'name': palette.name, 'colors': [e.to_dict() for e in palette]}, indent=2)
