"""Report builder — text and JSON output for golden-palette results."""

import json
from typing import Any

from golden_palette.core.codec import decode_hex, rgb_to_hsl
from golden_palette.core.palette import SLOT_LABELS
from golden_palette.core.types import Palette, Report


def _slot_rows(palette: Palette) -> list[dict[str, Any]]:
    rows = []
    for slot, hex_colour in palette.items():
        rgb = decode_hex(hex_colour)
        hsl = rgb_to_hsl(rgb)
        rows.append(
            {
                'slot': slot,
                'hex': hex_colour,
                'rgb': list(rgb),
                'hsl': [round(hsl.h, 1), round(hsl.s, 1), round(hsl.l, 1)],
                'transform': SLOT_LABELS[slot],
            }
        )
    return rows


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.base:
        lines.append(f'golden-palette: {report.base}')
        lines.append('')

    if report.palette is not None:
        lines.append('── palette')
        for row in _slot_rows(report.palette):
            r, g, b = row['rgb']
            h, s, l = row['hsl']  # noqa: E741
            lines.append(
                f'  {row["slot"]:>2}  {row["hex"].upper()}  rgb({r}, {g}, {b})'
                f'  hsl({h:g}, {s:g}%, {l:g}%)  {row["transform"]}'
            )
        lines.append('')

    for name, data in report.sections.items():
        lines.append(f'── {name}')
        if name == 'roles' and 'roles' in data:
            for role, info in data['roles'].items():
                lines.append(f'  {role:<13} {info["hex"].upper()}  text {info["text"]}  (slot {info["slot"]})')
            for gradient in data.get('gradients', []):
                lines.append(f'  gradient: {gradient}')
            if 'tint' in data:
                lines.append(f'  tint: {data["tint"]}')
        elif name == 'library' and 'colours' in data:
            selected = data.get('selected')
            for item in data['colours']:
                mark = '*' if item['colour'] == selected else ' '
                lines.append(f'  {mark} {item["id"]:>3}  {item["colour"].upper()}')
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {name}.{k}: {v}')
        lines.append('')

    lines.extend(report.messages)
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.base:
        obj['base'] = report.base
    if report.palette is not None:
        obj['palette'] = _slot_rows(report.palette)
    obj.update(report.sections)
    if report.messages:
        obj['messages'] = report.messages
    return json.dumps(obj, indent=2)
