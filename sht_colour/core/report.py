"""Report builder: text and JSON output for sht-colour commands."""

import json
from typing import Any

from sht_colour.core.types import Report


def _format_row(command: str, row: dict[str, Any]) -> str:
    source = row['input']
    if not row['ok']:
        label = row.get('kind') or row.get('error')
        return f'  {source:<14} ✗ {label}: {row["message"]}'

    if command == 'to-rgb':
        rgb = ', '.join(row['rgb'])
        return f'  {source:<14} {row["code"]:<14} {row["hex"]}  rgb({rgb})'
    if command == 'to-sht':
        return f'  {source:<14} {row["code"]:<14} {row["code_hex"]}  Δ={row["distance"]}'
    if command == 'parse':
        counts = '  '.join(f'{k}={v}' for k, v in row['modifiers'].items())
        return f'  {source:<14} {row["hue"]:<8} {counts}  → {row["code"]}'
    if command == 'ramp':
        return f'  {row["step"]:>3}  {row["code"]:<20} {row["hex"]}'

    # Generic fallback
    fields = '  '.join(f'{k}={v}' for k, v in row.items() if k not in ('input', 'ok'))
    return f'  {source:<14} {fields}'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    header = f'sht-colour {report.command}'
    if report.precision is not None:
        header += f' (precision {report.precision})'
    lines = [header, '']
    for row in report.rows:
        lines.append(_format_row(report.command, row))

    total = report.ok_count + report.error_count
    if total > 0:
        lines.append('')
        lines.append(f'OK {report.ok_count}/{total}  FAIL {report.error_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.precision is not None:
        obj['precision'] = report.precision
    obj['rows'] = report.rows
    obj['summary'] = {
        'total': report.ok_count + report.error_count,
        'ok': report.ok_count,
        'fail': report.error_count,
    }
    return json.dumps(obj, indent=2)
