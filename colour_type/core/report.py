"""Report builder — text and JSON output for colour-type results."""

import json
from typing import Any

from colour_type.core.colour import Colour, json_default
from colour_type.core.types import Report


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f'{value:.4g}'
    if isinstance(value, tuple) and hasattr(value, '_fields'):
        return ' '.join(f'{k}={_fmt(v)}' for k, v in zip(value._fields, value))
    if isinstance(value, list):
        return '  '.join(','.join(map(str, v)) if isinstance(v, list) else _fmt(v) for v in value)
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    for entry in report.entries:
        source = entry.get('input')
        lines.append(f'── {source}')
        for key, value in entry.items():
            if key == 'input':
                continue
            lines.append(f'  {key:<8} {_fmt(value)}')
        lines.append('')
    return '\n'.join(lines).rstrip('\n')


def _jsonable(value: Any) -> Any:
    # Named tuples become objects, Colours become '#rrggbb'
    if isinstance(value, tuple) and hasattr(value, '_fields'):
        return dict(zip(value._fields, value))
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if isinstance(value, Colour):
        return value.to_json()
    return value


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': [_jsonable(entry) for entry in report.entries],
    }
    if report.errors:
        obj['errors'] = list(report.errors)
    return json.dumps(obj, indent=2, default=json_default)
