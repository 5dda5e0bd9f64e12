"""Helpers shared by the colour commands (not itself a command)."""

from typing import Any

from colour_type.core.colour import Colour, ParseError
from colour_type.core.types import Report


def coerce_value(text: str, decimal: bool = False) -> Any:
    """Turn one CLI argument into something Colour.parse understands.

    '10,20,30' becomes a channel list; with decimal=True a digit-only
    argument is a packed integer; anything else is hex text.
    """
    if ',' in text:
        return [part.strip() for part in text.split(',')]
    if decimal and text.strip().isdigit():
        return int(text)
    return text


def parse_all(values: list[str], report: Report, args) -> list[tuple[str, Colour]]:
    """Parse every CLI value; malformed ones are recorded as report errors."""
    parsed = []
    for text in values:
        value = coerce_value(text, decimal=getattr(args, 'decimal', False))
        try:
            parsed.append((text, Colour.parse(value, strict=args.strict)))
        except ParseError as e:
            report.add_error(str(e))
    return parsed


def describe(colour: Colour) -> dict[str, Any]:
    """Every representation of a colour, keyed for the report."""
    return {
        'html': colour.to_html(),
        'hex': colour.to_hex(),
        'decimal': colour.to_decimal(),
        'rgb': colour.to_rgb(),
        'hsl': colour.to_hsl(),
    }
