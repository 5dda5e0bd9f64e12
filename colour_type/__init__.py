"""colour-type — a packed 24-bit RGB colour value with parsing, conversion
and storage helpers."""

from colour_type.core.colour import Color, Colour, ParseError, json_default
from colour_type.core.column import ColourColumn
from colour_type.core.types import HSL, RGB

__all__ = [
    'HSL',
    'RGB',
    'Color',
    'Colour',
    'ColourColumn',
    'ParseError',
    'json_default',
]

__version__ = '1.0.0'
