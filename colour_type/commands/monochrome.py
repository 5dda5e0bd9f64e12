"""Reduce each input colour to near-black or white.

Dark colours (average inverted channel above 128) become #010101,
everything else becomes #ffffff. Handy for picking a text colour that
stays readable on top of the input colour (use negate first).

Example:
    colour-type monochrome '#333'      # -> #010101
    colour-type monochrome '#ccc'      # -> #ffffff
"""

from colour_type.commands._common import describe, parse_all
from colour_type.core.types import Command, Report

command = Command(
    name='monochrome',
    help='Snap each colour to near-black (#010101) or white.',
)


@command.run
def run(values: list, report: Report, args) -> None:
    for source, colour in parse_all(values, report, args):
        report.add(source, describe(colour.monochrome()))
