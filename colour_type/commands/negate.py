"""Invert each input colour (every channel c becomes 255 - c).

Example:
    colour-type negate '#000'          # -> #ffffff
    colour-type negate 10,20,30 --json
"""

from colour_type.commands._common import describe, parse_all
from colour_type.core.types import Command, Report

command = Command(
    name='negate',
    help='Invert each colour channel.',
)


@command.run
def run(values: list, report: Report, args) -> None:
    for source, colour in parse_all(values, report, args):
        report.add(source, describe(colour.negate()))
