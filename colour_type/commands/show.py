"""Show every representation of each input colour.

Prints HTML (#rrggbb), bare hex, packed decimal, RGB channels and HSL for
each value. Values may be hex text ('#abc', 'ff8800'), comma separated
channels ('255,136,0') or, with --decimal, packed integers ('16746496').

Example:
    colour-type show '#abc' 255,136,0
    colour-type show --decimal 16746496 --json
"""

from colour_type.commands._common import describe, parse_all
from colour_type.core.types import Command, Report

command = Command(
    name='show',
    help='Show hex, HTML, decimal, RGB and HSL forms of each colour.',
)


@command.run
def run(values: list, report: Report, args) -> None:
    for source, colour in parse_all(values, report, args):
        report.add(source, describe(colour))
