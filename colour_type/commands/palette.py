"""Most used colours of one or more images (k-means).

Each value is an image path. --limit sets how many colours to keep
(COLOUR_TYPE_PALETTE_LIMIT, default 5), --precision the pixel sampling
stride (COLOUR_TYPE_PALETTE_PRECISION, default 5). With --hex colours
are listed as #rrggbb, otherwise as r,g,b triples.

Example:
    colour-type palette logo.png --limit 3 --hex
    colour-type palette photo.jpg --precision 10 --json
"""

from colour_type.core.types import Command, Report
from colour_type.palette import from_file

command = Command(
    name='palette',
    help='Extract the most used colours of each image.',
)


@command.run
def run(values: list, report: Report, args) -> None:
    for path in values:
        try:
            colours = from_file(str(path), limit=args.limit, precision=args.precision, hex=args.hex)
        except OSError as e:
            report.add_error(str(e))
            continue
        report.add(path, {'colours': [c if args.hex else list(c) for c in colours]})
