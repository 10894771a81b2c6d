"""Command line interface.

    usngrid encode 38.8895 -77.0353 --precision 5
    usngrid encode 38.8895 -77.0353 --precision 5 --mgrs
    usngrid decode "18S UJ 2347 0648" --center
    usngrid zone 61.0 5.0
    usngrid bbox 38.90 38.88 -77.02 -77.05

The datum defaults to the USNGRID_DATUM environment variable, then NAD83.
Errors are printed and the process exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from usngrid.config import Datum
from usngrid.converter import Converter
from usngrid.errors import UsngError
from usngrid.geo import BoundingBox, GeoPoint

CONSOLE = Console()
logger = logging.getLogger("usngrid")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="usngrid", description="Convert between lat/lon, UTM and USNG/MGRS")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug records")
    parser.add_argument(
        "--datum",
        choices=[datum.value for datum in Datum] + ["WGS84"],
        type=str.upper,
        default=None,
        help="datum of the coordinates (default: $USNGRID_DATUM or NAD83)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="lat/lon to a grid reference")
    encode.add_argument("lat", type=float)
    encode.add_argument("lon", type=float)
    encode.add_argument("-p", "--precision", type=int, default=5, help="precision level 0-6 (default: 5)")
    encode.add_argument("--mgrs", action="store_true", help="print MGRS instead of USNG")

    decode = commands.add_parser("decode", help="grid reference to lat/lon")
    decode.add_argument("reference")
    decode.add_argument("--center", action="store_true", help="print the center of the cell instead of its bounds")

    zone = commands.add_parser("zone", help="grid zone designation of a position")
    zone.add_argument("lat", type=float)
    zone.add_argument("lon", type=float)

    bbox = commands.add_parser("bbox", help="grid reference best describing a box")
    for edge in ("north", "south", "east", "west"):
        bbox.add_argument(edge, type=float)
    return parser


def _configure_logging(verbose: bool, console: Console) -> None:
    handler = RichHandler(console=console, show_path=False)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _results_panel(title: str, rows: list[tuple[str, str]]) -> Panel:
    t = Table.grid(padding=(0, 2))
    for label, value in rows:
        t.add_row(f"[b]{label}[/b]: ", value)
    return Panel(t, title=title, padding=(1, 2))


def _edge(value: float | None) -> str:
    return "-" if value is None else f"{value:.6f}"


def _encode(converter: Converter, args: argparse.Namespace) -> Panel:
    if args.mgrs:
        reference = converter.encode_mgrs(args.lat, args.lon, args.precision)
    else:
        reference = converter.encode(args.lat, args.lon, args.precision)
    return _results_panel(
        "MGRS" if args.mgrs else "USNG",
        [
            ("Position", f"{args.lat:.6f}, {args.lon:.6f}"),
            ("Datum", converter.datum.value),
            ("Precision", str(args.precision)),
            ("Reference", reference),
        ],
    )


def _decode(converter: Converter, args: argparse.Namespace) -> Panel:
    result = converter.decode(args.reference, center=args.center)
    if result is None:
        raise UsngError(f"'{args.reference}' is not a grid reference")

    rows = [("Reference", args.reference), ("Datum", converter.datum.value)]
    utm = converter.decode_to_utm(args.reference)
    if utm is not None:
        rows.append(("UTM", str(utm)))
    if isinstance(result, GeoPoint):
        rows.extend([("Latitude", f"{result.lat:.6f}"), ("Longitude", f"{result.lon:.6f}")])
    elif isinstance(result, BoundingBox):
        rows.extend(
            [
                ("North", _edge(result.north)),
                ("South", _edge(result.south)),
                ("East", _edge(result.east)),
                ("West", _edge(result.west)),
            ]
        )
    return _results_panel("Center" if args.center else "Cell", rows)


def _zone(converter: Converter, args: argparse.Namespace) -> Panel:
    zone_number = converter.resolve_zone_number(args.lat, args.lon)
    band = converter.band_letter(args.lat)
    return _results_panel(
        "Grid Zone",
        [
            ("Position", f"{args.lat:.6f}, {args.lon:.6f}"),
            ("Zone", str(zone_number)),
            ("Band", band),
            ("Designation", f"{zone_number}{band}"),
        ],
    )


def _bbox(converter: Converter, args: argparse.Namespace) -> Panel:
    reference = converter.encode_bounding_box(args.north, args.south, args.east, args.west)
    return _results_panel(
        "Bounding Box",
        [
            ("Box", f"N {args.north} S {args.south} E {args.east} W {args.west}"),
            ("Datum", converter.datum.value),
            ("Reference", reference),
        ],
    )


_COMMANDS = {
    "encode": _encode,
    "decode": _decode,
    "zone": _zone,
    "bbox": _bbox,
}


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the command line tool and return its exit status."""
    console = console or CONSOLE
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, console)

    datum = Datum.parse(args.datum) if args.datum else Datum.from_env()
    converter = Converter(datum)
    try:
        panel = _COMMANDS[args.command](converter, args)
    except UsngError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error:[/red] {exc}")
        return 1
    console.print(panel)
    return 0


if __name__ == "__main__":
    sys.exit(main())
