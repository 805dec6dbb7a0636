from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from ..printing import DEFAULT_TARGET_WIDTH, PrintJobBuilder, PrintSettings
from ..protocol import DEFAULT_BAND_HEIGHT, DEFAULT_ENCODING, ENCODERS
from ..raster import DEFAULT_RESAMPLE, RESAMPLE_FILTERS
from ..raster.types import Raster
from ..sources import RandomImageSource
from ..transport import FileTransport, SerialTransport

DEVICE_ENV_VAR = "RANDOMIMAGEPRINT_DEVICE"
DEFAULT_DEVICE = "/dev/rfcomm0"
DEFAULT_CHUNK_SIZE = 180
DEFAULT_INTERVAL_MS = 4


class NoImageAvailable(RuntimeError):
    pass


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Random Image Print: dither an image and send it to a 58 mm thermal printer."
    )
    parser.add_argument("path", nargs="?", help="Image to print (.png/.jpg/.jpeg)")
    parser.add_argument("--from-dir", metavar="DIR", help="Print a random image from this directory")
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--serial",
        metavar="PATH",
        help=f"Serial port of the printer (default: ${DEVICE_ENV_VAR} or {DEFAULT_DEVICE})",
    )
    target.add_argument("--output", metavar="FILE", help="Write the job to FILE instead ('-' for stdout)")
    parser.add_argument("--markup", action="store_true", help="Write <img>HEX</img> lines (with --output)")
    parser.add_argument("--width", type=int, default=DEFAULT_TARGET_WIDTH, help="Raster width in dots")
    parser.add_argument("--band-height", type=int, default=DEFAULT_BAND_HEIGHT, help="Rows per encoded band")
    parser.add_argument("--encoding", choices=sorted(ENCODERS), default=DEFAULT_ENCODING)
    parser.add_argument("--resample", choices=sorted(RESAMPLE_FILTERS), default=DEFAULT_RESAMPLE)
    parser.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE, help="Serial write size in bytes")
    parser.add_argument("--interval-ms", type=int, default=DEFAULT_INTERVAL_MS, help="Delay between serial writes")
    parser.add_argument("--list-encodings", action="store_true", help="List band encodings and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def list_encodings() -> int:
    for name in sorted(ENCODERS):
        print(name)
    return 0


def default_device() -> str:
    return os.environ.get(DEVICE_ENV_VAR) or DEFAULT_DEVICE


def resolve_raster(builder: PrintJobBuilder, args: argparse.Namespace) -> Raster:
    if args.path:
        return builder.load(args.path)
    raster = RandomImageSource(args.from_dir).next_raster()
    if raster is None:
        raise NoImageAvailable(f"No images found in {args.from_dir}")
    return raster


def build_settings(args: argparse.Namespace) -> PrintSettings:
    return PrintSettings(
        target_width=args.width,
        band_height=args.band_height,
        encoding=args.encoding,
        resample=args.resample,
    )


def run_print(args: argparse.Namespace) -> int:
    builder = PrintJobBuilder(build_settings(args))
    raster = resolve_raster(builder, args)
    bands = builder.build_bands(raster)

    if args.markup:
        markup = "".join(band.markup() for band in bands)
        asyncio.run(FileTransport(args.output).write(markup.encode("ascii")))
        return 0

    if args.output:
        transport = FileTransport(args.output)
    else:
        transport = SerialTransport(args.serial or default_device())

    asyncio.run(transport.send(bands, builder.encoder, args.chunk_size, args.interval_ms))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if args.list_encodings:
        return list_encodings()
    if args.path and args.from_dir:
        print("Provide either an image path or --from-dir, not both. Use --help for usage.", file=sys.stderr)
        return 2
    if not args.path and not args.from_dir:
        print("Missing image path or --from-dir. Use --help for usage.", file=sys.stderr)
        return 2
    if args.markup and not args.output:
        print("--markup requires --output.", file=sys.stderr)
        return 2
    try:
        return run_print(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
