"""
Command-line icon generator -- renders an icon and saves it to disk.

Run:
    python generate_icon.py AB --shape square --size 256 --format ico --out app.ico

Without ``--out`` the file is written to the current directory under a
timestamped name.
"""

import argparse
import logging
import sys

from devtoolkit.config import settings
from devtoolkit.domain.entities import IconSpec
from devtoolkit.domain.enums import ExportFormat, IconShape
from devtoolkit.domain.errors import IconError
from devtoolkit.domain.export import export_icon, icon_to_data_url, suggested_filename
from devtoolkit.domain.icons import run_icon_job


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a text icon as PNG or ICO.")
    parser.add_argument("text", help="up to 3 characters (A-Z, 0-9)")
    parser.add_argument(
        "--shape", choices=[s.value for s in IconShape], default=IconShape.CIRCLE.value
    )
    parser.add_argument("--size", default=str(settings.default_icon_size))
    parser.add_argument("--background", default=settings.default_background_color)
    parser.add_argument("--color", default=settings.default_text_color)
    parser.add_argument(
        "--format", choices=[f.value for f in ExportFormat], default=ExportFormat.PNG.value
    )
    parser.add_argument(
        "--export-size", type=int, default=None, help="ICO entry size (defaults to --size, max 256)"
    )
    parser.add_argument("--out", default=None, help="destination file")
    parser.add_argument(
        "--base64", action="store_true", help="print a data URL instead of writing a file"
    )
    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)

    spec = IconSpec(
        text=args.text,
        shape=IconShape(args.shape),
        size=args.size,
        background_color=args.background,
        text_color=args.color,
    )
    job = run_icon_job(
        spec, min_size=settings.icon_min_size, max_size=settings.icon_max_size
    )
    if not job.succeeded:
        print(job.message, file=sys.stderr)
        return 1

    if args.base64:
        print(icon_to_data_url(job.png))
        return 0

    size = args.export_size
    if size is None:
        size = int(args.size)
        if args.format == ExportFormat.ICO.value:
            size = min(size, settings.ico_max_size)

    destination = args.out or suggested_filename(args.text, args.format)
    try:
        path = export_icon(job.png, args.format, size, destination)
    except IconError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Icon saved successfully as {args.format.upper()}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
