"""Command line entry point: render the diagnostic panel grid."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Tuple

from polypanel.batch import (DEFAULT_BATCH, REFERENCE_PANELS, RenderError,
                             panel_assignment, render_batch, validate_table)

logger = logging.getLogger(__name__)


def _pair(text: str) -> Tuple[int, int]:
    parts = text.lower().split('x')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f'expected AxB, got {text!r}')
    try:
        a, b = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'expected integers in {text!r}') from exc
    if a < 1 or b < 1:
        raise argparse.ArgumentTypeError(f'values must be positive: {text!r}')
    return a, b


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render the polyPanel diagnostic grid of generated shapes.",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_BATCH.filename,
        help=f"Destination image file (default: {DEFAULT_BATCH.filename}).",
    )
    parser.add_argument(
        "--size",
        type=_pair,
        default=DEFAULT_BATCH.size,
        help="Canvas size in pixels as WIDTHxHEIGHT (default: 1920x1280).",
    )
    parser.add_argument(
        "--grid",
        type=_pair,
        default=DEFAULT_BATCH.grid,
        help="Panel grid as ROWSxCOLS (default: 4x6).",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=DEFAULT_BATCH.dpi,
        help="Output resolution used to convert pixel sizes (default: 100).",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Render the remaining panels when one fails, and still write the image.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the panel assignment and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        try:
            validate_table(REFERENCE_PANELS, *args.grid)
        except ValueError as exc:
            logger.error("%s", exc)
            return 1
        for index, title in panel_assignment(REFERENCE_PANELS).items():
            print(f"{index:2d}  {title}")
        return 0

    config = replace(DEFAULT_BATCH,
                     filename=args.output,
                     size=args.size,
                     grid=args.grid,
                     dpi=args.dpi,
                     strict=not args.keep_going)
    try:
        result = render_batch(config.filename,
                              size=config.size,
                              grid=config.grid,
                              dpi=config.dpi,
                              strict=config.strict)
    except (RenderError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if not result.ok:
        for index, message in sorted(result.failed.items()):
            print(f"panel {index}: {message}", file=sys.stderr)
        return 1

    print(result.filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())
