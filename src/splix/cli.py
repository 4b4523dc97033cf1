"""
Module: cli

Purpose:
    Command-line entry point. Parses arguments into a SplitConfig,
    discovers source images and runs the batch.

Exit codes:
    0 - at least one image was split (individual failures are reported)
    1 - no image was split, or a fatal error stopped the batch
    2 - invalid arguments (argparse convention)

Key Functions:
    - build_parser(): argparse parser
    - main(): Run splix with argv, returns exit code
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from splix import __version__
from splix.config import DEFAULT_OUTPUT_DIR, SplitConfig
from splix.core.models import WeightSpec
from splix.discovery import collect_sources
from splix.errors import InvalidSpecificationError, SplixError
from splix.images.codec import resolve_output_format
from splix.pipeline import run_batch

logger = logging.getLogger("splix")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_ROWS_HELP = """\
The number of rows to split the image into.
Specify an integer, or a list of integers.
Ex:
-r 4        Split the image into 4 equal rows.
-r 2,3,1,5  Split the image into four rows of different heights.
            The image will be divided vertically into 2+3+1+5=11 equal sections.
            The first row will take up 2 sections, second row 3 sections, etc."""

_COLS_HELP = """\
The number of columns to split the image into.
Specify an integer, or a list of integers.
Ex:
-c 4        Split the image into 4 equal columns.
-c 2,3,1,5  Split the image into four columns of different widths.
            The image will be divided horizontally into 2+3+1+5=11 equal sections.
            The first column will take up 2 sections, second column 3 sections, etc."""


def weight_spec_arg(value: str) -> WeightSpec:
    """argparse type for --rows/--cols."""
    try:
        return WeightSpec.parse(value)
    except InvalidSpecificationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def positive_int_arg(value: str) -> int:
    """argparse type for worker counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splix",
        description="Lightning-fast image splitter.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "images",
        nargs="+",
        type=Path,
        help="Path of the image(s) to convert.\n"
             "Specify the path of an image, or a directory of images.",
    )
    parser.add_argument("-r", "--rows", type=weight_spec_arg, help=_ROWS_HELP)
    parser.add_argument("-c", "--cols", type=weight_spec_arg, help=_COLS_HELP)
    parser.add_argument(
        "-d", "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory to save the splixed images in. Default: `./{DEFAULT_OUTPUT_DIR}`.",
    )
    parser.add_argument(
        "-R", "--recursive",
        action="store_true",
        help="Search for images recursively in specified directories.",
    )
    parser.add_argument(
        "-f", "--format",
        dest="output_format",
        help="Output format (e.g. png, jpg, webp). Default: same as source.",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=positive_int_arg,
        help="Number of images processed in parallel. Default: CPU count.",
    )
    parser.add_argument(
        "--cell-workers",
        type=positive_int_arg,
        default=1,
        help="Threads used to write the cells of each image. Default: 1.",
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail an image instead of replacing existing output files.",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first image that fails.",
    )
    parser.add_argument(
        "--manifest",
        action="store_true",
        help="Append cell bounds for each image to splix-manifest.jsonl.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log per-cell detail.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    logger.setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run splix.

    Args:
        argv: Arguments (default: sys.argv[1:]).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help/--version exit 0, usage errors exit 2
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    configure_logging(args.verbose, args.quiet)

    if args.rows is None and args.cols is None:
        parser.print_usage(sys.stderr)
        print("splix: error: at least one of '--rows', '--cols' needs to be specified", file=sys.stderr)
        return EXIT_USAGE

    if args.output_format:
        try:
            resolve_output_format(None, args.output_format)
        except InvalidSpecificationError as e:
            print(f"splix: error: format: {e}", file=sys.stderr)
            return EXIT_USAGE

    config = SplitConfig(
        rows=args.rows or WeightSpec.uniform(1),
        cols=args.cols or WeightSpec.uniform(1),
        output_dir=args.output_dir,
        recursive=args.recursive,
        output_format=args.output_format,
        overwrite=not args.no_overwrite,
        max_workers=args.jobs,
        cell_workers=args.cell_workers,
        fail_fast=args.fail_fast,
        write_manifest=args.manifest,
    )

    try:
        sources = collect_sources(
            args.images, recursive=config.recursive, exclude=config.output_dir
        )
    except FileNotFoundError as e:
        print(f"splix: error: image: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not sources:
        print("splix: no images found", file=sys.stderr)
        return EXIT_FAILURE

    try:
        summary = run_batch(sources, config)
    except SplixError as e:
        logger.error(f"splix: aborted: {e}")
        return EXIT_FAILURE

    for failure in summary.failures:
        print(f"splix: failed: {failure.source}: {failure.error}", file=sys.stderr)
    print(
        f"Split {summary.succeeded}/{summary.total} images into "
        f"{summary.output_count} files in {config.output_dir}"
    )
    return EXIT_OK if summary.succeeded > 0 else EXIT_FAILURE
