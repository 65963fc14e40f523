# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Print the entry point class named by a jar manifest.

Run `jarmain --help`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from colors import red

from jarmain.errors import ExitCode, ManifestError
from jarmain.main_class import get_main_class, read_main_class_from_bytes
from jarmain.manifest.line_reader import LineLengthPolicy
from jarmain.options import ManifestScanOptions
from jarmain.util.logging import LogLevel, initialize_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jarmain", description="Print the Main-Class attribute of a jar manifest."
    )
    parser.add_argument("manifest", help="Path to a MANIFEST.MF file, or - to read stdin.")
    parser.add_argument("--config", help="TOML file with a [manifest] table of scan options.")
    parser.add_argument(
        "--attribute", default=None, help="Attribute to look up instead of Main-Class."
    )
    parser.add_argument(
        "--max-line-length",
        type=int,
        default=None,
        help="Maximum bytes of content per manifest line (default: 72).",
    )
    parser.add_argument(
        "--line-length-policy",
        choices=[policy.value for policy in LineLengthPolicy],
        default=None,
        help="What to do with lines over the maximum length (default: reject).",
    )
    parser.add_argument(
        "--max-lines", type=int, default=None, help="Give up after scanning this many lines."
    )
    parser.add_argument(
        "--level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARN.value,
        help="Log verbosity.",
    )
    parser.add_argument(
        "--colors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Color error output (default: only when stderr is a terminal).",
    )
    return parser


def _load_options(args: argparse.Namespace) -> ManifestScanOptions:
    options = (
        ManifestScanOptions.from_file(args.config) if args.config else ManifestScanOptions()
    )
    return options.with_overrides(
        attribute=args.attribute,
        max_line_length=args.max_line_length,
        line_length_policy=args.line_length_policy,
        max_lines=args.max_lines,
    )


def run(args: argparse.Namespace) -> ExitCode:
    options = _load_options(args)
    if args.manifest == "-":
        value = read_main_class_from_bytes(sys.stdin.buffer, options, origin="<stdin>")
    else:
        value = get_main_class(args.manifest, options)
    if value is None:
        logger.info(f"No {options.attribute} attribute in {args.manifest}")
        return ExitCode.NOT_FOUND
    print(value)
    return ExitCode.SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    initialize_logging(LogLevel(args.level))
    use_colors = sys.stderr.isatty() if args.colors is None else args.colors
    try:
        return run(args)
    except ManifestError as e:
        message = f"jarmain: {e}"
        print(red(message) if use_colors else message, file=sys.stderr)
        return ExitCode.for_error(e)


if __name__ == "__main__":
    sys.exit(main())
