"""Command-line interface for jpencoding."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jpencoding
from jpencoding.config import (
    DEFAULT_CHECK_BYTES,
    DEFAULT_MAX_DECODING_FAILURES,
    DetectionConfig,
)
from jpencoding.pipeline import DetectionResult
from jpencoding.reader import read_file_bytes, read_leading_bytes

_BINARY_LABEL = "BINARY"


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = -1
    if number < 0:
        msg = f"expected a non-negative integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _format(name: str, result: DetectionResult, *, minimal: bool, verbose: bool) -> str:
    label = result.encoding.charset or _BINARY_LABEL
    if minimal:
        return label
    line = f"{name}: {label}"
    if verbose:
        line += f" (method: {result.method.value}"
        for s in result.scores:
            line += f", {s.encoding.charset} {s.success}/{s.failure}"
        line += ")"
    return line


def main(argv: list[str] | None = None) -> None:
    """Run the ``jpencoding`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Guess the Japanese text encoding of files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-f",
        "--max-failures",
        type=_non_negative_int,
        default=DEFAULT_MAX_DECODING_FAILURES,
        help="Malformed sequences tolerated per encoding (0 = strict)",
    )
    parser.add_argument(
        "-c",
        "--check-bytes",
        type=_non_negative_int,
        default=DEFAULT_CHECK_BYTES,
        help="Leading bytes to examine (0 = whole file)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show the deciding stage and per-encoding success/failure counts",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log pipeline details to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"jpencoding {jpencoding.__version__}"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = DetectionConfig(
        max_decoding_failures=args.max_failures, check_bytes=args.check_bytes
    )

    if args.files:
        failed = False
        for filepath in args.files:
            try:
                data = read_file_bytes(Path(filepath), config.check_bytes)
            except OSError as e:
                print(f"jpencoding: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            result = jpencoding.detect(data, config)
            print(_format(filepath, result, minimal=args.minimal, verbose=args.verbose))
        if failed:
            sys.exit(1)
    else:
        data = read_leading_bytes(sys.stdin.buffer, config.check_bytes)
        result = jpencoding.detect(data, config)
        print(_format("stdin", result, minimal=args.minimal, verbose=args.verbose))


if __name__ == "__main__":
    main()
