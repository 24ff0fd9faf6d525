"""jpegls-bench CLI entry point.

Usage: uv run jpegls-bench [loop_count]

Exit status is 0 only when every iteration succeeded and the decoded
image matched the original exactly. Usage errors, codec errors and
round-trip mismatches all exit with 1.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, Sequence

from jpegls_bench.codec.charls import CharlsCodec
from jpegls_bench.profiling.benchmark import (
    DEFAULT_LOOP_COUNT,
    BenchmarkConfig,
    run_benchmark,
)
from jpegls_bench.profiling.report import format_header, format_report

log = logging.getLogger(__name__)

LOG_LEVEL_ENV = "JPEGLS_BENCH_LOG_LEVEL"


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors on stdout with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        self.exit(1)


def _loop_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"loop count must be a positive integer, got {text!r}"
        ) from None
    if value < 1:
        raise argparse.ArgumentTypeError(
            f"loop count must be a positive integer, got {value}"
        )
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="jpegls-bench",
        description=(
            "Encode/decode benchmark and round-trip check of CharLS JPEG-LS "
            "on a synthetic 8K 12-bit frame."
        ),
    )
    parser.add_argument(
        "loop_count", nargs="?", type=_loop_count, default=DEFAULT_LOOP_COUNT,
        help=f"Iterations per phase (default: {DEFAULT_LOOP_COUNT})",
    )
    return parser


def _configure_logging() -> None:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging()

    config = BenchmarkConfig(loop_count=args.loop_count)
    codec = CharlsCodec()
    print(format_header(config, codec.name), flush=True)
    print()
    try:
        run = run_benchmark(config, codec=codec)
    except Exception as exc:
        log.debug("Benchmark aborted", exc_info=True)
        print(f"Error: {exc}")
        return 1

    print(format_report(run, include_header=False))
    return 0 if run.succeeded else 1
