"""Report generation for benchmark runs.

Formats a BenchmarkRun as human-readable sections for the terminal and
as one summary line for tooling that scrapes benchmark output:

    encode_median_ms=412.5 decode_median_ms=398.1 encode_MB_s=153.4 decode_MB_s=158.9 ratio=2.38

The summary keys and their order are fixed (SUMMARY_KEYS). Values use
%g formatting (six significant digits) and nothing else appears on the
line.
"""
from __future__ import annotations

from jpegls_bench.profiling.benchmark import BenchmarkConfig, BenchmarkRun
from jpegls_bench.profiling.timing import MIB, TimingStats, throughput_mib_s
from jpegls_bench.verification.verifier import VerificationResult

SUMMARY_KEYS = (
    "encode_median_ms",
    "decode_median_ms",
    "encode_MB_s",
    "decode_MB_s",
    "ratio",
)


def format_header(config: BenchmarkConfig, codec_name: str = "CharLS") -> str:
    frame = config.frame
    lines = [
        f"=== {codec_name} encode/decode benchmark ===",
        f"Image:             {frame.describe()}",
        f"Pixel count:       {frame.pixel_count:,}",
        f"Raw size:          {frame.raw_size_bytes / MIB:.1f} MiB",
        f"Loop count:        {config.loop_count}",
    ]
    return "\n".join(lines)


def _latency_lines(label: str, stats: TimingStats, raw_size_bytes: int) -> list[str]:
    lines = []
    for name, ms in (("min", stats.min_ms), ("median", stats.median_ms), ("mean", stats.mean_ms)):
        title = f"{label} {name}:"
        lines.append(
            f"  {title:<18} {ms:.3f} ms "
            f"({throughput_mib_s(raw_size_bytes, ms):.1f} MB/s)"
        )
    return lines


def format_encode_report(run: BenchmarkRun) -> str:
    """Encoded size, compression ratio and encode latency."""
    if run.encode_stats is None:
        raise ValueError("Run has no encode statistics")
    pct = run.encoded_size * 100 / run.raw_size_bytes
    lines = [
        f"Encode ({run.encode_stats.count} iterations):",
        f"  Encoded size:      {run.encoded_size:,} bytes ({pct:.2f}%)",
        f"  Compression ratio: {run.compression_ratio:.3f}:1",
    ]
    lines.extend(_latency_lines("Encode", run.encode_stats, run.raw_size_bytes))
    return "\n".join(lines)


def format_decode_report(run: BenchmarkRun) -> str:
    if run.decode_stats is None:
        raise ValueError("Run has no decode statistics")
    lines = [f"Decode ({run.decode_stats.count} iterations):"]
    lines.extend(_latency_lines("Decode", run.decode_stats, run.raw_size_bytes))
    return "\n".join(lines)


def format_verification(result: VerificationResult) -> str:
    """PASS, or FAIL with the first mismatches and the total count."""
    if result.passed:
        return "Round-trip verification: PASS"

    lines = ["Round-trip verification: FAIL"]
    if result.length_mismatch:
        lines.append(
            f"  Length mismatch: expected {result.expected_length} samples, "
            f"got {result.actual_length}"
        )
        return "\n".join(lines)

    for m in result.first_mismatches:
        lines.append(
            f"  Mismatch at index {m.index}: expected {m.expected}, got {m.actual}"
        )
    lines.append(
        f"  Total mismatches: {result.mismatch_count} / {result.expected_length}"
    )
    return "\n".join(lines)


def summary_values(run: BenchmarkRun) -> dict[str, float]:
    """The five summary figures keyed as in SUMMARY_KEYS."""
    if run.encode_stats is None or run.decode_stats is None:
        raise ValueError("Run has no timing statistics to summarize")
    enc = run.encode_stats.median_ms
    dec = run.decode_stats.median_ms
    return {
        "encode_median_ms": enc,
        "decode_median_ms": dec,
        "encode_MB_s": throughput_mib_s(run.raw_size_bytes, enc),
        "decode_MB_s": throughput_mib_s(run.raw_size_bytes, dec),
        "ratio": run.compression_ratio,
    }


def format_summary(run: BenchmarkRun) -> str:
    """Single machine-parsable line of key=value tokens."""
    values = summary_values(run)
    return " ".join(f"{key}={values[key]:g}" for key in SUMMARY_KEYS)


def format_report(run: BenchmarkRun, include_header: bool = True) -> str:
    """Complete stdout text for a run; the summary line comes last.

    The summary is only emitted for a run that passed verification.
    """
    sections = []
    if include_header:
        sections.append(format_header(run.config, run.codec_name))
    if run.encode_stats is not None:
        sections.append(format_encode_report(run))
    if run.decode_stats is not None:
        sections.append(format_decode_report(run))
    if run.verification is not None:
        sections.append(format_verification(run.verification))
    if run.error is not None:
        sections.append(f"{run.codec_name} error: {run.error}")
    if run.succeeded:
        sections.append(format_summary(run))
    return "\n\n".join(sections)
