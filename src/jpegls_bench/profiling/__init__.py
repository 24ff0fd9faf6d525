"""Benchmark orchestration, timing and reporting for jpegls-bench."""

from jpegls_bench.profiling.benchmark import (
    BenchmarkConfig,
    BenchmarkRun,
    run_benchmark,
)
from jpegls_bench.profiling.report import (
    SUMMARY_KEYS,
    format_report,
    format_summary,
)
from jpegls_bench.profiling.timing import (
    PhaseResult,
    TimingStats,
    collect_samples,
    summarize,
    throughput_mib_s,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkRun",
    "PhaseResult",
    "SUMMARY_KEYS",
    "TimingStats",
    "collect_samples",
    "format_report",
    "format_summary",
    "run_benchmark",
    "summarize",
    "throughput_mib_s",
]
