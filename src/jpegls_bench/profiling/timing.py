"""Per-iteration timing and summary statistics.

collect_samples() runs one operation a fixed number of times, strictly
one after another, and records each call's wall-clock duration in
milliseconds using time.perf_counter(). Statistics are computed once
the sample set is complete:

    sorted ascending
    min    = sorted[0]
    median = sorted[n // 2]   (upper-middle element for even n)
    mean   = sum / n
"""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from jpegls_bench.codec.result import CodecResult

log = logging.getLogger(__name__)

T = TypeVar("T")

MIB = 1024 * 1024


@dataclass(frozen=True, slots=True)
class TimingStats:
    """Summary of one phase's sample set."""
    count: int
    min_ms: float
    median_ms: float
    mean_ms: float
    max_ms: float


@dataclass(frozen=True, slots=True)
class PhaseResult(Generic[T]):
    """Samples from one phase and the value of its last iteration."""
    name: str
    samples: tuple[float, ...]
    last_value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def stats(self) -> TimingStats:
        return summarize(self.samples)


def collect_samples(
    name: str,
    operation: Callable[[], CodecResult[T]],
    loop_count: int,
) -> PhaseResult[T]:
    """Run ``operation`` ``loop_count`` times and time every call.

    Stops at the first failed iteration; the failure's message becomes
    the phase error and the samples gathered so far are kept.
    """
    if loop_count < 1:
        raise ValueError(f"loop_count must be >= 1, got {loop_count}")

    samples: list[float] = []
    last: T | None = None
    for i in range(loop_count):
        t0 = time.perf_counter()
        result = operation()
        elapsed_ms = (time.perf_counter() - t0) * 1000
        if not result.ok:
            log.warning("%s iteration %d failed: %s", name, i, result.error)
            return PhaseResult(
                name=name, samples=tuple(samples), error=result.error
            )
        samples.append(elapsed_ms)
        last = result.value
        log.debug("%s iteration %d: %.3f ms", name, i, elapsed_ms)

    return PhaseResult(name=name, samples=tuple(samples), last_value=last)


def summarize(samples: Sequence[float]) -> TimingStats:
    """Compute min/median/mean/max over a complete sample set."""
    if not samples:
        raise ValueError("Cannot summarize an empty sample set")
    ordered = sorted(samples)
    n = len(ordered)
    # fsum can still land one ulp outside the range for identical samples
    mean = min(max(math.fsum(ordered) / n, ordered[0]), ordered[-1])
    return TimingStats(
        count=n,
        min_ms=ordered[0],
        median_ms=ordered[n // 2],
        mean_ms=mean,
        max_ms=ordered[-1],
    )


def throughput_mib_s(raw_size_bytes: int, time_ms: float) -> float:
    """Raw megabytes (MiB) processed per second at ``time_ms`` per pass."""
    if time_ms <= 0:
        return 0.0
    return (raw_size_bytes / MIB) / (time_ms / 1000)
