"""Bit-exact comparison of original and decoded samples.

A lossless codec must hand back every sample unchanged. The verifier
compares the two sequences element by element and, on failure, reports
where it broke: the earliest few mismatches with their expected and
actual values, plus the total number of mismatching samples. Listing
stops at max_reported; counting does not.

Sequences of different lengths fail without any element comparison.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

DEFAULT_MAX_REPORTED = 5


@dataclass(frozen=True, slots=True)
class Mismatch:
    index: int
    expected: int
    actual: int


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Outcome of a round-trip comparison."""

    passed: bool
    mismatch_count: int
    first_mismatches: tuple[Mismatch, ...] = ()
    expected_length: int = 0
    actual_length: int = 0
    error_message: str | None = None

    @property
    def length_mismatch(self) -> bool:
        return self.expected_length != self.actual_length


def verify_round_trip(
    original: np.ndarray | Sequence[int],
    decoded: np.ndarray | Sequence[int],
    max_reported: int = DEFAULT_MAX_REPORTED,
) -> VerificationResult:
    """Compare ``decoded`` against ``original`` sample by sample."""
    if max_reported < 0:
        raise ValueError(f"max_reported must be non-negative, got {max_reported}")

    expected = np.asarray(original).reshape(-1)
    actual = np.asarray(decoded).reshape(-1)

    if expected.size != actual.size:
        return VerificationResult(
            passed=False,
            mismatch_count=0,
            expected_length=expected.size,
            actual_length=actual.size,
            error_message=(
                f"Length mismatch: expected {expected.size} samples, "
                f"got {actual.size}"
            ),
        )

    # widen so uint8/uint16 mixes compare by value
    bad = np.flatnonzero(expected.astype(np.int64) != actual.astype(np.int64))
    if bad.size == 0:
        return VerificationResult(
            passed=True,
            mismatch_count=0,
            expected_length=expected.size,
            actual_length=actual.size,
        )

    first = tuple(
        Mismatch(index=int(i), expected=int(expected[i]), actual=int(actual[i]))
        for i in bad[:max_reported]
    )
    return VerificationResult(
        passed=False,
        mismatch_count=int(bad.size),
        first_mismatches=first,
        expected_length=expected.size,
        actual_length=actual.size,
        error_message=(
            f"{bad.size} of {expected.size} samples differ, "
            f"first at index {first[0].index if first else int(bad[0])}"
        ),
    )
