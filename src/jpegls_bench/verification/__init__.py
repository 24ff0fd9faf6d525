"""Round-trip verification of decoded samples."""

from jpegls_bench.verification.verifier import (
    DEFAULT_MAX_REPORTED,
    Mismatch,
    VerificationResult,
    verify_round_trip,
)

__all__ = [
    "DEFAULT_MAX_REPORTED",
    "Mismatch",
    "VerificationResult",
    "verify_round_trip",
]
