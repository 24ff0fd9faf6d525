"""Encode/decode benchmark of a lossless codec on a synthetic frame.

The run, in order:
  1. Generate the synthetic image for the configured frame
  2. Ask the codec for a destination capacity and allocate one buffer
  3. Encode loop_count times into that buffer; keep only the last bytes
  4. Decode those bytes loop_count times, each into a fresh array
  5. Compare the last decoded array with the original image

Every iteration finishes before the next one starts. A codec failure at any
step ends the run; the failure comes back in BenchmarkRun.error and no
later step runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from jpegls_bench.codec.buffer import DestinationBuffer
from jpegls_bench.codec.charls import CharlsCodec
from jpegls_bench.codec.protocol import Codec
from jpegls_bench.codec.result import CodecResult
from jpegls_bench.domain.frame import FrameDescriptor
from jpegls_bench.profiling.timing import TimingStats, collect_samples
from jpegls_bench.synthetic.image_generator import DEFAULT_SEED, generate_test_image
from jpegls_bench.verification.verifier import (
    DEFAULT_MAX_REPORTED,
    VerificationResult,
    verify_round_trip,
)

log = logging.getLogger(__name__)

DEFAULT_LOOP_COUNT = 10

# 8K UHD, 12-bit mono: a raw sensor-sized frame.
DEFAULT_FRAME = FrameDescriptor(
    width=7680, height=4320, bits_per_sample=12, component_count=1
)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """What to benchmark and how many times."""
    frame: FrameDescriptor = DEFAULT_FRAME
    loop_count: int = DEFAULT_LOOP_COUNT
    seed: int = DEFAULT_SEED
    max_reported_mismatches: int = DEFAULT_MAX_REPORTED

    def __post_init__(self) -> None:
        if self.loop_count < 1:
            raise ValueError(f"loop_count must be >= 1, got {self.loop_count}")


@dataclass(slots=True)
class BenchmarkRun:
    """Everything a report needs from one benchmark run."""
    config: BenchmarkConfig
    codec_name: str
    encoded_size: int = 0
    encode_stats: TimingStats | None = None
    decode_stats: TimingStats | None = None
    verification: VerificationResult | None = None
    error: str | None = None
    failed_step: str | None = None

    @property
    def raw_size_bytes(self) -> int:
        return self.config.frame.raw_size_bytes

    @property
    def compression_ratio(self) -> float:
        if self.encoded_size <= 0:
            return 0.0
        return self.raw_size_bytes / self.encoded_size

    @property
    def succeeded(self) -> bool:
        return (
            self.error is None
            and self.verification is not None
            and self.verification.passed
        )


def run_benchmark(
    config: BenchmarkConfig | None = None,
    codec: Codec | None = None,
) -> BenchmarkRun:
    """Run the full benchmark and return timing and verification data."""
    config = config or BenchmarkConfig()
    codec = codec or CharlsCodec()
    frame = config.frame
    run = BenchmarkRun(config=config, codec_name=codec.name)

    log.info("Generating synthetic %s test image", frame.describe())
    image = generate_test_image(frame, seed=config.seed)

    probe = codec.estimate_destination_capacity(frame)
    if not probe.ok:
        return _abort(run, "capacity probe", probe.error)
    capacity = probe.value or 0
    if capacity <= 0:
        return _abort(
            run, "capacity probe",
            f"Codec reported an unusable destination capacity of {capacity} bytes",
        )
    destination = DestinationBuffer(capacity)

    # --- encode ---
    def _encode_once() -> CodecResult[int]:
        with destination.lease() as view:
            result = codec.encode(frame, image.samples, view)
            if result.ok:
                destination.commit(result.value)
        return result

    log.info("Running encode benchmark (%d iterations)", config.loop_count)
    encode_phase = collect_samples("encode", _encode_once, config.loop_count)
    if not encode_phase.ok:
        return _abort(run, "encode", encode_phase.error)
    encoded = destination.snapshot()
    run.encoded_size = len(encoded)
    run.encode_stats = encode_phase.stats()

    # --- decode ---
    def _decode_once() -> CodecResult[np.ndarray]:
        decoded = np.empty(frame.sample_count, dtype=frame.dtype)
        result = codec.decode(encoded, decoded)
        if not result.ok:
            return CodecResult.failure(result.error)
        if result.value != frame.sample_count:
            return CodecResult.failure(
                f"Decoder filled {result.value} samples, expected {frame.sample_count}"
            )
        return CodecResult.success(decoded)

    log.info("Running decode benchmark (%d iterations)", config.loop_count)
    decode_phase = collect_samples("decode", _decode_once, config.loop_count)
    if not decode_phase.ok:
        return _abort(run, "decode", decode_phase.error)
    run.decode_stats = decode_phase.stats()

    # --- round trip ---
    log.info("Verifying round-trip correctness")
    run.verification = verify_round_trip(
        image.samples,
        decode_phase.last_value,
        max_reported=config.max_reported_mismatches,
    )
    if not run.verification.passed:
        log.error("Round-trip verification failed: %s", run.verification.error_message)
    return run


def _abort(run: BenchmarkRun, step: str, message: str | None) -> BenchmarkRun:
    run.error = message or f"{step} failed"
    run.failed_step = step
    log.error("%s failed: %s", step.capitalize(), run.error)
    return run
