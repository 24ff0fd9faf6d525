"""Shared fixtures for jpegls-bench tests.

Frames are kept tiny so the real CharLS round trip stays fast. The
faulty_codec factory wraps the real codec and injects the failures a
broken codec could produce: bad capacity, encode/decode errors, wrong
fill counts and silently corrupted samples.
"""
from __future__ import annotations

import pytest

from jpegls_bench.codec.charls import CharlsCodec
from jpegls_bench.codec.result import CodecResult
from jpegls_bench.domain.frame import FrameDescriptor
from jpegls_bench.profiling.benchmark import BenchmarkConfig


class FaultyCodec:
    """CharlsCodec with configurable faults."""

    name = "Faulty"

    def __init__(
        self,
        capacity: int | None = None,
        fail_encode_at: int | None = None,
        fail_decode_at: int | None = None,
        short_fill: bool = False,
        corrupt: dict[int, int] | None = None,
    ) -> None:
        self._inner = CharlsCodec()
        self._capacity = capacity
        self._fail_encode_at = fail_encode_at
        self._fail_decode_at = fail_decode_at
        self._short_fill = short_fill
        self._corrupt = corrupt or {}
        self.encode_calls = 0
        self.decode_calls = 0

    def estimate_destination_capacity(self, frame):
        if self._capacity is not None:
            return CodecResult.success(self._capacity)
        return self._inner.estimate_destination_capacity(frame)

    def encode(self, frame, samples, destination):
        call = self.encode_calls
        self.encode_calls += 1
        if call == self._fail_encode_at:
            return CodecResult.failure("injected encode failure")
        return self._inner.encode(frame, samples, destination)

    def decode(self, encoded, destination):
        call = self.decode_calls
        self.decode_calls += 1
        if call == self._fail_decode_at:
            return CodecResult.failure("injected decode failure")
        result = self._inner.decode(encoded, destination)
        if not result.ok:
            return result
        for index, value in self._corrupt.items():
            destination[index] = value
        if self._short_fill:
            return CodecResult.success(result.value - 1)
        return result


@pytest.fixture
def small_frame() -> FrameDescriptor:
    return FrameDescriptor(width=64, height=48, bits_per_sample=12)


@pytest.fixture
def small_config(small_frame: FrameDescriptor) -> BenchmarkConfig:
    return BenchmarkConfig(frame=small_frame, loop_count=3)


@pytest.fixture
def codec() -> CharlsCodec:
    return CharlsCodec()


@pytest.fixture
def faulty_codec():
    """Factory: faulty_codec(fail_encode_at=0, ...) -> FaultyCodec."""
    return FaultyCodec
