"""The encode/decode contract the benchmark drives.

The harness measures a codec; it does not implement one. Anything with
these three methods can be benchmarked. Implementations report problems
through CodecResult failures rather than raising.
"""
from __future__ import annotations

from typing import Protocol

import numpy as np

from jpegls_bench.codec.result import CodecResult
from jpegls_bench.domain.frame import FrameDescriptor


class Codec(Protocol):
    name: str

    def estimate_destination_capacity(
        self, frame: FrameDescriptor
    ) -> CodecResult[int]:
        """Upper bound on the encoded size of any image with this shape."""
        ...

    def encode(
        self,
        frame: FrameDescriptor,
        samples: np.ndarray,
        destination: memoryview,
    ) -> CodecResult[int]:
        """Encode ``samples`` into ``destination``; return the byte count."""
        ...

    def decode(
        self, encoded: bytes, destination: np.ndarray
    ) -> CodecResult[int]:
        """Decode ``encoded`` into the flat ``destination``; return samples filled."""
        ...
