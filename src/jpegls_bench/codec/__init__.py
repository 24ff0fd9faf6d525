"""Codec contract, result type, and the CharLS implementation.

Public API:
    Codec: protocol the benchmark drives
    CodecResult: success value or error message
    DestinationBuffer: scoped encode destination
    CharlsCodec: JPEG-LS via imagecodecs
"""

from jpegls_bench.codec.buffer import DestinationBuffer
from jpegls_bench.codec.charls import CharlsCodec
from jpegls_bench.codec.protocol import Codec
from jpegls_bench.codec.result import CodecResult

__all__ = [
    "CharlsCodec",
    "Codec",
    "CodecResult",
    "DestinationBuffer",
]
