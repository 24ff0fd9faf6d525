"""JPEG-LS codec backed by CharLS.

Encoding goes through pyjpegls, which takes the frame's bit depth
(bits_stored) so a 12-bit frame is coded as a 12-bit JPEG-LS stream
(P=12 in the SOF55 header, MAXVAL 4095) rather than as 16-bit data.
pyjpegls returns a fresh bytearray; encode() copies it into the
caller's destination and fails when it does not fit, the same outcome
CharLS reports for an undersized destination.

Decoding goes through imagecodecs with ``out=``, so CharLS writes the
samples straight into the caller's array.

Every stream's SOF55 frame header is checked against the expected
frame. Library errors (both bindings raise RuntimeError subclasses) and
argument errors are turned into CodecResult failures here; nothing
else in the harness sees them.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

import imagecodecs
import jpeg_ls
import numpy as np

from jpegls_bench.codec.result import CodecResult
from jpegls_bench.domain.frame import FrameDescriptor

log = logging.getLogger(__name__)

# Slack CharLS adds to its destination estimate for markers and headers.
HEADER_ALLOWANCE = 1024
SPIFF_HEADER_SIZE = 34

SOI = 0xD8
SOF55 = 0xF7
SOS = 0xDA

# CharLS interleave modes
INTERLEAVE_NONE = 0
INTERLEAVE_SAMPLE = 2


@dataclass(frozen=True, slots=True)
class JlsFrameHeader:
    """Fields of a JPEG-LS SOF55 segment."""
    bits_per_sample: int
    height: int
    width: int
    component_count: int

    @property
    def sample_count(self) -> int:
        return self.height * self.width * self.component_count


def read_frame_header(data: bytes) -> JlsFrameHeader | None:
    """Walk the marker segments up to SOS and return the SOF55 fields.

    Returns None when the data is not a JPEG-LS stream with a frame
    header before its first scan.
    """
    if len(data) < 4 or data[0] != 0xFF or data[1] != SOI:
        return None
    pos = 2
    while pos + 4 <= len(data):
        if data[pos] != 0xFF:
            return None
        marker = data[pos + 1]
        if marker == 0xFF:  # fill byte
            pos += 1
            continue
        if marker == SOS:
            return None
        (length,) = struct.unpack_from(">H", data, pos + 2)
        if marker == SOF55:
            if length < 6 or pos + 2 + length > len(data):
                return None
            bits, height, width, components = struct.unpack_from(">BHHB", data, pos + 4)
            return JlsFrameHeader(bits, height, width, components)
        pos += 2 + length
    return None


class CharlsCodec:
    """Lossless JPEG-LS encode/decode."""

    name = "CharLS"

    def __init__(self) -> None:
        # raw bytes of the last read-only source array handed to encode()
        self._source: np.ndarray | None = None
        self._source_raw = b""

    def estimate_destination_capacity(
        self, frame: FrameDescriptor
    ) -> CodecResult[int]:
        return CodecResult.success(
            frame.raw_size_bytes + HEADER_ALLOWANCE + SPIFF_HEADER_SIZE
        )

    def _raw_source(self, samples: np.ndarray) -> bytes:
        """Little-endian sample bytes; cached while the array is read-only."""
        if samples is self._source and not samples.flags.writeable:
            return self._source_raw
        raw = np.ascontiguousarray(
            samples, dtype=samples.dtype.newbyteorder("<")
        ).tobytes()
        if not samples.flags.writeable:
            self._source, self._source_raw = samples, raw
        return raw

    def encode(
        self,
        frame: FrameDescriptor,
        samples: np.ndarray,
        destination: memoryview,
    ) -> CodecResult[int]:
        if samples.size != frame.sample_count:
            return CodecResult.failure(
                f"Source holds {samples.size} samples, frame needs {frame.sample_count}"
            )
        if samples.dtype != frame.dtype:
            return CodecResult.failure(
                f"Source dtype {samples.dtype} does not match frame dtype {frame.dtype}"
            )
        interleave = INTERLEAVE_NONE if frame.component_count == 1 else INTERLEAVE_SAMPLE
        try:
            encoded = jpeg_ls.encode_pixel_data(
                self._raw_source(samples),
                interleave_mode=interleave,
                rows=frame.height,
                columns=frame.width,
                samples_per_pixel=frame.component_count,
                bits_stored=frame.bits_per_sample,
            )
        except (RuntimeError, ValueError) as exc:
            log.debug("encode_pixel_data failed: %s", exc)
            return CodecResult.failure(str(exc))

        header = read_frame_header(encoded)
        if header is None or header.bits_per_sample != frame.bits_per_sample:
            found = None if header is None else header.bits_per_sample
            return CodecResult.failure(
                f"Encoder wrote a {found}-bit frame header for a "
                f"{frame.bits_per_sample}-bit frame"
            )

        size = len(encoded)
        if size > len(destination):
            return CodecResult.failure(
                f"Destination buffer too small: need {size} bytes, "
                f"have {len(destination)}"
            )
        destination[:size] = encoded
        return CodecResult.success(size)

    def decode(
        self, encoded: bytes, destination: np.ndarray
    ) -> CodecResult[int]:
        header = read_frame_header(encoded)
        if header is None:
            return CodecResult.failure("No JPEG-LS frame header before the first scan")
        if header.sample_count != destination.size:
            return CodecResult.failure(
                f"Stream holds {header.sample_count} samples, destination "
                f"has room for {destination.size}"
            )
        expected_dtype = np.dtype(np.uint8 if header.bits_per_sample <= 8 else np.uint16)
        if destination.dtype != expected_dtype:
            return CodecResult.failure(
                f"{header.bits_per_sample}-bit stream needs a {expected_dtype} "
                f"destination, got {destination.dtype}"
            )

        if header.component_count == 1:
            shape = (header.height, header.width)
        else:
            shape = (header.height, header.width, header.component_count)
        try:
            imagecodecs.jpegls_decode(encoded, out=destination.reshape(shape))
        except (RuntimeError, ValueError) as exc:
            log.debug("jpegls_decode failed: %s", exc)
            return CodecResult.failure(str(exc))
        return CodecResult.success(int(destination.size))
