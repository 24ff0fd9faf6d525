"""Generate a reproducible test image resembling raw sensor data.

Each sample is a diagonal gradient covering the full dynamic range plus
a small band of LCG noise:

    gradient = (x * max // width + y * max // height) // 2
    noise    = draw % span - span // 2
    value    = clamp(gradient + noise, 0, max)

A pure gradient compresses far better than real captures and pure noise
does not compress at all; the mix keeps encode time and compression
ratio close to what lightly noisy raw frames produce.

Only integer arithmetic and the fixed-seed LCG are involved, so the
output is byte-identical across runs and platforms. The LCG advances
once per sample in raster order (once per pixel for mono frames); all
components of a pixel share the same gradient.
"""
from __future__ import annotations

import logging

import numpy as np

from jpegls_bench.domain.frame import FrameDescriptor, Image
from jpegls_bench.synthetic.lcg import Lcg

log = logging.getLogger(__name__)

DEFAULT_SEED = 42


def noise_span(bits_per_sample: int) -> int:
    """Width of the noise band: 1/64 of the range, 64 values at 12 bits."""
    return max(2, (1 << bits_per_sample) // 64)


def generate_test_image(frame: FrameDescriptor, seed: int = DEFAULT_SEED) -> Image:
    """Build the synthetic image for ``frame``, row by row."""
    max_value = frame.max_value
    span = noise_span(frame.bits_per_sample)
    half = span // 2
    row_len = frame.width * frame.component_count

    log.debug("Generating %s test image (seed=%d)", frame.describe(), seed)

    x_terms = np.arange(frame.width, dtype=np.int64) * max_value // frame.width
    samples = np.empty(frame.sample_count, dtype=frame.dtype)
    rng = Lcg(seed)

    for y in range(frame.height):
        y_term = y * max_value // frame.height
        gradient = (x_terms + y_term) // 2
        if frame.component_count > 1:
            gradient = np.repeat(gradient, frame.component_count)
        draws, rng = rng.draws(row_len)
        values = np.clip(gradient + (draws % span - half), 0, max_value)
        samples[y * row_len:(y + 1) * row_len] = values

    return Image(frame=frame, samples=samples)
