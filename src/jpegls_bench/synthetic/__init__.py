"""Deterministic synthetic image generation."""

from jpegls_bench.synthetic.image_generator import (
    DEFAULT_SEED,
    generate_test_image,
    noise_span,
)
from jpegls_bench.synthetic.lcg import Lcg

__all__ = [
    "DEFAULT_SEED",
    "Lcg",
    "generate_test_image",
    "noise_span",
]
