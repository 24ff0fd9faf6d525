"""Tests for FrameDescriptor and Image."""
from __future__ import annotations

import numpy as np
import pytest

from jpegls_bench.domain.frame import FrameDescriptor, Image


class TestFrameDescriptor:
    def test_default_8k_12_bit_geometry(self) -> None:
        frame = FrameDescriptor(width=7680, height=4320, bits_per_sample=12)
        assert frame.max_value == 4095
        assert frame.pixel_count == 33_177_600
        assert frame.sample_count == 33_177_600
        assert frame.bytes_per_sample == 2
        assert frame.raw_size_bytes == 66_355_200
        assert frame.dtype == np.uint16
        assert frame.shape == (4320, 7680)

    def test_multi_component_shape(self) -> None:
        frame = FrameDescriptor(width=5, height=4, bits_per_sample=8, component_count=3)
        assert frame.sample_count == 60
        assert frame.raw_size_bytes == 60
        assert frame.shape == (4, 5, 3)
        assert frame.dtype == np.uint8

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(width=0, height=1, bits_per_sample=8),
            dict(width=1, height=-3, bits_per_sample=8),
            dict(width=1, height=1, bits_per_sample=1),
            dict(width=1, height=1, bits_per_sample=17),
            dict(width=1, height=1, bits_per_sample=8, component_count=0),
            dict(width=1, height=1, bits_per_sample=8, component_count=5),
        ],
    )
    def test_invalid_descriptor_rejected(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            FrameDescriptor(**kwargs)

    def test_describe(self) -> None:
        assert FrameDescriptor(7680, 4320, 12).describe() == "7680x4320 12-bit mono"


class TestImage:
    def test_wrong_sample_count_rejected(self) -> None:
        frame = FrameDescriptor(2, 2, 8)
        with pytest.raises(ValueError):
            Image(frame=frame, samples=np.zeros(3, dtype=np.uint8))

    def test_wrong_dtype_rejected(self) -> None:
        frame = FrameDescriptor(2, 2, 12)
        with pytest.raises(ValueError):
            Image(frame=frame, samples=np.zeros(4, dtype=np.uint8))

    def test_samples_frozen_on_construction(self) -> None:
        samples = np.zeros(4, dtype=np.uint8)
        Image(frame=FrameDescriptor(2, 2, 8), samples=samples)
        assert not samples.flags.writeable
