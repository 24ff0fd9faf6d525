"""Frame descriptor and immutable image container.

A FrameDescriptor is the shape metadata handed to the codec unchanged.
An Image pairs a descriptor with its samples: a flat, row-major numpy
array (pixel-interleaved when there is more than one component) that
is marked read-only as soon as it is built.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

MIN_BITS_PER_SAMPLE = 2
MAX_BITS_PER_SAMPLE = 16
MAX_COMPONENT_COUNT = 4


@dataclass(frozen=True, slots=True)
class FrameDescriptor:
    """Width, height, sample depth and component count of an image."""
    width: int
    height: int
    bits_per_sample: int
    component_count: int = 1

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )
        if not MIN_BITS_PER_SAMPLE <= self.bits_per_sample <= MAX_BITS_PER_SAMPLE:
            raise ValueError(
                f"bits_per_sample must be in [{MIN_BITS_PER_SAMPLE}, "
                f"{MAX_BITS_PER_SAMPLE}], got {self.bits_per_sample}"
            )
        if not 1 <= self.component_count <= MAX_COMPONENT_COUNT:
            raise ValueError(
                f"component_count must be in [1, {MAX_COMPONENT_COUNT}], "
                f"got {self.component_count}"
            )

    @property
    def max_value(self) -> int:
        return (1 << self.bits_per_sample) - 1

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def sample_count(self) -> int:
        return self.width * self.height * self.component_count

    @property
    def bytes_per_sample(self) -> int:
        return 1 if self.bits_per_sample <= 8 else 2

    @property
    def raw_size_bytes(self) -> int:
        return self.sample_count * self.bytes_per_sample

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.uint8 if self.bits_per_sample <= 8 else np.uint16)

    @property
    def shape(self) -> tuple[int, ...]:
        """Array shape the codec expects for this frame."""
        if self.component_count == 1:
            return (self.height, self.width)
        return (self.height, self.width, self.component_count)

    def describe(self) -> str:
        kind = "mono" if self.component_count == 1 else f"{self.component_count}-component"
        return f"{self.width}x{self.height} {self.bits_per_sample}-bit {kind}"


@dataclass(frozen=True, slots=True)
class Image:
    """A frame descriptor plus its read-only sample array."""
    frame: FrameDescriptor
    samples: np.ndarray

    def __post_init__(self) -> None:
        if self.samples.ndim != 1:
            raise ValueError("Image samples must be a flat array")
        if self.samples.size != self.frame.sample_count:
            raise ValueError(
                f"Expected {self.frame.sample_count} samples, "
                f"got {self.samples.size}"
            )
        if self.samples.dtype != self.frame.dtype:
            raise ValueError(
                f"Expected dtype {self.frame.dtype}, got {self.samples.dtype}"
            )
        self.samples.flags.writeable = False

    def as_frame_array(self) -> np.ndarray:
        """Read-only view of the samples in the frame's shape."""
        return self.samples.reshape(self.frame.shape)
