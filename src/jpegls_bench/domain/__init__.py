"""Frame and image value types shared by every benchmark stage."""

from jpegls_bench.domain.frame import FrameDescriptor, Image

__all__ = [
    "FrameDescriptor",
    "Image",
]
