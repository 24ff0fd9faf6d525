"""jpegls-bench: deterministic encode/decode benchmark for a lossless codec."""

__version__ = "0.1.0"
