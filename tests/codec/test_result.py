"""Tests for CodecResult."""
from __future__ import annotations

import pytest

from jpegls_bench.codec.result import CodecResult


class TestCodecResult:
    def test_success(self) -> None:
        result = CodecResult.success(128)
        assert result.ok
        assert result.value == 128
        assert result.error is None
        assert result.unwrap() == 128

    def test_failure(self) -> None:
        result = CodecResult.failure("bitstream truncated")
        assert not result.ok
        assert result.value is None
        assert result.error == "bitstream truncated"

    def test_unwrap_failure_raises(self) -> None:
        with pytest.raises(RuntimeError, match="bitstream truncated"):
            CodecResult.failure("bitstream truncated").unwrap()

    def test_zero_is_still_a_success(self) -> None:
        assert CodecResult.success(0).ok
