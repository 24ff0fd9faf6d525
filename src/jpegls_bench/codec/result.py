"""Explicit success-or-error value returned by every codec call.

The codec adapter converts library exceptions into failures at the
boundary, so the orchestrator branches on ``ok`` instead of relying on
exceptions unwinding through the timing loops.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CodecResult(Generic[T]):
    """Either a value or a human-readable error message, never both."""
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> CodecResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> CodecResult[T]:
        return cls(error=message)

    def unwrap(self) -> T:
        """Return the value. Raises RuntimeError on a failure."""
        if self.error is not None:
            raise RuntimeError(self.error)
        return self.value  # type: ignore[return-value]
