"""Linear-congruential generator with explicit, immutable state.

Same constants as the classic C library rand():

    state' = (state * 1103515245 + 12345) mod 2**32
    draw   = (state' >> 16) & 0x7FFF

An Lcg value never changes. next() hands back the draw together with
the successor state, so callers thread the state through explicitly.

draws(n) produces the same sequence as n calls to next() but computes
all n states at once with jump-ahead coefficients:

    state_k = A_k * state + C_k   (mod 2**32)
    A_k = a**k,  C_k = c * (a**(k-1) + ... + a + 1)

Both coefficients are below 2**32, so A_k * state + C_k stays below
2**64 and numpy's uint64 arithmetic never wraps before the mask.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np

MULTIPLIER = 1103515245
INCREMENT = 12345
MASK = 0xFFFFFFFF
DRAW_MAX = 0x7FFF


@lru_cache(maxsize=8)
def _jump_coefficients(count: int) -> tuple[np.ndarray, np.ndarray]:
    mult = np.empty(count, dtype=np.uint64)
    incr = np.empty(count, dtype=np.uint64)
    a, c = 1, 0
    for k in range(count):
        a = (a * MULTIPLIER) & MASK
        c = (c * MULTIPLIER + INCREMENT) & MASK
        mult[k] = a
        incr[k] = c
    mult.flags.writeable = False
    incr.flags.writeable = False
    return mult, incr


@dataclass(frozen=True, slots=True)
class Lcg:
    """One LCG state. Advancing returns a new Lcg."""
    state: int

    def __post_init__(self) -> None:
        if not 0 <= self.state <= MASK:
            raise ValueError(f"LCG state must fit in 32 bits, got {self.state}")

    def next(self) -> tuple[int, Lcg]:
        """Return (draw, successor) where draw is in [0, 0x7FFF]."""
        state = (self.state * MULTIPLIER + INCREMENT) & MASK
        return (state >> 16) & DRAW_MAX, Lcg(state)

    def draws(self, count: int) -> tuple[np.ndarray, Lcg]:
        """Return (count draws as int64 array, state after the last draw)."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return np.empty(0, dtype=np.int64), self
        mult, incr = _jump_coefficients(count)
        states = (mult * np.uint64(self.state) + incr) & np.uint64(MASK)
        values = ((states >> np.uint64(16)) & np.uint64(DRAW_MAX)).astype(np.int64)
        return values, Lcg(int(states[-1]))
