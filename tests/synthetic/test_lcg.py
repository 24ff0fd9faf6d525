"""Tests for the explicit-state LCG."""
from __future__ import annotations

import numpy as np
import pytest

from jpegls_bench.synthetic.lcg import DRAW_MAX, MASK, Lcg


def _sequential(rng: Lcg, n: int) -> tuple[list[int], Lcg]:
    out = []
    for _ in range(n):
        value, rng = rng.next()
        out.append(value)
    return out, rng


class TestNext:
    def test_first_draw_from_seed_42(self) -> None:
        value, nxt = Lcg(42).next()
        assert nxt.state == 3397979675
        assert value == 19081

    def test_state_is_not_mutated(self) -> None:
        rng = Lcg(42)
        rng.next()
        assert rng.state == 42

    def test_draws_stay_in_15_bits(self) -> None:
        values, _ = _sequential(Lcg(7), 5000)
        assert all(0 <= v <= DRAW_MAX for v in values)

    def test_same_seed_same_sequence(self) -> None:
        a, _ = _sequential(Lcg(123), 200)
        b, _ = _sequential(Lcg(123), 200)
        assert a == b

    def test_state_outside_32_bits_rejected(self) -> None:
        with pytest.raises(ValueError):
            Lcg(-1)
        with pytest.raises(ValueError):
            Lcg(MASK + 1)


class TestDraws:
    @pytest.mark.parametrize("n", [1, 2, 17, 1000])
    def test_matches_sequential_next(self, n: int) -> None:
        expected, expected_state = _sequential(Lcg(42), n)
        values, state = Lcg(42).draws(n)
        assert values.tolist() == expected
        assert state == expected_state

    def test_split_draws_continue_the_sequence(self) -> None:
        whole, _ = Lcg(42).draws(1000)
        first, rng = Lcg(42).draws(300)
        second, _ = rng.draws(700)
        assert np.array_equal(np.concatenate([first, second]), whole)

    def test_large_state_does_not_overflow(self) -> None:
        expected, _ = _sequential(Lcg(MASK), 64)
        values, _ = Lcg(MASK).draws(64)
        assert values.tolist() == expected

    def test_zero_draws(self) -> None:
        rng = Lcg(42)
        values, state = rng.draws(0)
        assert values.size == 0
        assert state == rng

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            Lcg(42).draws(-1)
