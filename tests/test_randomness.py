"""Tests for random and rounding helpers."""

from conftest import FixedRandom

from review_radar.core.randomness import randint, round1, round_half_up, uniform


def test_round1_rounds_half_up() -> None:
    """Test one-decimal rounding sends halves up."""
    assert round1(4.25) == 4.3
    assert round1(4.24) == 4.2


def test_round_half_up() -> None:
    """Test integer rounding sends halves up."""
    assert round_half_up(62.5) == 63
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2


def test_randint_bounds() -> None:
    """Test randint covers both ends of its range."""
    assert randint(FixedRandom([0.0]), 3, 14) == 3
    assert randint(FixedRandom([0.999]), 3, 14) == 14


def test_uniform_bounds() -> None:
    """Test uniform starts at its lower bound."""
    assert uniform(FixedRandom([0.0]), 3.5, 5.0) == 3.5
    assert uniform(FixedRandom([0.5]), 3.5, 5.0) == 4.25
