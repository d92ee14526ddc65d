"""Tests for prestige module."""
import pytest

from neontycoon.prestige import PrestigeResult, prestige_potential


def test_below_threshold():
    assert prestige_potential(0) == 0
    assert prestige_potential(999_999.99) == 0


def test_square_root_curve():
    assert prestige_potential(1_000_000) == 1
    assert prestige_potential(3_999_999) == 1
    assert prestige_potential(4_000_000) == 2
    assert prestige_potential(100_000_000) == 10


def test_custom_threshold():
    assert prestige_potential(99, threshold=100) == 0
    assert prestige_potential(2500, threshold=100) == 5


def test_returns_int():
    assert isinstance(prestige_potential(2_000_000), int)


def test_huge_finite_money():
    assert prestige_potential(1e300) == pytest.approx(1e147)


@pytest.mark.parametrize("money", [float("inf"), float("nan")])
def test_non_finite_money_raises(money):
    with pytest.raises(ValueError, match="must be finite"):
        prestige_potential(money)


def test_result_defaults():
    result = PrestigeResult(success=False, reason="nope")
    assert result.reward_amount == 0
    assert result.money_spent == 0.0
