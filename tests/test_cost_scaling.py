"""Tests for cost_scaling module."""
import pytest

from neontycoon.cost_scaling import CostScaling


def test_fixed():
    cs = CostScaling.fixed()
    assert cs.compute(100.0, 0) == 100.0
    assert cs.compute(100.0, 10) == 100.0


def test_exponential():
    cs = CostScaling.exponential(2.0)
    assert cs.compute(100.0, 0) == 100.0
    assert cs.compute(100.0, 1) == 200.0
    assert cs.compute(100.0, 2) == 400.0
    assert cs.compute(100.0, 3) == 800.0


def test_exponential_default_rate():
    cs = CostScaling.exponential()
    assert abs(cs.compute(100.0, 1) - 115.0) < 0.01


def test_linear():
    cs = CostScaling.linear(0.10)
    assert cs.compute(100.0, 0) == pytest.approx(100.0)
    assert cs.compute(100.0, 1) == pytest.approx(110.0)
    assert cs.compute(100.0, 5) == pytest.approx(150.0)


def test_custom():
    cs = CostScaling.custom(lambda base, count: base * (count + 1) ** 2)
    assert cs.compute(10.0, 0) == 10.0
    assert cs.compute(10.0, 1) == 40.0
    assert cs.compute(10.0, 2) == 90.0
