"""Tests rounding.py in utils"""
import numpy as np

from eqsphere.utils.rounding import *


def test_round_half_away_from_zero():
    assert round_half_away_from_zero(0.5) == 1
    assert round_half_away_from_zero(1.5) == 2
    assert round_half_away_from_zero(2.5) == 3
    assert round_half_away_from_zero(-0.5) == -1
    assert round_half_away_from_zero(-1.5) == -2
    assert round_half_away_from_zero(0.49) == 0
    assert round_half_away_from_zero(-2.51) == -3
    assert isinstance(round_half_away_from_zero(3.2), int)

def test_round_with_carry():
    values, discrepancy = round_with_carry([0.5, 0.5, 0.5, 0.5])
    assert values == [1, 0, 1, 0]
    assert discrepancy == 0.

    values, discrepancy = round_with_carry([0.4, 0.4, 0.4])
    assert values == [0, 1, 0]
    assert np.isclose(discrepancy, 0.2)

    values, discrepancy = round_with_carry([])
    assert values == []
    assert discrepancy == 0.

def test_round_with_carry_bounded_discrepancy():
    rng = np.random.default_rng(0)
    for _ in range(20):
        values = 10 * rng.random(50)
        rounded, discrepancy = round_with_carry(values)
        carries = np.cumsum(values) - np.cumsum(rounded)
        assert np.all(np.abs(carries) <= 0.5 + 1e-9)
        assert np.isclose(discrepancy, carries[-1])
        assert abs(np.sum(values) - np.sum(rounded)) <= 0.5 + 1e-9
