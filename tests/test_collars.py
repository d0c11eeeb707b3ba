"""Tests collars.py."""
import numpy as np

import eqsphere.collars
from eqsphere.collars import *


def test_polar_colatitude():
    for dim in [1, 2]:
        assert polar_colatitude(dim, 1) == np.pi
        assert polar_colatitude(dim, 2) == np.pi / 2
    assert np.isclose(polar_colatitude(2, 4), np.pi / 3)
    assert np.isclose(polar_colatitude(1, 4), np.pi / 4)
    # smaller caps for more regions
    assert polar_colatitude(2, 100) < polar_colatitude(2, 10)

def test_ideal_collar_angle():
    assert np.isclose(ideal_collar_angle(2, 4), np.sqrt(np.pi))
    assert np.isclose(ideal_collar_angle(1, 4), np.pi / 2)

def test_number_of_collars():
    assert number_of_collars(1, np.pi, 1.) == 0
    assert number_of_collars(2, np.pi / 2, 1.) == 0
    assert number_of_collars(10, 0.1, 0.) == 0
    assert number_of_collars(3,
        polar_colatitude(2, 3), ideal_collar_angle(2, 3)) == 1
    assert number_of_collars(4,
        polar_colatitude(2, 4), ideal_collar_angle(2, 4)) == 1
    assert number_of_collars(12,
        polar_colatitude(2, 12), ideal_collar_angle(2, 12)) == 2

def test_ideal_region_list():
    regions = ideal_region_list(2, 4, np.pi / 3, 1)
    assert len(regions) == 3
    assert np.allclose(regions, [1., 2., 1.])

    regions = ideal_region_list(2, 2, np.pi / 2, 0)
    assert np.allclose(regions, [1., 1.])

    for num_regions in [3, 12, 100, 997]:
        polar = polar_colatitude(2, num_regions)
        num_collars = number_of_collars(
            num_regions, polar, ideal_collar_angle(2, num_regions))
        regions = ideal_region_list(2, num_regions, polar, num_collars)
        assert len(regions) == num_collars + 2
        assert regions[0] == 1. and regions[-1] == 1.
        assert np.isclose(np.sum(regions), num_regions)

def test_round_ideal_region_list():
    regions = round_ideal_region_list(np.array([1., 5., 5., 1.]))
    assert regions == [1, 5, 5, 1]

    regions = round_ideal_region_list(np.array([1., 2.6, 3.7, 2.7, 1.]))
    assert sum(regions) == 11
    assert regions[0] == 1 and regions[-1] == 1

def test_round_ideal_region_list_fixes_total(monkeypatch, capsys):
    # rounding that lost a region
    monkeypatch.setattr(
        eqsphere.collars, "round_with_carry",
        lambda values: ([1, 1, 1], 0.))
    regions = round_ideal_region_list(np.array([1., 2., 1.]), verbose=True)
    assert regions == [1, 2, 1]
    assert "round_ideal_region_list" in capsys.readouterr().out
