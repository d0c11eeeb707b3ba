"""Tests partition.py."""
import pytest
import numpy as np

from eqsphere.dimension import Dimension
from eqsphere.area import area_of_collar, area_of_ideal_region
from eqsphere.partition import *


NUMS_REGIONS = [1, 2, 3, 4, 5, 12, 20, 33, 100, 256, 997, 1000, 5000]


def test_generate_caps_invariants():
    for dim in [1, 2]:
        for num_regions in NUMS_REGIONS:
            colatitudes, regions = generate_caps(dim, num_regions)
            assert len(colatitudes) == len(regions)
            assert np.all(np.diff(colatitudes) > 0)
            assert np.all(regions >= 1)
            assert np.sum(regions) == num_regions
            if dim == 2:
                assert colatitudes[-1] == np.pi
                if num_regions > 2:
                    assert regions[0] == 1
                    assert regions[-1] == 1

def test_generate_caps_sum_of_regions():
    for num_regions in range(1, 2001):
        _, regions = generate_caps(2, num_regions)
        assert np.sum(regions) == num_regions

def test_generate_caps_equal_areas():
    for num_regions in [3, 12, 100, 997]:
        colatitudes, regions = generate_caps(2, num_regions)
        tops = np.concatenate([[0.], colatitudes[:-1]])
        areas = area_of_collar(2, tops, colatitudes)
        ideal_area = area_of_ideal_region(2, num_regions)
        assert np.allclose(areas / regions, ideal_area)

def test_generate_caps_one_region():
    for dim in [1, 2]:
        colatitudes, regions = generate_caps(dim, 1)
        assert len(colatitudes) == 1
        assert list(regions) == [1]
    colatitudes, _ = generate_caps(2, 1)
    assert colatitudes[0] == np.pi

def test_generate_caps_two_regions():
    colatitudes, regions = generate_caps(2, 2)
    assert np.allclose(colatitudes, [np.pi / 2, np.pi])
    assert list(regions) == [1, 1]

def test_generate_caps_circle():
    colatitudes, regions = generate_caps(1, 5)
    expected = 2 * np.pi * np.arange(1, 6) / 5
    assert np.allclose(colatitudes, expected)
    assert np.allclose(np.degrees(colatitudes), [72, 144, 216, 288, 360])
    assert list(regions) == [1] * 5

def test_generate_caps_twelve_regions():
    colatitudes, regions = generate_caps(2, 12)
    assert list(regions) == [1, 5, 5, 1]
    assert np.isclose(colatitudes[1], np.pi / 2)
    assert np.isclose(colatitudes[0], np.pi - colatitudes[2])

def test_generate_caps_is_pure():
    for dim in [1, 2]:
        colatitudes_1, regions_1 = generate_caps(dim, 333)
        colatitudes_2, regions_2 = generate_caps(dim, 333)
        assert np.array_equal(colatitudes_1, colatitudes_2)
        assert np.array_equal(regions_1, regions_2)

def test_generate_caps_min_polar_colatitude():
    colatitudes, regions = generate_caps(2, 50)
    colatitudes_min, regions_min = generate_caps(2, 50, np.pi / 4)
    assert np.array_equal(colatitudes, colatitudes_min)
    assert np.array_equal(regions, regions_min)

def test_generate_caps_errors():
    for num_regions in [0, -3, 2.5, True, None]:
        with pytest.raises(ValueError):
            generate_caps(2, num_regions)
    for dim in [0, 3]:
        with pytest.raises(ValueError):
            generate_caps(dim, 10)
    for min_polar_colatitude in [-0.1, 4.]:
        with pytest.raises(ValueError):
            generate_caps(2, 10, min_polar_colatitude)

def test_partition():
    partition = partition_sphere(2, 100)
    assert partition.dim == Dimension.SPHERE
    assert partition.num_regions == 100
    assert partition.num_collars == len(partition.regions) - 2
    assert partition.min_polar_colatitude == 0.

    collars = partition.collars
    assert len(collars) == len(partition.regions)
    assert collars[0].top_colatitude == 0.
    assert collars[-1].bottom_colatitude == np.pi
    assert sum(collar.num_regions for collar in collars) == 100
    for collar, next_collar in zip(collars[:-1], collars[1:]):
        assert collar.bottom_colatitude == next_collar.top_colatitude
        assert next_collar.index == collar.index + 1

    # partitions are immutable
    with pytest.raises(ValueError):
        partition.colatitudes[0] = 0.
    with pytest.raises(ValueError):
        partition.regions[0] = 2

    assert partition_sphere(1, 7).num_collars == 0
    assert partition_sphere(2, 1).num_collars == 0
    assert partition_sphere(2, 2).num_collars == 0
    assert "num_regions=100" in repr(partition)

def test_partition_sphere_verbose(capsys):
    partition_sphere(2, 10, verbose=True)
    out = capsys.readouterr().out
    assert "Initializing partition with" in out
    assert "> num_regions = 10" in out

    partition_sphere(2, 10)
    assert capsys.readouterr().out == ""

def test_partition_invariants_are_checked():
    with pytest.raises(AssertionError):
        Partition(2, 4, [np.pi / 3, 2 * np.pi / 3, np.pi], [1, 1, 1])
    with pytest.raises(AssertionError):
        Partition(2, 3, [np.pi / 2, np.pi / 3, np.pi], [1, 1, 1])
