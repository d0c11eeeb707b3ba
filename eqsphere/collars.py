"""
Planning of the collars of a zonal equal-area partition.

The two polar caps each hold one region. The band between them is cut
into collars of (nearly) equal angular width, and each collar gets the
number of regions that makes all regions have the same area.
"""
from typing import List

import numpy as np

from eqsphere.area import \
    area_of_collar, \
    area_of_ideal_region, \
    colatitude_of_cap
from eqsphere.dimension import as_dimension
from eqsphere.utils.rounding import \
    round_half_away_from_zero, \
    round_with_carry


def polar_colatitude(dim, num_regions: int) -> float:
    """
    Returns the colatitude of the north polar cap.

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        num_regions: number of regions of the partition (N)
            (int)

    Returns:
        colatitude: colatitude of the boundary of the polar cap
            (float)
    """
    if num_regions == 1:
        # the single region is the whole sphere
        return np.pi
    if num_regions == 2:
        # two hemispheres
        return np.pi / 2.
    return float(colatitude_of_cap(
        dim, area_of_ideal_region(dim, num_regions)))


def ideal_collar_angle(dim, num_regions: int) -> float:
    """Returns the angular width of a collar whose area is one ideal region."""
    dim = as_dimension(dim)
    return float(area_of_ideal_region(dim, num_regions)**(1. / int(dim)))


def number_of_collars(
    num_regions: int,
    polar_colatitude: float,
    ideal_collar_angle: float) -> int:
    """
    Returns the number of collars between the two polar caps.

    Args:
        num_regions: number of regions of the partition (N)
            (int)
        polar_colatitude: colatitude of the north polar cap
            (float)
        ideal_collar_angle: ideal angular width of a collar
            (float)

    Returns:
        num_collars: number of collars, excluding the polar caps
            (int)
    """
    if num_regions <= 2 or ideal_collar_angle <= 0:
        return 0
    num_collars = round_half_away_from_zero(
        (np.pi - 2. * polar_colatitude) / ideal_collar_angle)
    return max(1, num_collars)


def ideal_region_list(
    dim,
    num_regions: int,
    polar_colatitude: float,
    num_collars: int) -> np.ndarray:
    """
    Returns the ideal (fractional) number of regions in each collar,
    polar caps included.

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        num_regions: number of regions of the partition (N)
            (int)
        polar_colatitude: colatitude of the north polar cap
            (float)
        num_collars: number of collars between the polar caps
            (int)

    Returns:
        ideal_regions: ideal number of regions of each collar
            (num_collars + 2) array
    """
    ideal_regions = np.zeros(num_collars + 2)
    ideal_regions[0] = 1.
    if num_collars >= 1:
        angle_fitting = (np.pi - 2. * polar_colatitude) / num_collars
        boundaries = polar_colatitude + angle_fitting * np.arange(
            num_collars + 1)
        ideal_collar_areas = area_of_collar(
            dim, boundaries[:-1], boundaries[1:])
        ideal_regions[1:-1] = ideal_collar_areas / area_of_ideal_region(
            dim, num_regions)
    ideal_regions[-1] = 1.
    return ideal_regions


def round_ideal_region_list(
    ideal_regions: np.ndarray,
    verbose: bool = False) -> List[int]:
    """
    Rounds the ideal number of regions of each collar to integers.

    The rounding error of each collar is carried over to the next one.
    If round-off leaves a whole region unassigned at the end, it is given
    to the largest collar, so that the total is always the rounded total
    of the ideal list.

    Args:
        ideal_regions: ideal number of regions of each collar
            (num_collars + 2) array
        verbose: prints a message when the total had to be fixed
            (bool)

    Returns:
        regions: number of regions of each collar
            (num_collars + 2) list of ints
    """
    regions, _ = round_with_carry(ideal_regions)
    missing_regions = round_half_away_from_zero(
        np.sum(ideal_regions)) - sum(regions)
    if missing_regions != 0:
        if verbose:
            print("[round_ideal_region_list]: moving",
                missing_regions, "region(s) to the largest collar.")
        if len(regions) > 2:
            largest = 1 + int(np.argmax(regions[1:-1]))
        else:
            largest = int(np.argmax(regions))
        regions[largest] += missing_regions
    return regions
