"""Recursive zonal equal-area partition of the sphere."""
from numbers import Integral
from typing import NamedTuple, Sequence, Tuple

import numpy as np

from eqsphere.area import area_of_ideal_region, colatitude_of_cap
from eqsphere.collars import \
    polar_colatitude, \
    ideal_collar_angle, \
    number_of_collars, \
    ideal_region_list, \
    round_ideal_region_list
from eqsphere.dimension import Dimension, as_dimension


partition_parameters = {
    "min_polar_colatitude": 0.,
    "verbose": False,
}


def check_num_regions(num_regions: int) -> int:
    """Raises a ValueError if num_regions is not an integer >= 1."""
    if isinstance(num_regions, bool) or \
        not isinstance(num_regions, Integral):
        raise ValueError("num_regions should be an integer.")
    if num_regions < 1:
        raise ValueError("num_regions should be at least 1.")
    return int(num_regions)


def cap_colatitudes(
    dim,
    num_regions: int,
    polar_colatitude: float,
    regions: Sequence[int]) -> np.ndarray:
    """
    Returns the colatitude of the bottom of each collar, such that the
    area of each collar is its number of regions times the ideal area.

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        num_regions: number of regions of the partition (N)
            (int)
        polar_colatitude: colatitude of the north polar cap
            (float)
        regions: number of regions of each collar, polar caps included
            (num_collars + 2) sequence of ints

    Returns:
        colatitudes: colatitude of the bottom of each collar
            (num_collars + 2) array
    """
    colatitudes = np.zeros(len(regions))
    colatitudes[0] = polar_colatitude
    num_collars = len(regions) - 2
    if num_collars >= 1:
        # number of regions above the bottom of each collar
        subtotals = 1 + np.cumsum(regions[1:-1])
        colatitudes[1:-1] = colatitude_of_cap(
            dim, subtotals * area_of_ideal_region(dim, num_regions))
    colatitudes[-1] = np.pi
    return colatitudes


def generate_caps(
    dim,
    num_regions: int,
    min_polar_colatitude: float = 0.,
    verbose: bool = False) -> Tuple[np.ndarray, np.ndarray]:
    """
    Partitions the sphere S^dim into num_regions regions of equal area.

    Args:
        dim: dimension of the sphere, 1 or 2
            (Dimension or int)
        num_regions: number of regions (N)
            (int)
        min_polar_colatitude: minimum colatitude of the polar cap,
            in [0, pi]. Recorded only, the boundaries do not depend on it.
            (float)
        verbose: prints a message if rounding had to be fixed
            (bool)

    Returns:
        colatitudes: colatitude of the bottom of each collar
            (num_collars + 2) array, or (N) array if dim = 1
        regions: number of regions of each collar
            (num_collars + 2) array, or (N) array if dim = 1
    """
    dim = as_dimension(dim)
    num_regions = check_num_regions(num_regions)
    if not 0. <= min_polar_colatitude <= np.pi:
        raise ValueError("min_polar_colatitude should be in [0, pi].")

    if dim == Dimension.CIRCLE:
        # N arcs of equal length around the circle
        colatitudes = 2. * np.pi * np.arange(
            1, num_regions + 1) / num_regions
        regions = np.ones(num_regions, dtype=int)
        return colatitudes, regions
    if num_regions == 1:
        return np.array([np.pi]), np.ones(1, dtype=int)

    polar = polar_colatitude(dim, num_regions)
    angle = ideal_collar_angle(dim, num_regions)
    num_collars = number_of_collars(num_regions, polar, angle)
    ideal_regions = ideal_region_list(
        dim, num_regions, polar, num_collars)
    regions = round_ideal_region_list(ideal_regions, verbose)
    colatitudes = cap_colatitudes(dim, num_regions, polar, regions)
    return colatitudes, np.array(regions, dtype=int)


class Collar(NamedTuple):
    """Band of the sphere between two colatitudes."""
    index: int
    top_colatitude: float
    bottom_colatitude: float
    num_regions: int


class Partition:
    """
    Zonal equal-area partition of the sphere S^dim into
    num_regions regions, arranged in collars from the north
    pole (colatitude 0) to the south pole (colatitude pi).

    For dim = 1, each region is an arc of the circle and the
    "colatitudes" are the arc angles of the end of each arc,
    going from 0 to 2*pi.
    """
    def __init__(
        self,
        dim,
        num_regions: int,
        colatitudes: np.ndarray,
        regions: np.ndarray,
        min_polar_colatitude: float = 0.):
        """
        Initializes the class.

        Args:
            dim: dimension of the sphere
                (Dimension or int)
            num_regions: number of regions (N)
                (int)
            colatitudes: colatitude of the bottom of each collar
                (num_collars + 2) array
            regions: number of regions of each collar
                (num_collars + 2) array
            min_polar_colatitude: minimum colatitude of the polar cap
                (float)
        """
        self._dim = as_dimension(dim)
        self._num_regions = check_num_regions(num_regions)
        self._min_polar_colatitude = float(min_polar_colatitude)
        self._colatitudes = np.array(colatitudes, dtype=float)
        self._regions = np.array(regions, dtype=int)
        self._colatitudes.flags.writeable = False
        self._regions.flags.writeable = False

        assert len(self._colatitudes) == len(self._regions)
        assert np.all(np.diff(self._colatitudes) > 0)
        assert np.all(self._regions >= 1)
        assert np.sum(self._regions) == self._num_regions

    @property
    def dim(self) -> Dimension:
        """Returns the dimension of the sphere."""
        return self._dim

    @property
    def num_regions(self) -> int:
        """Returns the number of regions (N)."""
        return self._num_regions

    @property
    def min_polar_colatitude(self) -> float:
        """Returns the requested minimum colatitude of the polar cap."""
        return self._min_polar_colatitude

    @property
    def colatitudes(self) -> np.ndarray:
        """Returns the colatitude of the bottom of each collar."""
        return self._colatitudes

    @property
    def regions(self) -> np.ndarray:
        """Returns the number of regions of each collar."""
        return self._regions

    @property
    def num_collars(self) -> int:
        """Returns the number of collars between the polar caps."""
        if self.dim == Dimension.CIRCLE or self.num_regions == 1:
            return 0
        return len(self.regions) - 2

    @property
    def collars(self) -> Tuple[Collar, ...]:
        """Returns the collars, polar caps included, from north to south."""
        tops = np.concatenate([[0.], self.colatitudes[:-1]])
        return tuple(
            Collar(i, float(top), float(bottom), int(regions))
            for i, (top, bottom, regions) in enumerate(
                zip(tops, self.colatitudes, self.regions)))

    def __repr__(self) -> str:
        return ("Partition(dim=" + str(int(self.dim)) +
            ", num_regions=" + str(self.num_regions) +
            ", num_collars=" + str(self.num_collars) + ")")


def partition_sphere(
    dim,
    num_regions: int,
    min_polar_colatitude: float = None,
    verbose: bool = None) -> Partition:
    """
    Partitions the sphere S^dim into num_regions regions of equal area.

    Defaults for min_polar_colatitude and verbose are taken from
    partition_parameters.

    Args:
        dim: dimension of the sphere, 1 or 2
            (Dimension or int)
        num_regions: number of regions (N)
            (int)
        min_polar_colatitude: minimum colatitude of the polar cap
            (float)
        verbose: prints the parameters of the partition
            (bool)

    Returns:
        partition: the partition
            (Partition) class
    """
    if min_polar_colatitude is None:
        min_polar_colatitude = partition_parameters["min_polar_colatitude"]
    if verbose is None:
        verbose = partition_parameters["verbose"]
    colatitudes, regions = generate_caps(
        dim, num_regions, min_polar_colatitude, verbose)
    partition = Partition(
        dim, num_regions, colatitudes, regions, min_polar_colatitude)
    if verbose:
        print("Initializing partition with")
        print("> dim         =", int(partition.dim))
        print("> num_regions =", partition.num_regions)
        print("> num_collars =", partition.num_collars)
    return partition
