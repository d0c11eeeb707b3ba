"""
Unit directions representing the regions of a partition.

Directions use the y-up convention, with colatitude theta measured from
the north pole (0, 1, 0) and azimuth phi measured from the z axis:
    d = (sin(theta) sin(phi), cos(theta), sin(theta) cos(phi)).
"""
from typing import Tuple

import numpy as np
import jax.numpy as jnp

from eqsphere.dimension import Dimension
from eqsphere.partition import Partition, partition_sphere


def directions_from_angles(
    colatitudes: jnp.ndarray,
    azimuths: jnp.ndarray) -> jnp.ndarray:
    """
    Returns the unit directions with the given spherical coordinates.

    Args:
        colatitudes: colatitudes, in radians
            (M) array
        azimuths: azimuths, in radians
            (M) array

    Returns:
        directions: unit directions
            (M, 3) array
    """
    x = jnp.sin(colatitudes) * jnp.sin(azimuths)
    y = jnp.cos(colatitudes)
    z = jnp.sin(colatitudes) * jnp.cos(azimuths)
    directions = jnp.stack((x, y, z)).T
    return directions


def collar_vertices(
    top_colatitude: float,
    bottom_colatitude: float,
    num_regions: int) -> jnp.ndarray:
    """
    Returns one direction per region of a collar, at the middle colatitude
    of the collar and evenly spaced in azimuth starting at azimuth 0.

    Args:
        top_colatitude: colatitude of the top of the collar
            (float)
        bottom_colatitude: colatitude of the bottom of the collar
            (float)
        num_regions: number of regions of the collar
            (int)

    Returns:
        vertices: directions of the regions of the collar
            (num_regions, 3) array
    """
    theta = 0.5 * (top_colatitude + bottom_colatitude)
    phis = 2. * jnp.pi * jnp.arange(num_regions) / num_regions
    thetas = theta * jnp.ones(num_regions)
    return directions_from_angles(thetas, phis)


def partition_angles(
    partition: Partition) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Returns the spherical coordinates of the vertex of each region
    of a partition, ordered by region index.

    For a partition of the circle, the vertex of each arc is the middle
    of the arc on the equator of S^2.

    Args:
        partition: the partition
            (Partition) class

    Returns:
        colatitudes: colatitude of the vertex of each region
            (num_regions) array
        azimuths: azimuth of the vertex of each region
            (num_regions) array
    """
    ends = partition.colatitudes
    starts = np.concatenate([[0.], ends[:-1]])
    middles = 0.5 * (starts + ends)
    if partition.dim == Dimension.CIRCLE:
        colatitudes = 0.5 * np.pi * np.ones(partition.num_regions)
        return jnp.asarray(colatitudes), jnp.asarray(middles)

    regions = partition.regions
    # index of each region within its collar
    offsets = np.cumsum(regions) - regions
    indices_in_collars = np.arange(partition.num_regions) - np.repeat(
        offsets, regions)
    colatitudes = np.repeat(middles, regions)
    azimuths = 2. * np.pi * indices_in_collars / np.repeat(regions, regions)
    return jnp.asarray(colatitudes), jnp.asarray(azimuths)


def partition_vertices(
    partition: Partition,
    box=None) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Returns one unit direction per region of a partition.

    Args:
        partition: the partition
            (Partition) class
        box: if given, only the directions inside the box are returned
            (LatitudeLongitudeBox) class

    Returns:
        vertices: unit directions
            (M, 3) array, with M = partition.num_regions if box is None
        region_indices: index of the region of each direction
            (M) array
    """
    colatitudes, azimuths = partition_angles(partition)
    region_indices = jnp.arange(partition.num_regions)
    if box is not None:
        is_in = np.asarray(box.contains_angles(colatitudes, azimuths))
        colatitudes = colatitudes[is_in]
        azimuths = azimuths[is_in]
        region_indices = region_indices[is_in]
    vertices = directions_from_angles(colatitudes, azimuths)
    return vertices, region_indices


def sphere_vertices(
    num_regions: int,
    box=None) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Returns approximately evenly distributed unit directions in R^3,
    one per region of an equal-area partition of S^2 into num_regions
    regions, restricted to box if given.

    Args:
        num_regions: number of regions of the partition
            (int)
        box: latitude/longitude bounds
            (LatitudeLongitudeBox) class

    Returns:
        vertices: unit directions
            (M, 3) array
        region_indices: index of the region of each direction
            (M) array
    """
    min_polar_colatitude = 0.
    if box is not None:
        min_polar_colatitude = float(np.clip(
            np.pi / 2. - np.radians(box.max_latitude), 0., np.pi))
    partition = partition_sphere(
        Dimension.SPHERE, num_regions, min_polar_colatitude)
    return partition_vertices(partition, box)
