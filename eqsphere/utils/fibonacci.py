"""
Construct a Fibonacci lattice, see
https://stackoverflow.com/questions/9600801/evenly-distributing-n-points-on-a-sphere
"""
from typing import Tuple
import numpy as np
import jax.numpy as jnp


def fibonacci_lattice_angles(
    sample_size: int) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Returns the colatitudes and azimuths of the points of a Fibonacci
    lattice on the unit sphere in R^3.
    """
    indices = jnp.arange(
        0, sample_size, dtype=float) + 0.5
    colatitudes = jnp.arccos(1 - 2*indices / sample_size)
    azimuths = jnp.mod(jnp.pi * (1 + 5**0.5) * indices, 2*jnp.pi)
    return colatitudes, azimuths


def lattice_points(
    sphere_radius: float,
    colatitudes: jnp.ndarray,
    azimuths: jnp.ndarray) -> jnp.ndarray:
    # y-up, same convention as eqsphere.vertices
    x = sphere_radius * jnp.sin(azimuths) * jnp.sin(colatitudes)
    y = sphere_radius * jnp.cos(colatitudes)
    z = sphere_radius * jnp.cos(azimuths) * jnp.sin(colatitudes)
    pts = jnp.stack((x, y, z)).T
    return pts


def fibonacci_lattice_3d(
    sphere_radius: float,
    sample_size: int) -> jnp.array:
    """
    Returns points on a Fibonacci lattice on a sphere in R^3.

    Args:
        sphere_radius: radius of the sphere
            (float)
        sample_size: number of points on the lattice
            (int)

    Returns:
        points: points on the lattice
            (sample_size, 3) array
    """
    colatitudes, azimuths = fibonacci_lattice_angles(sample_size)
    return lattice_points(sphere_radius, colatitudes, azimuths)


def fibonacci_lattice_3d_in_box(
    sample_size: int,
    box) -> jnp.array:
    """
    Returns the points of a Fibonacci lattice on the unit sphere in R^3
    that are inside a latitude/longitude box.

    The size of the lattice is scaled by the inverse of the fraction of
    longitudes covered by the box, so that about sample_size points are
    kept if the box covers all latitudes.

    Args:
        sample_size: number of points, before restricting to the box
            (int)
        box: latitude/longitude bounds
            (LatitudeLongitudeBox) class

    Returns:
        points: points on the lattice inside the box
            (M, 3) array
    """
    if box.longitude_fraction <= 0:
        raise ValueError("box should cover a positive range of longitudes.")
    lattice_size = int(sample_size / box.longitude_fraction)
    colatitudes, azimuths = fibonacci_lattice_angles(lattice_size)
    is_in = np.asarray(box.contains_angles(colatitudes, azimuths))
    return lattice_points(1., colatitudes[is_in], azimuths[is_in])


def delta_covering_distance(points: jnp.ndarray) -> float:
    """
    Returns the maximum over the points of the distance to their nearest
    neighbor.

    Points that are approximately evenly spread on the sphere are all at
    about the same distance of their nearest neighbor, so this is a
    conservative approximation of the value of delta such that the points
    form an internal delta-covering of the sphere.

    Args:
        points: points on the sphere
            (sample_size, num_variables) array

    Returns:
        delta: maximal distance to the nearest neighbor
            (float)
    """
    sample_size = points.shape[0]
    # squared distances from the Gram matrix, (sample_size, sample_size)
    squared_norms = jnp.sum(points**2, axis=1)
    squared_dists = squared_norms[:, jnp.newaxis] + \
        squared_norms[jnp.newaxis, :] - 2 * points @ points.T
    squared_dists = jnp.maximum(squared_dists, 0.)
    squared_dists = jnp.where(
        jnp.eye(sample_size, dtype=bool), jnp.inf, squared_dists)
    dists_min = jnp.sqrt(jnp.min(squared_dists, 1))
    delta = float(jnp.max(dists_min))
    return delta


def fibonacci_lattice_3d_with_delta_covering_distance(
    sphere_radius: float,
    sample_size: int) -> Tuple[jnp.array, float]:
    """
    Returns points on a Fibonacci lattice on a sphere in R^3 and covering radius

    Args:
        sphere_radius: radius of the sphere
            (float)
        sample_size: number (M) of points on the lattice
            (int)

    Returns:
        points: points on the lattice
            (sample_size, 3) array
        delta: value of delta such that points form an internal delta-covering
            of the sphere.
            (float)
    """
    pts = fibonacci_lattice_3d(sphere_radius, sample_size)
    delta = delta_covering_distance(pts)
    return pts, delta
