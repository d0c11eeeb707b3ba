"""
Areas of spherical caps and collars, and the inverse of the cap area.

The sphere S^dim has unit radius. For dim = 1 the "area" of a cap is the
length of the arc it covers, so that the whole circle has area 2*pi. For
dim = 2 the whole sphere has area 4*pi.
"""
import numpy as np

from eqsphere.dimension import Dimension, as_dimension


def area_of_cap(dim, colatitude):
    """
    Returns the area of the cap going from the north pole (colatitude 0)
    down to the given colatitude.

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        colatitude: colatitude of the boundary of the cap, in [0, pi]
            (float or array)

    Returns:
        area: area of the cap
            (float or array)
    """
    dim = as_dimension(dim)
    if dim == Dimension.CIRCLE:
        return 2. * colatitude
    return 4. * np.pi * np.sin(colatitude / 2.)**2


def area_of_collar(dim, top_colatitude, bottom_colatitude):
    """
    Returns the area of the collar between two colatitudes.

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        top_colatitude: colatitude of the top of the collar
            (float or array)
        bottom_colatitude: colatitude of the bottom of the collar,
            should be larger than top_colatitude
            (float or array)

    Returns:
        area: area of the collar
            (float or array)
    """
    if np.any(np.asarray(top_colatitude) > np.asarray(bottom_colatitude)):
        raise ValueError(
            "top_colatitude should be smaller than bottom_colatitude.")
    return (area_of_cap(dim, bottom_colatitude) -
        area_of_cap(dim, top_colatitude))


def area_of_ideal_region(
    dim,
    num_regions: int,
    top_colatitude: float = 0.,
    bottom_colatitude: float = np.pi) -> float:
    """
    Returns the area of one region if the collar between top_colatitude
    and bottom_colatitude (by default the whole sphere) is cut into
    num_regions regions of equal area.
    """
    return area_of_collar(
        dim, top_colatitude, bottom_colatitude) / num_regions


def colatitude_of_cap(dim, area):
    """
    Returns the colatitude of the cap with the given area
    (inverse of area_of_cap).

    Args:
        dim: dimension of the sphere
            (Dimension or int)
        area: area of the cap
            (float or array)

    Returns:
        colatitude: colatitude of the boundary of the cap
            (float or array)
    """
    dim = as_dimension(dim)
    if dim == Dimension.CIRCLE:
        return area / 2.
    # clip round-off so that the area of the whole sphere maps to pi
    sine = np.clip(np.sqrt(area / np.pi) / 2., 0., 1.)
    return 2. * np.arcsin(sine)
