"""Dimension of the partitioned sphere."""
from enum import IntEnum
from numbers import Integral


class Dimension(IntEnum):
    """
    Dimension of the sphere S^dim that is partitioned.

    CIRCLE is the 1-sphere (arc length is used as area) and
    SPHERE is the usual 2-sphere embedded in R^3.
    """
    CIRCLE = 1
    SPHERE = 2


def as_dimension(dim) -> Dimension:
    """
    Parses a dimension given by a caller.

    Args:
        dim: dimension of the sphere, 1 or 2
            (int or Dimension)

    Returns:
        dimension: parsed dimension
            (Dimension)
    """
    if isinstance(dim, Dimension):
        return dim
    if isinstance(dim, bool) or not isinstance(dim, Integral):
        raise ValueError("dim should be an integer in {1, 2}.")
    try:
        return Dimension(int(dim))
    except ValueError:
        raise ValueError(
            "dim should be in {1, 2}, got " + str(dim) + ".") from None
