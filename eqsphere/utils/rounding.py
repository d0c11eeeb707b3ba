"""Rounding with a carried error (error diffusion)."""
from typing import List, Sequence, Tuple

import numpy as np


def round_half_away_from_zero(value: float) -> int:
    """Rounds to the nearest integer, ties are rounded away from zero."""
    return int(np.copysign(np.floor(np.abs(value) + 0.5), value))


def round_with_carry(values: Sequence[float]) -> Tuple[List[int], float]:
    """
    Rounds a sequence of values to integers, carrying the rounding error
    of each entry over to the next one.

    The carried error (discrepancy) stays in [-0.5, 0.5] after every step,
    so the sum of the rounded values differs from the rounding of the sum
    of the values by at most floating-point round-off.

    Args:
        values: values to round
            (num_values) sequence of floats

    Returns:
        rounded_values: rounded values
            (num_values) list of ints
        discrepancy: final discrepancy
            sum(values) - sum(rounded_values)
            (float)
    """
    rounded_values = []
    discrepancy = 0.
    for value in values:
        rounded_value = round_half_away_from_zero(value + discrepancy)
        discrepancy += value - rounded_value
        rounded_values.append(rounded_value)
    return rounded_values, float(discrepancy)
