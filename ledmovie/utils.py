"""
Small helpers shared by the colour model, the movie container and the generator.
"""

import math
from typing import List, Sequence, TypeVar

from .errors import InvalidParameter

T = TypeVar('T')


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Device firmware and the reference tooling round this way; Python's
    built-in round() would send 2.5 to 2.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float = 0, upper: float = 255) -> float:
    """Clamp a channel value into [lower, upper]."""
    return max(lower, min(upper, value))


def reorder_array(items: Sequence[T]) -> List[T]:
    """
    Reorder a strip that is wired from the middle outwards.

    The first half is reversed and the second half kept as is, so index 0 of
    the result is the LED physically in the middle of the string.

    Args:
        items: Sequence with an even number of elements

    Returns:
        New list with the reordered elements

    Raises:
        InvalidParameter: If the sequence length is odd
    """
    if len(items) % 2 != 0:
        raise InvalidParameter("Array length must be even")

    middle_index = len(items) // 2
    first_half = list(items[:middle_index])
    first_half.reverse()
    return first_half + list(items[middle_index:])
