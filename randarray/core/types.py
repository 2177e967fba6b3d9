"""
randarray.core.types

Shape arithmetic shared by the draw cache and the lazy array.

All helpers assume an already validated shape.
"""

from typing import Sequence, Tuple

Shape = Tuple[int, ...]
Index = Tuple[int, ...]


def row_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """Compute row-major strides, in elements.
    
    The last dimension has stride 1; every other stride is the product
    of the following stride and extent.
    
    Example:
        row_major_strides((2, 3, 4)) == (12, 4, 1)
    """
    strides = [0] * len(shape)
    step = 1
    for k in range(len(shape) - 1, -1, -1):
        strides[k] = step
        step *= shape[k]
    return tuple(strides)


def total_elements(shape: Sequence[int]) -> int:
    """Number of elements in an array of the given shape (1 for 0-d)."""
    n = 1
    for extent in shape:
        n *= extent
    return n


def linear_position(index: Sequence[int], strides: Sequence[int]) -> int:
    """Dot product of a multi-index with strides."""
    return sum(i * s for i, s in zip(index, strides))


def unravel_position(position: int, shape: Sequence[int]) -> Index:
    """Inverse of linear_position for row-major strides."""
    index = [0] * len(shape)
    for k in range(len(shape) - 1, -1, -1):
        position, index[k] = divmod(position, shape[k])
    return tuple(index)
