"""
randarray.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise ValidationError on failure.
"""

import numbers
from typing import Sequence, Tuple

import numpy as np

from .exceptions import ValidationError


def _is_int(value) -> bool:
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(value, bool)


def validate_shape(shape: Sequence[int], name: str = "shape") -> Tuple[int, ...]:
    """Validate an array shape and return it as a tuple of ints.
    
    An empty shape is a 0-d array with a single element.
    
    Raises:
        ValidationError: If shape is not a sequence of positive ints.
    """
    if _is_int(shape):
        shape = (shape,)
    try:
        extents = tuple(shape)
    except TypeError:
        raise ValidationError(f"{name} must be a sequence of ints, got {shape!r}")
    
    for k, extent in enumerate(extents):
        if not _is_int(extent) or extent <= 0:
            raise ValidationError(
                f"{name} dim {k} must be a positive int, got {extent!r}"
            )
    return tuple(int(e) for e in extents)


def validate_positive(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is strictly positive."""
    if not value > 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def validate_bounds(
    lower: float,
    upper: float,
    name: str = "bounds"
) -> None:
    """Validate half-open interval [lower, upper) is non-empty."""
    if not lower < upper:
        raise ValidationError(
            f"{name} must satisfy lower < upper, got [{lower}, {upper})"
        )


def validate_seed(seed: int) -> None:
    """Validate seed is a non-negative integer."""
    if not _is_int(seed) or seed < 0:
        raise ValidationError(f"seed must be non-negative int, got {seed!r}")


def validate_non_negative_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is a non-negative integer."""
    if not _is_int(value) or value < 0:
        raise ValidationError(f"{name} must be non-negative int, got {value!r}")
