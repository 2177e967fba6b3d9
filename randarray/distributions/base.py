"""
randarray.distributions.base

Abstract Distribution class and raw-value helpers.

Design: A distribution is a small mutable transform over an engine.
Any entropy it buffers between calls must be cleared by reset().
"""

import copy
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from randarray.core.rng import Engine

_DOUBLE_MANTISSA = 53


def unit_interval(raw: int, bits: int) -> float:
    """Map one raw value of the given width to a float in [0, 1)."""
    if bits > _DOUBLE_MANTISSA:
        return (raw >> (bits - _DOUBLE_MANTISSA)) * 2.0 ** -_DOUBLE_MANTISSA
    return raw * 2.0 ** -bits


class Distribution(ABC):
    """Abstract base for sampling transforms.
    
    Attributes:
        dtype: numpy dtype of produced values.
    """
    
    def __init__(self, dtype: Any):
        self._dtype = np.dtype(dtype)
    
    @property
    def dtype(self) -> np.dtype:
        return self._dtype
    
    @abstractmethod
    def sample(self, engine: Engine) -> Any:
        """Draw one value, consuming raw steps from engine."""
        pass
    
    def __call__(self, engine: Engine) -> Any:
        return self.sample(engine)
    
    def reset(self) -> None:
        """Discard any buffered state. Stateless distributions do nothing."""
        pass
    
    def copy(self) -> "Distribution":
        """Independent distribution with the same parameters and buffer."""
        return copy.deepcopy(self)
