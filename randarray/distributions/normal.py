"""
randarray.distributions.normal

Normal distribution via the Box-Muller transform.

Each transform turns two raw steps into two variates; the second one is
kept for the next call. That cached variate is the state reset() clears.
"""

import math
from typing import Optional

import numpy as np

from randarray.core.exceptions import ValidationError
from randarray.core.rng import Engine
from randarray.core.validation import validate_positive
from .base import Distribution, unit_interval


class Normal(Distribution):
    """Normal values with given mean and standard deviation."""
    
    def __init__(self, mean: float = 0.0, std_dev: float = 1.0, dtype=np.float64):
        super().__init__(dtype)
        if self.dtype.kind != "f":
            raise ValidationError(f"Normal needs a float dtype, got {self.dtype}")
        validate_positive(std_dev, "std_dev")
        self.mean = mean
        self.std_dev = std_dev
        self._saved: Optional[float] = None
    
    @property
    def has_saved(self) -> bool:
        """True if the next sample will come from the cached variate."""
        return self._saved is not None
    
    def sample(self, engine: Engine):
        if self._saved is not None:
            z = self._saved
            self._saved = None
        else:
            # 1 - u is in (0, 1], safe for log
            u1 = 1.0 - unit_interval(engine.raw(), engine.raw_bits)
            u2 = unit_interval(engine.raw(), engine.raw_bits)
            radius = math.sqrt(-2.0 * math.log(u1))
            theta = 2.0 * math.pi * u2
            z = radius * math.cos(theta)
            self._saved = radius * math.sin(theta)
        return self.dtype.type(self.mean + self.std_dev * z)
    
    def reset(self) -> None:
        self._saved = None
    
    def __repr__(self) -> str:
        return f"Normal(mean={self.mean}, std_dev={self.std_dev}, dtype={self.dtype})"
