"""
randarray.distributions.uniform

Uniform real and uniform integer distributions.

UniformReal consumes one raw engine step per sample. UniformInt consumes
one step per sample unless its range is wider than a raw value.
"""

import numbers
from typing import Optional

import numpy as np

from randarray.core.exceptions import ValidationError
from randarray.core.rng import Engine
from randarray.core.validation import validate_bounds
from .base import Distribution, unit_interval


class UniformReal(Distribution):
    """Uniform floats on [lower, upper)."""
    
    def __init__(self, lower: float = 0.0, upper: float = 1.0, dtype=np.float64):
        super().__init__(dtype)
        if self.dtype.kind != "f":
            raise ValidationError(f"UniformReal needs a float dtype, got {self.dtype}")
        validate_bounds(lower, upper)
        self.lower = lower
        self.upper = upper
    
    def sample(self, engine: Engine):
        u = unit_interval(engine.raw(), engine.raw_bits)
        value = self.dtype.type(self.lower + (self.upper - self.lower) * u)
        # Rounding (especially to float32) can land exactly on upper
        if value >= self.upper:
            value = np.nextafter(self.dtype.type(self.upper), self.dtype.type(self.lower))
        return value
    
    def __repr__(self) -> str:
        return f"UniformReal(lower={self.lower}, upper={self.upper}, dtype={self.dtype})"


class UniformInt(Distribution):
    """Uniform integers on [lower, upper), upper exclusive.
    
    Raw values are combined into a wide word and reduced by multiply-shift.
    A range that fits in one raw value costs one raw step per sample; wider
    ranges cost ceil(bits(span - 1) / engine.raw_bits) raw steps, so every
    bit of the result is random even on 32-bit engines.
    
    Args:
        lower: Inclusive lower bound.
        upper: Exclusive upper bound. Defaults to the max of `dtype`.
        dtype: Integer dtype of the samples.
    """
    
    def __init__(self, lower: int = 0, upper: Optional[int] = None, dtype=np.int64):
        super().__init__(dtype)
        if self.dtype.kind not in "iu":
            raise ValidationError(f"UniformInt needs an integer dtype, got {self.dtype}")
        info = np.iinfo(self.dtype)
        if upper is None:
            upper = int(info.max)
        for name, bound in (("lower", lower), ("upper", upper)):
            if not isinstance(bound, (numbers.Integral, np.integer)):
                raise ValidationError(f"{name} must be int, got {bound!r}")
        validate_bounds(lower, upper)
        if lower < info.min or upper - 1 > info.max:
            raise ValidationError(
                f"[{lower}, {upper}) does not fit in {self.dtype}"
            )
        self.lower = int(lower)
        self.upper = int(upper)
    
    @property
    def span(self) -> int:
        return self.upper - self.lower
    
    def words_per_sample(self, engine: Engine) -> int:
        """Raw steps one sample consumes on `engine`."""
        bits = (self.span - 1).bit_length()
        return max(1, -(-bits // engine.raw_bits))
    
    def sample(self, engine: Engine):
        words = self.words_per_sample(engine)
        wide = engine.raw()
        for _ in range(words - 1):
            wide = (wide << engine.raw_bits) | engine.raw()
        offset = (wide * self.span) >> (words * engine.raw_bits)
        return self.dtype.type(self.lower + offset)
    
    def __repr__(self) -> str:
        return f"UniformInt(lower={self.lower}, upper={self.upper}, dtype={self.dtype})"
