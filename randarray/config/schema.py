"""
randarray.config.schema

Configuration schema using dataclasses.

Design: All config fields have explicit types and defaults.
"""

from dataclasses import dataclass

import numpy as np

from randarray.core.rng import ENGINE_NAMES

# Classic default seed of MT19937
DEFAULT_SEED = 5489

FLOAT_DTYPES = ("float16", "float32", "float64")


@dataclass
class RandomConfig:
    """Settings for the process-wide default engine.
    
    Attributes:
        engine: Engine name, one of ENGINE_NAMES.
        seed: Initial seed for the default engine.
        float_dtype: Default dtype for rand() and randn().
    """
    engine: str = "mt19937"
    seed: int = DEFAULT_SEED
    float_dtype: str = "float64"
    
    def __post_init__(self):
        if self.engine not in ENGINE_NAMES:
            raise ValueError(f"Invalid engine: {self.engine}")
        if not isinstance(self.seed, int) or self.seed < 0:
            raise ValueError("seed must be a non-negative int")
        if self.float_dtype not in FLOAT_DTYPES:
            raise ValueError(f"Invalid float_dtype: {self.float_dtype}")
    
    @property
    def numpy_float_dtype(self) -> np.dtype:
        return np.dtype(self.float_dtype)
