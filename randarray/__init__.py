"""
randarray

Lazily evaluated, order-independent random arrays.

Usage:
    import randarray as ra
    
    ra.set_seed(42)
    a = ra.rand((2, 3))
    a[1, 2]          # same value whatever was read before
    a.to_numpy()     # full row-major materialization
"""

from .core import (
    RandArrayError,
    ValidationError,
    ConfigError,
    EngineError,
    Engine,
    NumpyEngine,
    TorchEngine,
    create_engine,
)

from .config import RandomConfig, load_config

from .distributions import UniformReal, UniformInt, Normal

from .draws import SequentialDrawCache, make_random_generator

from .lazy import GeneratorArray, make_generator

from .random import (
    get_default_engine,
    set_seed,
    configure,
    rand,
    randint,
    randn,
)

__all__ = [
    # Exceptions
    "RandArrayError",
    "ValidationError",
    "ConfigError",
    "EngineError",
    # Engines
    "Engine",
    "NumpyEngine",
    "TorchEngine",
    "create_engine",
    # Config
    "RandomConfig",
    "load_config",
    # Distributions
    "UniformReal",
    "UniformInt",
    "Normal",
    # Arrays
    "SequentialDrawCache",
    "make_random_generator",
    "GeneratorArray",
    "make_generator",
    # Entry points
    "get_default_engine",
    "set_seed",
    "configure",
    "rand",
    "randint",
    "randn",
]
