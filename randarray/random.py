"""
randarray.random

Process-wide default engine and the rand / randint / randn entry points.

The default engine is shared process state: it is created lazily from the
active RandomConfig, reseeding is last-writer-wins, and every entry point
called without an explicit engine advances it. Pass `engine=` to keep a
private stream.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .config.schema import RandomConfig
from .core.rng import Engine, EngineLike, as_engine, create_engine
from .core.validation import validate_seed
from .distributions import Normal, UniformInt, UniformReal
from .draws.factory import make_random_generator
from .lazy.array import GeneratorArray

logger = logging.getLogger(__name__)

INT64_MAX = int(np.iinfo(np.int64).max)

_config = RandomConfig()
_default_engine: Optional[Engine] = None


def get_config() -> RandomConfig:
    """Config the default engine is (or will be) built from."""
    return _config


def get_default_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_engine(_config.engine, _config.seed)
        logger.info("Created default %s engine (seed=%d)", _config.engine, _config.seed)
    return _default_engine


def set_seed(seed: int) -> None:
    """Reseed the default engine in place."""
    validate_seed(seed)
    get_default_engine().seed(seed)
    logger.info("Reseeded default engine (seed=%d)", seed)


def configure(config: RandomConfig) -> Engine:
    """Replace the default engine with a fresh one built from `config`."""
    global _config, _default_engine
    _config = config
    _default_engine = create_engine(config.engine, config.seed)
    logger.info("Configured default %s engine (seed=%d)", config.engine, config.seed)
    return _default_engine


def reset_default_engine() -> None:
    """Drop the default engine and restore the default config.
    
    The next call to get_default_engine() starts from a fresh stream.
    """
    global _config, _default_engine
    _config = RandomConfig()
    _default_engine = None


def _resolve(engine: Optional[EngineLike]) -> Engine:
    return get_default_engine() if engine is None else as_engine(engine)


def rand(
    shape: Sequence[int],
    lower: float = 0.0,
    upper: float = 1.0,
    engine: Optional[EngineLike] = None,
    dtype=None,
) -> GeneratorArray:
    """Lazy array of uniform floats in [lower, upper).
    
    Args:
        shape: Shape of the result.
        lower: Lower bound (inclusive).
        upper: Upper bound (exclusive).
        engine: Stream to use; defaults to the process-wide engine.
        dtype: Float dtype; defaults to the configured float_dtype.
    
    Note:
        Advances `engine` by product(shape) raw steps.
    """
    dtype = _config.numpy_float_dtype if dtype is None else dtype
    return make_random_generator(UniformReal(lower, upper, dtype), _resolve(engine), shape)


def randint(
    shape: Sequence[int],
    lower: int = 0,
    upper: Optional[int] = None,
    engine: Optional[EngineLike] = None,
    dtype=np.int64,
) -> GeneratorArray:
    """Lazy array of uniform integers in [lower, upper), upper exclusive.
    
    `upper` defaults to the largest value of `dtype`.
    
    Note:
        Advances `engine` by product(shape) raw steps. A range wider than
        one raw value (more than 2**32 values on MT19937) consumes several
        raw steps per sample, so consecutive arrays drawn from the same
        engine can then overlap.
    """
    if upper is None:
        upper = int(np.iinfo(dtype).max)
    return make_random_generator(UniformInt(lower, upper, dtype), _resolve(engine), shape)


def randn(
    shape: Sequence[int],
    mean: float = 0.0,
    std_dev: float = 1.0,
    engine: Optional[EngineLike] = None,
    dtype=None,
) -> GeneratorArray:
    """Lazy array of normal values with given mean and standard deviation.
    
    Note:
        Advances `engine` by product(shape) raw steps. A normal sample
        consumes two raw steps every other draw, so arrays of odd size can
        overlap the next array by one raw step.
    """
    dtype = _config.numpy_float_dtype if dtype is None else dtype
    return make_random_generator(Normal(mean, std_dev, dtype), _resolve(engine), shape)
