"""
randarray.draws.factory

Bind a SequentialDrawCache to a lazy array.
"""

import logging
from typing import Sequence

from randarray.core.rng import Engine
from randarray.core.types import total_elements
from randarray.core.validation import validate_shape
from randarray.distributions.base import Distribution
from randarray.lazy.array import GeneratorArray, make_generator
from .cache import SequentialDrawCache

logger = logging.getLogger(__name__)


def make_random_generator(
    distribution: Distribution,
    engine: Engine,
    shape: Sequence[int],
) -> GeneratorArray:
    """Create a lazy random array of `shape` drawing from `engine`.
    
    The array reads from a copy of the engine taken now. As a side
    effect, `engine` itself is advanced by product(shape) raw steps, so
    the next array built from the same engine starts on fresh draws.
    
    Args:
        distribution: Sampling transform; copied, never mutated.
        engine: Stream to draw from; advanced in place.
        shape: Positive extents.
    
    Returns:
        GeneratorArray whose element func is a SequentialDrawCache.
    """
    shape = validate_shape(shape)
    cache = SequentialDrawCache(engine.copy(), distribution.copy(), shape)
    array = make_generator(cache, shape, dtype=distribution.dtype)
    
    n_discard = total_elements(shape)
    engine.discard(n_discard)
    logger.debug("Advanced %r by %d raw steps for shape %s", engine, n_discard, shape)
    
    return array
