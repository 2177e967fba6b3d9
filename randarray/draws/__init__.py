"""
randarray.draws

Order-independent random arrays over a single stream.
"""

from .cache import SequentialDrawCache
from .factory import make_random_generator

__all__ = [
    "SequentialDrawCache",
    "make_random_generator",
]
