"""
randarray.lazy

Minimal lazy-array expressions driven by per-element callables.
"""

from .array import GeneratorArray, make_generator

__all__ = [
    "GeneratorArray",
    "make_generator",
]
