"""
randarray.distributions

Sampling transforms over random engines.

This module provides:
- Abstract Distribution base class
- UniformReal, UniformInt and Normal
"""

from .base import Distribution, unit_interval
from .uniform import UniformReal, UniformInt
from .normal import Normal

__all__ = [
    "Distribution",
    "unit_interval",
    "UniformReal",
    "UniformInt",
    "Normal",
]
