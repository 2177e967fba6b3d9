"""
Pytest configuration and shared fixtures for randarray tests.
"""

import pytest
import numpy as np

import randarray.random as ra_random
from randarray.core.rng import NumpyEngine, create_engine


@pytest.fixture(autouse=True)
def isolated_default_engine():
    """Every test starts and ends with a fresh default engine."""
    ra_random.reset_default_engine()
    yield
    ra_random.reset_default_engine()


@pytest.fixture
def engine():
    """Provide seeded PCG64 engine."""
    return create_engine("pcg64", 42)


@pytest.fixture
def make_engine():
    """Factory for engines with the same seed, for reference streams."""
    def _make(name: str = "pcg64", seed: int = 42):
        return create_engine(name, seed)
    return _make


class CountingEngine(NumpyEngine):
    """NumpyEngine that counts raw() calls."""
    
    def __init__(self, bit_generator):
        super().__init__(bit_generator)
        self.raw_calls = 0
    
    def raw(self) -> int:
        self.raw_calls += 1
        return super().raw()


@pytest.fixture
def counting_engine():
    """Provide seeded engine that counts raw steps."""
    return CountingEngine(np.random.PCG64(42))
