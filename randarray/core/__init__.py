"""
randarray.core

Core infrastructure for randarray.

Exports:
- Exception classes
- Random engines and state snapshots
- Shape arithmetic
- Validation utilities
"""

from .exceptions import (
    RandArrayError,
    ValidationError,
    ConfigError,
    EngineError,
)

from .rng import (
    StateSnapshot,
    Engine,
    NumpyEngine,
    TorchEngine,
    ENGINE_NAMES,
    create_engine,
    as_engine,
)

from .types import (
    Shape,
    Index,
    row_major_strides,
    total_elements,
    linear_position,
    unravel_position,
)

from .validation import (
    validate_shape,
    validate_positive,
    validate_bounds,
    validate_seed,
    validate_non_negative_int,
)

__all__ = [
    # Exceptions
    "RandArrayError",
    "ValidationError",
    "ConfigError",
    "EngineError",
    # Engines
    "StateSnapshot",
    "Engine",
    "NumpyEngine",
    "TorchEngine",
    "ENGINE_NAMES",
    "create_engine",
    "as_engine",
    # Types
    "Shape",
    "Index",
    "row_major_strides",
    "total_elements",
    "linear_position",
    "unravel_position",
    # Validation
    "validate_shape",
    "validate_positive",
    "validate_bounds",
    "validate_seed",
    "validate_non_negative_int",
]
