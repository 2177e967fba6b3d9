"""
randarray.draws.cache

Sequential-draw cache: serve any element of a virtual random array from
one engine + distribution stream.

Design Principles:
- Element at index i is draw number dot(i, strides) of the stream
- Row-major access is O(1) per element; jumps replay the stream
- Backward jumps restore the engine from a snapshot taken at construction
- Nothing is memoized; re-reads are exact because replay is deterministic
"""

import copy
import logging
from typing import Any, Sequence

from randarray.core.rng import Engine, StateSnapshot
from randarray.core.types import Shape, linear_position, row_major_strides, total_elements
from randarray.core.validation import validate_shape
from randarray.distributions.base import Distribution

logger = logging.getLogger(__name__)


class SequentialDrawCache:
    """Per-element accessor over a single random stream.
    
    value_at() behaves like a pure function of the index but mutates the
    engine, the distribution and the cursor to honor it. Copies share the
    initial state snapshot and own everything else.
    
    Not thread-safe: a single instance must only be read from one thread
    at a time.
    
    Usage:
        cache = SequentialDrawCache(engine, UniformReal(), (2, 3))
        cache(0, 0)   # draw 0
        cache(1, 2)   # draw 5
        cache(0, 0)   # draw 0 again, via rewind
    
    Attributes:
        shape: Logical array shape.
        strides: Row-major strides, last one is 1.
        cursor: Position of the last draw served, -1 before the first.
    """
    
    def __init__(self, engine: Engine, distribution: Distribution, shape: Sequence[int]):
        self._shape = validate_shape(shape)
        self._strides = row_major_strides(self._shape)
        self._engine = engine
        self._distribution = distribution
        self._snapshot = engine.snapshot()
        self._cursor = -1
    
    @property
    def shape(self) -> Shape:
        return self._shape
    
    @property
    def strides(self) -> Shape:
        return self._strides
    
    @property
    def size(self) -> int:
        return total_elements(self._shape)
    
    @property
    def engine(self) -> Engine:
        return self._engine
    
    @property
    def distribution(self) -> Distribution:
        return self._distribution
    
    @property
    def snapshot(self) -> StateSnapshot:
        return self._snapshot
    
    @property
    def cursor(self) -> int:
        return self._cursor
    
    @property
    def dtype(self):
        return self._distribution.dtype
    
    def value_at(self, index: Sequence[int]) -> Any:
        """Value of the element at a multi-index.
        
        The index is not bounds-checked; callers must pass one in-range
        int per dimension.
        """
        target = linear_position(index, self._strides)
        next_seq = self._cursor + 1
        self._cursor = next_seq
        
        if target == next_seq:
            return self._distribution.sample(self._engine)
        
        if target < self._cursor:
            self._rewind()
        
        if target > self._cursor:
            logger.debug("Replaying %d draws (%d -> %d)", target - self._cursor, self._cursor, target)
        while self._cursor < target:
            self._distribution.sample(self._engine)
            self._cursor += 1
        
        return self._distribution.sample(self._engine)
    
    def __call__(self, *index: int) -> Any:
        return self.value_at(index)
    
    def element(self, index: Sequence[int]) -> Any:
        return self.value_at(index)
    
    def _rewind(self) -> None:
        logger.debug("Rewinding to draw 0 from cursor %d", self._cursor)
        self._engine.restore(self._snapshot)
        self._distribution.reset()
        self._cursor = 0
    
    def __copy__(self) -> "SequentialDrawCache":
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._engine = self._engine.copy()
        clone._distribution = self._distribution.copy()
        return clone
    
    def __deepcopy__(self, memo) -> "SequentialDrawCache":
        # The snapshot stays shared even on deep copies
        return copy.copy(self)
    
    def __repr__(self) -> str:
        return (
            f"SequentialDrawCache(shape={self._shape}, "
            f"distribution={self._distribution!r}, cursor={self._cursor})"
        )
