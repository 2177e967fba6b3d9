"""
randarray.lazy.array

Lazy, shape-carrying array built from a per-element callable.

Design: Nothing is stored. Every element access calls func(*index).
Elements may be requested in any order and any number of times.
"""

import copy
import itertools
import numbers
import operator
from typing import Any, Callable, Iterator, Optional, Sequence

import numpy as np
import torch

from randarray.core.exceptions import ValidationError
from randarray.core.types import Index, Shape, row_major_strides, total_elements
from randarray.core.validation import validate_shape


class GeneratorArray:
    """Indexable array expression backed by a per-element callable.
    
    Attributes:
        func: Callable taking one int per dimension, returning one value.
        shape: Tuple of positive extents.
        dtype: numpy dtype used on materialization, or None to infer.
    """
    
    # Let arithmetic with numpy scalars fall through to the reflected operators
    __array_ufunc__ = None
    
    def __init__(self, func: Callable[..., Any], shape: Sequence[int], dtype=None):
        self._func = func
        self._shape = validate_shape(shape)
        self._strides = row_major_strides(self._shape)
        self._dtype = None if dtype is None else np.dtype(dtype)
    
    @property
    def func(self) -> Callable[..., Any]:
        return self._func
    
    @property
    def shape(self) -> Shape:
        return self._shape
    
    @property
    def strides(self) -> Shape:
        """Row-major strides in elements (not bytes)."""
        return self._strides
    
    @property
    def ndim(self) -> int:
        return len(self._shape)
    
    @property
    def size(self) -> int:
        return total_elements(self._shape)
    
    @property
    def dtype(self) -> Optional[np.dtype]:
        return self._dtype
    
    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of unsized object")
        return self._shape[0]
    
    def _normalize(self, key) -> Index:
        if not isinstance(key, tuple):
            key = (key,)
        if len(key) != self.ndim:
            raise IndexError(
                f"expected {self.ndim} indices for shape {self._shape}, got {len(key)}"
            )
        index = []
        for k, (i, extent) in enumerate(zip(key, self._shape)):
            if not isinstance(i, (numbers.Integral, np.integer)) or isinstance(i, bool):
                raise IndexError(f"only integer indices are supported, got {i!r}")
            i = int(i)
            if i < 0:
                i += extent
            if not 0 <= i < extent:
                raise IndexError(
                    f"index {key[k]} is out of bounds for axis {k} with size {extent}"
                )
            index.append(i)
        return tuple(index)
    
    def __getitem__(self, key):
        return self._func(*self._normalize(key))
    
    def element(self, index: Sequence[int]):
        """Value at a multi-index given as a sequence."""
        return self._func(*self._normalize(tuple(index)))
    
    def indices(self) -> Iterator[Index]:
        """All multi-indices in row-major order."""
        return itertools.product(*(range(extent) for extent in self._shape))
    
    @property
    def flat(self) -> Iterator[Any]:
        """Element values in row-major order."""
        return (self._func(*index) for index in self.indices())
    
    def __iter__(self) -> Iterator[Any]:
        # Flat iteration; unlike numpy, sub-arrays are never produced
        return self.flat
    
    def to_numpy(self) -> np.ndarray:
        """Materialize every element in row-major order."""
        values = list(self.flat)
        return np.array(values, dtype=self._dtype).reshape(self._shape)
    
    def __array__(self, dtype=None, copy=None):
        out = self.to_numpy()
        if dtype is not None:
            out = out.astype(dtype)
        return out
    
    def to_tensor(self) -> torch.Tensor:
        """Materialize as a CPU torch tensor."""
        return torch.from_numpy(self.to_numpy())
    
    def _binary(self, other, op: Callable[[Any, Any], Any], reflected: bool = False) -> "GeneratorArray":
        left = copy.copy(self)
        if isinstance(other, GeneratorArray):
            if other.shape != self._shape:
                raise ValidationError(
                    f"shapes {self._shape} and {other.shape} are not compatible"
                )
            right = copy.copy(other)
            get_right = right.func
        elif isinstance(other, (numbers.Number, np.generic)):
            get_right = lambda *index: other
        else:
            return NotImplemented
        
        get_left = left.func
        
        if reflected:
            def func(*index):
                return op(get_right(*index), get_left(*index))
        else:
            def func(*index):
                return op(get_left(*index), get_right(*index))
        
        return GeneratorArray(func, self._shape)
    
    def __add__(self, other):
        return self._binary(other, operator.add)
    
    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)
    
    def __sub__(self, other):
        return self._binary(other, operator.sub)
    
    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)
    
    def __mul__(self, other):
        return self._binary(other, operator.mul)
    
    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)
    
    def __truediv__(self, other):
        return self._binary(other, operator.truediv)
    
    def __rtruediv__(self, other):
        return self._binary(other, operator.truediv, reflected=True)
    
    def __neg__(self) -> "GeneratorArray":
        operand = copy.copy(self)
        get = operand.func
        return GeneratorArray(lambda *index: -get(*index), self._shape, self._dtype)
    
    def __copy__(self) -> "GeneratorArray":
        return GeneratorArray(copy.copy(self._func), self._shape, self._dtype)
    
    def __repr__(self) -> str:
        return f"GeneratorArray(shape={self._shape}, dtype={self._dtype})"


def make_generator(func: Callable[..., Any], shape: Sequence[int], dtype=None) -> GeneratorArray:
    """Build a lazy array whose element at `index` is `func(*index)`."""
    return GeneratorArray(func, shape, dtype)
