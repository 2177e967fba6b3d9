"""
randarray.core.rng

Random engines with countable, snapshotable state.

Design Principles:
- An engine is a stream of raw steps; distributions consume raw steps
- Full state can be serialized to a StateSnapshot and restored from it
- Engines are NOT thread-safe; one writer at a time
"""

import io
import pickle
from abc import ABC, abstractmethod
from typing import IO, Any, Callable, Dict, Type, Union

import numpy as np
import torch

from .exceptions import ConfigError, EngineError, ValidationError
from .validation import validate_non_negative_int, validate_seed


class StateSnapshot:
    """Serialized engine state in a reusable, seekable byte buffer.
    
    A snapshot is shared by reference between copies of whatever holds it;
    the buffer is never duplicated. Every read leaves the buffer positioned
    at its start so the same state can be restored again later.
    
    Attributes:
        kind: Identifies the engine type the state belongs to.
    """
    
    def __init__(self, kind: str):
        self.kind = kind
        self._buffer = io.BytesIO()
    
    def dump(self, save: Callable[[IO[bytes]], None]) -> None:
        """Overwrite the buffer with whatever `save` writes into it."""
        self._buffer.seek(0)
        self._buffer.truncate()
        save(self._buffer)
        self._buffer.seek(0)
    
    def load(self, read: Callable[[IO[bytes]], Any]) -> Any:
        """Read state back with `read`, then rewind the buffer."""
        try:
            return read(self._buffer)
        finally:
            self._buffer.seek(0)
    
    @property
    def nbytes(self) -> int:
        return len(self._buffer.getbuffer())
    
    def __repr__(self) -> str:
        return f"StateSnapshot(kind={self.kind!r}, nbytes={self.nbytes})"


class Engine(ABC):
    """Abstract seedable source of raw pseudorandom integers.
    
    One call to raw() is one raw step. discard(n) must leave the engine in
    the same state as n calls to raw().
    """
    
    #: Width in bits of values returned by raw().
    raw_bits: int = 64
    
    @property
    @abstractmethod
    def kind(self) -> str:
        """Engine type tag stored in snapshots."""
        pass
    
    @abstractmethod
    def raw(self) -> int:
        """Return one raw value in [0, 2**raw_bits)."""
        pass
    
    @abstractmethod
    def discard(self, n: int) -> None:
        """Advance by n raw steps."""
        pass
    
    @abstractmethod
    def seed(self, seed: int) -> None:
        """Reseed in place."""
        pass
    
    @abstractmethod
    def copy(self) -> "Engine":
        """Independent engine at the same state."""
        pass
    
    @abstractmethod
    def _save_state(self, buffer: IO[bytes]) -> None:
        pass
    
    @abstractmethod
    def _load_state(self, buffer: IO[bytes]) -> None:
        pass
    
    def snapshot(self) -> StateSnapshot:
        """Serialize the current state into a new snapshot."""
        snap = StateSnapshot(self.kind)
        snap.dump(self._save_state)
        return snap
    
    def restore(self, snapshot: StateSnapshot) -> None:
        """Restore the state held by `snapshot`.
        
        Raises:
            EngineError: If the snapshot was taken from another engine kind.
        """
        if snapshot.kind != self.kind:
            raise EngineError(
                f"Cannot restore {snapshot.kind!r} snapshot into {self.kind!r} engine"
            )
        snapshot.load(self._load_state)
    
    def __copy__(self) -> "Engine":
        return self.copy()


class NumpyEngine(Engine):
    """Engine backed by a numpy BitGenerator.
    
    A raw step is one `random_raw()` output: 32 bits for MT19937,
    64 bits for PCG64, Philox and SFC64.
    
    The bit generator is shared, not copied: advancing this engine
    advances the caller's bit generator too.
    """
    
    def __init__(self, bit_generator: np.random.BitGenerator):
        self._bit_generator = bit_generator
        self.raw_bits = 32 if isinstance(bit_generator, np.random.MT19937) else 64
    
    @property
    def kind(self) -> str:
        return f"numpy.{type(self._bit_generator).__name__}"
    
    @property
    def bit_generator(self) -> np.random.BitGenerator:
        return self._bit_generator
    
    def raw(self) -> int:
        return int(self._bit_generator.random_raw())
    
    def discard(self, n: int) -> None:
        validate_non_negative_int(n, "n")
        if n > 0:
            self._bit_generator.random_raw(n, output=False)
    
    def seed(self, seed: int) -> None:
        validate_seed(seed)
        self._bit_generator.state = type(self._bit_generator)(seed).state
    
    def copy(self) -> "NumpyEngine":
        clone = type(self._bit_generator)()
        clone.state = self._bit_generator.state
        return NumpyEngine(clone)
    
    def _save_state(self, buffer: IO[bytes]) -> None:
        pickle.dump(self._bit_generator.state, buffer)
    
    def _load_state(self, buffer: IO[bytes]) -> None:
        self._bit_generator.state = pickle.load(buffer)
    
    def __repr__(self) -> str:
        return f"NumpyEngine({type(self._bit_generator).__name__})"


class TorchEngine(Engine):
    """Engine backed by a CPU torch.Generator.
    
    A raw step is one int64 `random_()` draw, uniform on [0, 2**63).
    """
    
    raw_bits = 63
    
    def __init__(self, generator: torch.Generator):
        self._generator = generator
    
    @property
    def kind(self) -> str:
        return "torch.Generator"
    
    @property
    def generator(self) -> torch.Generator:
        return self._generator
    
    def raw(self) -> int:
        return int(torch.empty((), dtype=torch.int64).random_(generator=self._generator))
    
    def discard(self, n: int) -> None:
        validate_non_negative_int(n, "n")
        if n > 0:
            torch.empty(n, dtype=torch.int64).random_(generator=self._generator)
    
    def seed(self, seed: int) -> None:
        validate_seed(seed)
        self._generator.manual_seed(seed)
    
    def copy(self) -> "TorchEngine":
        clone = torch.Generator()
        clone.set_state(self._generator.get_state())
        return TorchEngine(clone)
    
    def _save_state(self, buffer: IO[bytes]) -> None:
        torch.save(self._generator.get_state(), buffer)
    
    def _load_state(self, buffer: IO[bytes]) -> None:
        self._generator.set_state(torch.load(buffer, weights_only=True))
    
    def __repr__(self) -> str:
        return "TorchEngine()"


NUMPY_BIT_GENERATORS: Dict[str, Type[np.random.BitGenerator]] = {
    "mt19937": np.random.MT19937,
    "pcg64": np.random.PCG64,
    "philox": np.random.Philox,
    "sfc64": np.random.SFC64,
}

ENGINE_NAMES = tuple(NUMPY_BIT_GENERATORS) + ("torch",)


def create_engine(name: str, seed: int) -> Engine:
    """Build a freshly seeded engine by name.
    
    Args:
        name: One of ENGINE_NAMES.
        seed: Non-negative integer seed.
    
    Raises:
        ConfigError: If name is unknown.
    """
    validate_seed(seed)
    if name == "torch":
        return TorchEngine(torch.Generator().manual_seed(seed))
    if name not in NUMPY_BIT_GENERATORS:
        raise ConfigError(f"Unknown engine {name!r}, expected one of {ENGINE_NAMES}")
    return NumpyEngine(NUMPY_BIT_GENERATORS[name](seed))


EngineLike = Union[Engine, np.random.BitGenerator, np.random.Generator, torch.Generator]


def as_engine(obj: EngineLike) -> Engine:
    """Wrap a numpy or torch generator as an Engine, sharing its state."""
    if isinstance(obj, Engine):
        return obj
    if isinstance(obj, np.random.Generator):
        return NumpyEngine(obj.bit_generator)
    if isinstance(obj, np.random.BitGenerator):
        return NumpyEngine(obj)
    if isinstance(obj, torch.Generator):
        return TorchEngine(obj)
    raise ValidationError(f"Cannot use {type(obj).__name__} as a random engine")
