"""
Tests for randarray.core.rng

Verify engine reproducibility, snapshots and wrapping.
"""

import pickle

import pytest
import torch
import numpy as np
from randarray.core.rng import (
    StateSnapshot,
    NumpyEngine,
    TorchEngine,
    ENGINE_NAMES,
    create_engine,
    as_engine,
)
from randarray.core.exceptions import ConfigError, EngineError, ValidationError


class TestStateSnapshot:
    """Snapshot buffer can be read repeatedly."""
    
    def test_load_rewinds_buffer(self):
        snap = StateSnapshot("test")
        snap.dump(lambda buf: pickle.dump({"a": 1}, buf))
        
        assert snap.load(pickle.load) == {"a": 1}
        assert snap.load(pickle.load) == {"a": 1}
    
    def test_dump_overwrites(self):
        snap = StateSnapshot("test")
        snap.dump(lambda buf: pickle.dump(list(range(100)), buf))
        snap.dump(lambda buf: pickle.dump("short", buf))
        
        assert snap.load(pickle.load) == "short"
    
    def test_nbytes(self):
        snap = StateSnapshot("test")
        assert snap.nbytes == 0
        snap.dump(lambda buf: buf.write(b"abcd"))
        assert snap.nbytes == 4


class TestNumpyEngine:
    """NumpyEngine reproducibility and state handling."""
    
    def test_same_seed_same_raws(self):
        e1 = create_engine("pcg64", 1)
        e2 = create_engine("pcg64", 1)
        assert [e1.raw() for _ in range(10)] == [e2.raw() for _ in range(10)]
    
    def test_different_seed_different_raws(self):
        e1 = create_engine("pcg64", 1)
        e2 = create_engine("pcg64", 2)
        assert [e1.raw() for _ in range(10)] != [e2.raw() for _ in range(10)]
    
    @pytest.mark.parametrize("name", ["mt19937", "pcg64", "philox", "sfc64"])
    def test_discard_matches_raw_calls(self, name):
        e1 = create_engine(name, 7)
        e2 = create_engine(name, 7)
        
        for _ in range(13):
            e1.raw()
        e2.discard(13)
        
        assert e1.raw() == e2.raw()
    
    def test_discard_zero_is_noop(self, make_engine):
        e1, e2 = make_engine(), make_engine()
        e1.discard(0)
        assert e1.raw() == e2.raw()
    
    def test_discard_negative_raises(self, engine):
        with pytest.raises(ValidationError):
            engine.discard(-1)
    
    def test_raw_bits(self):
        assert create_engine("mt19937", 0).raw_bits == 32
        assert create_engine("pcg64", 0).raw_bits == 64
    
    def test_raw_in_range(self):
        e = create_engine("mt19937", 3)
        assert all(0 <= e.raw() < 2 ** 32 for _ in range(100))
    
    def test_snapshot_restore(self, engine):
        snap = engine.snapshot()
        first = [engine.raw() for _ in range(5)]
        
        engine.restore(snap)
        assert [engine.raw() for _ in range(5)] == first
        
        # Snapshot is reusable
        engine.restore(snap)
        assert [engine.raw() for _ in range(5)] == first
    
    def test_restore_wrong_kind_raises(self):
        snap = create_engine("mt19937", 0).snapshot()
        with pytest.raises(EngineError, match="MT19937"):
            create_engine("pcg64", 0).restore(snap)
    
    def test_copy_is_independent(self, engine):
        clone = engine.copy()
        assert clone.bit_generator is not engine.bit_generator
        
        a = [clone.raw() for _ in range(3)]
        b = [engine.raw() for _ in range(3)]
        assert a == b
        
        clone.discard(10)
        assert clone.raw() != engine.raw()
    
    def test_seed_resets_stream(self, make_engine):
        e = make_engine(seed=9)
        first = [e.raw() for _ in range(4)]
        e.discard(100)
        
        e.seed(9)
        assert [e.raw() for _ in range(4)] == first
    
    def test_seed_keeps_bit_generator(self, engine):
        bg = engine.bit_generator
        engine.seed(3)
        assert engine.bit_generator is bg


class TestTorchEngine:
    """TorchEngine reproducibility and state handling."""
    
    def test_same_seed_same_raws(self):
        e1 = create_engine("torch", 5)
        e2 = create_engine("torch", 5)
        assert [e1.raw() for _ in range(10)] == [e2.raw() for _ in range(10)]
    
    def test_raw_in_range(self):
        e = create_engine("torch", 5)
        assert e.raw_bits == 63
        assert all(0 <= e.raw() < 2 ** 63 for _ in range(100))
    
    def test_snapshot_restore(self):
        e = create_engine("torch", 11)
        snap = e.snapshot()
        first = [e.raw() for _ in range(5)]
        
        e.restore(snap)
        assert [e.raw() for _ in range(5)] == first
        e.restore(snap)
        assert [e.raw() for _ in range(5)] == first
    
    def test_copy_is_independent(self):
        e = create_engine("torch", 11)
        clone = e.copy()
        
        assert clone.raw() == e.raw()
        clone.discard(4)
        assert clone.generator is not e.generator
    
    def test_seed(self):
        e = create_engine("torch", 1)
        first = e.raw()
        e.seed(1)
        assert e.raw() == first


class TestCreateEngine:
    """Engines are built by name."""
    
    def test_all_names(self):
        for name in ENGINE_NAMES:
            assert create_engine(name, 0) is not None
    
    def test_numpy_kind(self):
        assert create_engine("mt19937", 0).kind == "numpy.MT19937"
    
    def test_torch_engine(self):
        assert isinstance(create_engine("torch", 0), TorchEngine)
    
    def test_unknown_name_raises(self):
        with pytest.raises(ConfigError, match="Unknown engine"):
            create_engine("lcg", 0)
    
    def test_invalid_seed_raises(self):
        with pytest.raises(ValidationError):
            create_engine("pcg64", -1)


class TestAsEngine:
    """Raw generators are wrapped, sharing state."""
    
    def test_engine_passthrough(self, engine):
        assert as_engine(engine) is engine
    
    def test_numpy_generator_shares_bit_generator(self):
        g = np.random.default_rng(5)
        e = as_engine(g)
        
        assert isinstance(e, NumpyEngine)
        assert e.bit_generator is g.bit_generator
    
    def test_bit_generator(self):
        bg = np.random.PCG64(5)
        assert as_engine(bg).bit_generator is bg
    
    def test_torch_generator(self):
        g = torch.Generator().manual_seed(0)
        e = as_engine(g)
        assert isinstance(e, TorchEngine)
        assert e.generator is g
    
    def test_unsupported_raises(self):
        with pytest.raises(ValidationError):
            as_engine(42)
