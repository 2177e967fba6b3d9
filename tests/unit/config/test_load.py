"""
Tests for randarray.config.load

Verify config loading/saving.
"""

import pytest
import tempfile
from pathlib import Path
from randarray.config.load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)
from randarray.config.schema import RandomConfig
from randarray.core.exceptions import ConfigError


class TestConfigFromDict:
    """Tests for config_from_dict."""
    
    def test_empty_dict_uses_defaults(self):
        cfg = config_from_dict({})
        assert cfg.engine == "mt19937"
        assert cfg.seed == 5489
    
    def test_flat_override(self):
        cfg = config_from_dict({"engine": "pcg64", "seed": 1})
        assert cfg.engine == "pcg64"
        assert cfg.seed == 1
    
    def test_nested_override(self):
        cfg = config_from_dict({"random": {"seed": 123}})
        assert cfg.seed == 123
        assert cfg.engine == "mt19937"  # Default preserved
    
    def test_unknown_key_raises(self):
        with pytest.raises(ConfigError, match="Invalid config"):
            config_from_dict({"bogus": 1})
    
    def test_invalid_value_raises(self):
        with pytest.raises(ConfigError):
            config_from_dict({"engine": "nope"})


class TestConfigToDict:
    """Tests for config_to_dict."""
    
    def test_roundtrip(self):
        cfg1 = RandomConfig(engine="torch", seed=999)
        cfg2 = config_from_dict(config_to_dict(cfg1))
        assert cfg2 == cfg1


class TestLoadSaveConfig:
    """Tests for load_config and save_config."""
    
    def test_save_and_load(self):
        cfg1 = RandomConfig(engine="philox", seed=7, float_dtype="float32")
        
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.yaml"
            save_config(cfg1, path)
            cfg2 = load_config(path)
        
        assert cfg2 == cfg1
    
    def test_load_nonexistent_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/path/config.yaml")
    
    def test_load_invalid_yaml_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.yaml"
            path.write_text("random: [unclosed\n")
            with pytest.raises(ConfigError, match="Invalid YAML"):
                load_config(path)
    
    def test_load_empty_file_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.yaml"
            path.write_text("")
            assert load_config(path) == RandomConfig()
    
    def test_load_non_mapping_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "list.yaml"
            path.write_text("- 1\n- 2\n")
            with pytest.raises(ConfigError, match="mapping"):
                load_config(path)
