"""
randarray.config.load

Config loading and saving.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import RandomConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> RandomConfig:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config in {path} must be a mapping")
    
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> RandomConfig:
    """Create RandomConfig from dictionary.
    
    Accepts either a flat mapping or one nested under a "random" key.
    """
    d = d.get("random", d)
    try:
        return RandomConfig(**d)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: RandomConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: RandomConfig) -> Dict[str, Any]:
    """Convert RandomConfig to dictionary."""
    return {
        "random": {
            "engine": config.engine,
            "seed": config.seed,
            "float_dtype": config.float_dtype,
        },
    }
