"""
randarray.core.exceptions

All custom exceptions for randarray.

Design: Fail fast at construction; never inside element access.
"""


class RandArrayError(Exception):
    """Base exception for all randarray errors."""
    pass


class ValidationError(RandArrayError):
    """Input validation failed.
    
    Raised when shapes, bounds or seeds fail boundary checks.
    """
    pass


class ConfigError(RandArrayError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or name an unknown engine.
    """
    pass


class EngineError(RandArrayError):
    """Engine state error.
    
    Raised when a state snapshot cannot be restored into an engine.
    """
    pass
