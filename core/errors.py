"""
Errors Module
Exception types raised by the shorthand lint engine.
"""

class ShorthandError(Exception):
    """Base class for all shorthand lint errors."""

class ShorthandInvariantError(ShorthandError):
    """A class token was consumed by more than one shorthand group."""

    def __init__(self, message: str, token_positions=None):
        super().__init__(message)
        self.token_positions = list(token_positions or [])

class ConfigError(ShorthandError):
    """Invalid lint configuration."""
