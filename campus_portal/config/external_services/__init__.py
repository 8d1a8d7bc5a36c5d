"""External service configurations."""

from .pinata import PinataConfig

__all__ = ['PinataConfig']
