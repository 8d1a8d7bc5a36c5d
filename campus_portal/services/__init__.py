"""External service clients."""

from .pinata import PinataClient, PinataResponse

__all__ = ['PinataClient', 'PinataResponse']
