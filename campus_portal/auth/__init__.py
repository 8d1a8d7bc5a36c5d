"""Session bookkeeping package."""

from .session import CurrentUser, SessionHelper

__all__ = ['CurrentUser', 'SessionHelper']
