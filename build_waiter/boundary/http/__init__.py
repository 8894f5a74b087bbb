"""
HTTP boundary modules.

Exports: CallbackClient
"""

from .callback_client import CallbackClient

__all__ = ["CallbackClient"]
