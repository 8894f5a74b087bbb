"""
Configuration management module.

Provides type-safe configuration using Pydantic Settings.
"""

from build_waiter.configs.base import BaseSettings
from build_waiter.configs.build_waiter import BuildWaiterSettings
from build_waiter.configs.settings import get_settings

__all__ = ["BaseSettings", "BuildWaiterSettings", "get_settings"]
