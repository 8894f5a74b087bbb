"""
Unified settings access.

Dependencies: build_waiter.configs.build_waiter
System role: Cached settings factory for the Lambda entry point
"""

from functools import lru_cache

from pydantic import ValidationError

from build_waiter.configs.build_waiter import BuildWaiterSettings
from build_waiter.core.exceptions import ConfigurationError


@lru_cache
def get_settings() -> BuildWaiterSettings:
    """
    Get build waiter settings singleton.

    Environment variables are read once per Lambda container.

    Returns:
        BuildWaiterSettings: Validated settings

    Raises:
        ConfigurationError: Required variable missing or invalid
    """
    try:
        return BuildWaiterSettings()
    except ValidationError as e:
        fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid build waiter configuration: {', '.join(fields)}",
            details={"fields": fields},
        ) from e
