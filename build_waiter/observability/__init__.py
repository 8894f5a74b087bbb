"""
Observability helpers.

Exports: configure_logging, log_with_context, log_exception_with_context
"""

from build_waiter.observability.logger import configure_logging
from build_waiter.observability.log_utils import log_exception_with_context, log_with_context

__all__ = [
    "configure_logging",
    "log_with_context",
    "log_exception_with_context",
]
