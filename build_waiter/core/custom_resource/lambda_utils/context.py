"""
Lambda context accessors.

The harness only needs two things from the context object, and both are
optional when invoked outside Lambda (tests, local runner).
"""

from typing import Any


def log_stream_name(context: Any) -> str:
    """Return the CloudWatch log stream of this invocation, or ""."""
    return getattr(context, "log_stream_name", None) or ""


def remaining_time_ms(context: Any) -> int | None:
    """Return the remaining execution budget in milliseconds, if known."""
    get_remaining = getattr(context, "get_remaining_time_in_millis", None)
    return get_remaining() if callable(get_remaining) else None
