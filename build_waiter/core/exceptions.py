"""
Exception hierarchy for the build waiter.

Every error except DeliveryError is reported to CloudFormation as FAILED and
then re-raised to the Lambda runtime. DeliveryError never leaves the
completion reporter.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the package
"""

from typing import Any


class BuildWaiterError(Exception):
    """Base exception for all build waiter errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message; details are kept for structured logs only."""
        return self.message


class ConfigurationError(BuildWaiterError):
    """Raised when required settings are missing or invalid."""


class EventParseError(BuildWaiterError):
    """Raised when the Lambda event is not a valid custom resource request."""


class TriggerError(BuildWaiterError):
    """Raised when the job-control service rejects the start request."""

    def __init__(
        self,
        message: str,
        project_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize trigger error.

        Args:
            message: Error message (includes the service error text)
            project_name: CodeBuild project that failed to start
            details: Additional context
        """
        details = details or {}
        if project_name:
            details["project_name"] = project_name
        self.project_name = project_name
        super().__init__(message, details)


class BuildLookupError(BuildWaiterError, LookupError):
    """Raised when a status query returns no record for a known build id."""

    def __init__(self, build_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["build_id"] = build_id
        self.build_id = build_id
        super().__init__(f"No build info returned for build ID: {build_id}", details)


class BuildFailedError(BuildWaiterError):
    """Raised when a build reaches a terminal status other than SUCCEEDED."""

    def __init__(
        self,
        build_id: str,
        status: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize build failure.

        Args:
            build_id: Build that failed
            status: Terminal status name (FAILED, FAULT, STOPPED, TIMED_OUT)
            details: Additional context
        """
        details = details or {}
        details.update({"build_id": build_id, "status": status})
        self.build_id = build_id
        self.status = status
        super().__init__(f"Build did not succeed: {status}", details)


class DeliveryError(BuildWaiterError):
    """Raised when the callback PUT fails. Always absorbed by the reporter."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)
