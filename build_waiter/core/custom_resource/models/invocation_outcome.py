"""
Structured result of the trigger-and-wait region.

The harness never reports from inside an except block; it converts every
stage result into an InvocationOutcome and finalizes on that once.

Dependencies: dataclasses (stdlib)
System role: Success/failure carrier between stages and the reporter
"""

from dataclasses import dataclass
from typing import Any

from .build import JobHandle, JobStatus
from .completion_report import ResponseStatus

SUCCESS_MESSAGE = "Build succeeded"


@dataclass(frozen=True)
class InvocationOutcome:
    """
    Outcome of one invocation.

    Attributes:
        status: Terminal build status, None if the build never reached one
        handle: Started build, None if triggering failed or was skipped
        error: Exception to re-raise after reporting, None on success
        note: Success message override (e.g. skipped delete)
    """
    status: JobStatus | None = None
    handle: JobHandle | None = None
    error: Exception | None = None
    note: str | None = None

    @classmethod
    def success(cls, handle: JobHandle) -> "InvocationOutcome":
        return cls(status=JobStatus.SUCCEEDED, handle=handle)

    @classmethod
    def failure(
        cls,
        error: Exception,
        handle: JobHandle | None = None,
        status: JobStatus | None = None,
    ) -> "InvocationOutcome":
        return cls(status=status, handle=handle, error=error)

    @classmethod
    def skipped(cls, note: str) -> "InvocationOutcome":
        return cls(note=note)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def response_status(self) -> ResponseStatus:
        return ResponseStatus.SUCCESS if self.succeeded else ResponseStatus.FAILED

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error) or type(self.error).__name__
        return self.note or SUCCESS_MESSAGE

    @property
    def data(self) -> dict[str, Any]:
        """Outcome-specific Data map for the response body."""
        if self.succeeded:
            return {"Message": self.message}
        return {"Error": self.message}
