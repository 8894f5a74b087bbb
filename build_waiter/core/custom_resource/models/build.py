"""
Build job models.

JobRequest and JobHandle identify the one CodeBuild job owned by an
invocation; JobStatus classifies the states reported by BatchGetBuilds.

Dependencies: pydantic
System role: Data contract between trigger, poller and harness
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class JobStatus(str, Enum):
    """CodeBuild build status values."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    FAULT = "FAULT"
    STOPPED = "STOPPED"
    TIMED_OUT = "TIMED_OUT"

    @property
    def is_terminal(self) -> bool:
        """True once no further state change can occur."""
        return self in TERMINAL_STATUSES

    @property
    def is_success(self) -> bool:
        return self is JobStatus.SUCCEEDED


TERMINAL_STATUSES: frozenset[JobStatus] = frozenset({
    JobStatus.SUCCEEDED,
    JobStatus.FAILED,
    JobStatus.FAULT,
    JobStatus.STOPPED,
    JobStatus.TIMED_OUT,
})

FAILURE_STATUSES: frozenset[JobStatus] = TERMINAL_STATUSES - {JobStatus.SUCCEEDED}


class JobRequest(BaseModel):
    """Request to start one build, built from settings once per invocation."""

    model_config = ConfigDict(frozen=True)

    job_definition_id: str = Field(..., min_length=1, description="CodeBuild project name")


class JobHandle(BaseModel):
    """Identifier of a started build; the only key used for status queries."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="CodeBuild build id (project:uuid)")
