"""
Models for the custom resource invocation.

Exports: JobStatus, JobRequest, JobHandle, CompletionReport, CustomResourceEvent, ...
"""

from .build import FAILURE_STATUSES, TERMINAL_STATUSES, JobHandle, JobRequest, JobStatus
from .completion_report import CallbackTarget, CompletionReport, CorrelationIds, ResponseStatus
from .custom_resource_event import CustomResourceEvent, CustomResourceRequestType
from .invocation_outcome import InvocationOutcome

__all__ = [
    "JobStatus",
    "JobRequest",
    "JobHandle",
    "TERMINAL_STATUSES",
    "FAILURE_STATUSES",
    "ResponseStatus",
    "CorrelationIds",
    "CallbackTarget",
    "CompletionReport",
    "CustomResourceEvent",
    "CustomResourceRequestType",
    "InvocationOutcome",
]
