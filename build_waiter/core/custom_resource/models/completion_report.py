"""
Completion report model.

Serializes to the CloudFormation custom resource response body:
https://docs.aws.amazon.com/AWSCloudFormation/latest/UserGuide/crpg-ref-responses.html

Dependencies: pydantic
System role: Wire contract for the callback PUT
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseStatus(str, Enum):
    """Outcome values understood by CloudFormation."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class CorrelationIds(BaseModel):
    """Identifiers CloudFormation uses to match the response to its request."""

    model_config = ConfigDict(frozen=True)

    stack_id: str
    request_id: str
    logical_resource_id: str


class CallbackTarget(BaseModel):
    """Pre-signed S3 URL supplied per invocation as ResponseURL."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)


class CompletionReport(BaseModel):
    """Final outcome of one invocation, sent exactly once."""

    model_config = ConfigDict(frozen=True)

    outcome: ResponseStatus
    message: str
    correlation_ids: CorrelationIds
    physical_resource_id: str
    data: dict[str, Any] = Field(default_factory=dict)

    def to_response_body(self) -> dict[str, Any]:
        """Build the JSON object expected by CloudFormation."""
        return {
            "Status": self.outcome.value,
            "Reason": self.message,
            "PhysicalResourceId": self.physical_resource_id,
            "StackId": self.correlation_ids.stack_id,
            "RequestId": self.correlation_ids.request_id,
            "LogicalResourceId": self.correlation_ids.logical_resource_id,
            "Data": self.data,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_response_body())
