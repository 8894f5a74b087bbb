"""
CloudFormation custom resource event schema.

Validates the request CloudFormation sends to the custom resource Lambda.

Dependencies: pydantic
System role: Data validation for the invocation entry contract
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .completion_report import CallbackTarget, CorrelationIds


class CustomResourceRequestType(str, Enum):
    """Lifecycle operation requested by CloudFormation."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class CustomResourceEvent(BaseModel):
    """Custom resource request event."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "RequestType": "Create",
                "ResponseURL": "https://cloudformation-custom-resource-response.s3.amazonaws.com/...",
                "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/crawler/guid",
                "RequestId": "unique-request-id",
                "ResourceType": "Custom::TriggerBuild",
                "LogicalResourceId": "WaitForImageCustomResource",
                "ResourceProperties": {"ServiceToken": "arn:aws:lambda:..."},
            }
        },
    )

    RequestType: CustomResourceRequestType = CustomResourceRequestType.CREATE
    ResponseURL: str = Field(..., min_length=1)
    StackId: str
    RequestId: str
    LogicalResourceId: str
    PhysicalResourceId: str | None = None
    ResourceType: str | None = None
    ResourceProperties: dict[str, Any] = Field(default_factory=dict)

    @property
    def callback_target(self) -> CallbackTarget:
        return CallbackTarget(url=self.ResponseURL)

    @property
    def correlation_ids(self) -> CorrelationIds:
        return CorrelationIds(
            stack_id=self.StackId,
            request_id=self.RequestId,
            logical_resource_id=self.LogicalResourceId,
        )

    @property
    def is_delete(self) -> bool:
        return self.RequestType is CustomResourceRequestType.DELETE
