"""
Custom resource event parsing utilities for Lambda.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from build_waiter.core.custom_resource.models import CustomResourceEvent
from build_waiter.core.exceptions import EventParseError

logger = logging.getLogger(__name__)


def parse_custom_resource_event(event: Dict[str, Any]) -> CustomResourceEvent:
    """
    Parse and validate a CloudFormation custom resource request.

    CloudFormation invokes the function with this structure:
    {
        "RequestType": "Create",
        "ResponseURL": "https://...pre-signed S3 URL...",
        "StackId": "arn:aws:cloudformation:...",
        "RequestId": "...",
        "LogicalResourceId": "WaitForImageCustomResource",
        "ResourceType": "Custom::TriggerBuild",
        "ResourceProperties": {"ServiceToken": "..."}
    }

    Raises:
        EventParseError: Not a dict, or required keys missing. Without a
            ResponseURL there is nobody to report to.
    """
    if not isinstance(event, dict):
        raise EventParseError(f"Expected event object, got {type(event).__name__}")

    try:
        parsed = CustomResourceEvent.model_validate(event)
    except ValidationError as e:
        fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
        logger.error("parse_custom_resource_event - ValidationError: %s", ", ".join(fields))
        raise EventParseError(
            f"Invalid custom resource event: {', '.join(fields)}",
            details={"fields": fields},
        ) from e

    logger.info(
        "parse_custom_resource_event - Parsed %s request",
        parsed.RequestType.value,
        extra={
            "request_id": parsed.RequestId,
            "logical_resource_id": parsed.LogicalResourceId,
        },
    )
    return parsed
