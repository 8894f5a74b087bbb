"""
Lambda handler for the image-copy custom resource.

CloudFormation invokes this once per Create/Update/Delete of the custom
resource. The handler starts the CodeBuild project that copies the crawler
image into the private ECR repository, waits for the build to finish, and
PUTs the result to the request's ResponseURL.

Environment variables:
- PROJECT_NAME: CodeBuild project to start (required)
- MY_AWS_REGION: AWS region for CodeBuild (falls back to AWS_REGION)
- POLL_INTERVAL_SECONDS: Wait between status queries (default 5)
- BUILD_ON_DELETE: Build on stack deletion too (default true; false skips it)
- LOG_LEVEL: Logging level (default INFO)

Dependencies: harness, completion_reporter, boundary.http
System role: Lambda entry point for the custom resource
"""

import logging
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from build_waiter.boundary.http import CallbackClient
from build_waiter.configs import BaseSettings
from build_waiter.core.completion_reporter import CompletionReporter
from build_waiter.core.custom_resource.harness import CustomResourceHarness
from build_waiter.core.custom_resource.lambda_utils.context import log_stream_name
from build_waiter.core.custom_resource.lambda_utils.event_parser import parse_custom_resource_event
from build_waiter.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for CloudFormation custom resource requests.

    Args:
        event: Custom resource request (RequestType, ResponseURL, StackId, ...)
        context: Lambda context object

    Returns:
        Dict: {"Status": "SUCCESS"}

    Raises:
        EventParseError: Event is not a custom resource request; nothing is
            reported since there is no ResponseURL to report to
        Exception: Build failures, re-raised after the FAILED report is sent
    """
    configure_logging(BaseSettings().log_level)

    request = parse_custom_resource_event(event)
    stream = log_stream_name(context)

    logger.info(
        "handler - Received custom resource request",
        extra={
            "request_type": request.RequestType.value,
            "request_id": request.RequestId,
            "log_stream_name": stream,
        },
    )

    reporter = CompletionReporter(CallbackClient(), log_stream_name=stream)
    harness = CustomResourceHarness(reporter, context=context)
    return harness.run(request)
