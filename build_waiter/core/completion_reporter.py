"""
Completion reporter.

Builds the custom resource response and PUTs it to the response URL once.
Delivery is best-effort: a failed PUT is logged and absorbed, because
raising here would leave CloudFormation waiting for a response that never
comes and would hide the real outcome of the build.

Dependencies: boundary.http
System role: Final stage of the custom resource invocation
"""

import logging
from typing import Any

from build_waiter.boundary.http import CallbackClient
from build_waiter.core.custom_resource.models import (
    CallbackTarget,
    CompletionReport,
    CorrelationIds,
    ResponseStatus,
)
from build_waiter.core.exceptions import DeliveryError
from build_waiter.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class CompletionReporter:
    """Deliver exactly one completion report per invocation."""

    def __init__(self, callback: CallbackClient, log_stream_name: str) -> None:
        """
        Initialize reporter.

        Args:
            callback: Client for the response URL
            log_stream_name: Lambda log stream; default physical resource id
                and pointer for humans reading the stack events
        """
        self._callback = callback
        self._log_stream_name = log_stream_name

    def build_report(
        self,
        outcome: ResponseStatus,
        message: str,
        correlation_ids: CorrelationIds,
        physical_resource_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> CompletionReport:
        """Build the report without sending it."""
        reason = message
        if self._log_stream_name:
            reason = f"{message}. See CloudWatch Log Stream: {self._log_stream_name}"
        return CompletionReport(
            outcome=outcome,
            message=reason,
            correlation_ids=correlation_ids,
            physical_resource_id=physical_resource_id or self._log_stream_name,
            data=data or {},
        )

    def report(
        self,
        target: CallbackTarget,
        outcome: ResponseStatus,
        message: str,
        correlation_ids: CorrelationIds,
        physical_resource_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> CompletionReport:
        """
        Build the report and send it once. Never raises on delivery failure.

        Args:
            target: Response URL for this invocation
            outcome: SUCCESS or FAILED
            message: Human-readable reason
            correlation_ids: StackId, RequestId, LogicalResourceId from the event
            physical_resource_id: Defaults to the log stream name
            data: Outcome-specific Data map

        Returns:
            CompletionReport: The report that was sent (or attempted)
        """
        report = self.build_report(outcome, message, correlation_ids, physical_resource_id, data)
        body = report.to_json()

        logger.info(
            "report - Sending %s response to CloudFormation",
            outcome.value,
            extra={
                "stack_id": correlation_ids.stack_id,
                "request_id": correlation_ids.request_id,
                "logical_resource_id": correlation_ids.logical_resource_id,
            },
        )

        try:
            status_code = self._callback.put(target.url, body)
            logger.info("report - CloudFormation returned status: %s", status_code)
        except DeliveryError as e:
            log_exception_with_context(
                logger,
                "report - send_response failed",
                e,
                request_id=correlation_ids.request_id,
                status_code=e.status_code,
            )

        return report
