"""
Custom resource invocation harness.

Composes trigger -> poll -> report for one CloudFormation request:

    START -> TRIGGERED -> POLLING -> {SUCCEEDED_REPORTED, FAILED_REPORTED}

The trigger-and-wait region never raises; it returns an InvocationOutcome.
_finalize() is the only place the reporter is called, so every exit path
(trigger failure, polling exception, failure terminal, success) produces
exactly one report. If Lambda kills the invocation on timeout before
_finalize() runs, no report is sent and CloudFormation falls back to its
own timeout.

Dependencies: configs, core stages, models
System role: Composition layer for the custom resource Lambda
"""

import logging
import time
from enum import Enum
from typing import Any, Callable

from build_waiter.boundary.aws import CodeBuildClient
from build_waiter.configs import BuildWaiterSettings, get_settings
from build_waiter.core.build_trigger import BuildTrigger
from build_waiter.core.completion_reporter import CompletionReporter
from build_waiter.core.custom_resource.models import (
    CustomResourceEvent,
    InvocationOutcome,
    JobRequest,
)
from build_waiter.core.exceptions import BuildFailedError
from build_waiter.core.status_poller import StatusPoller
from build_waiter.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DELETE_NOTE = "Nothing to do on delete"


class InvocationState(str, Enum):
    """Harness progress through one invocation."""

    START = "START"
    TRIGGERED = "TRIGGERED"
    POLLING = "POLLING"
    SUCCEEDED_REPORTED = "SUCCEEDED_REPORTED"
    FAILED_REPORTED = "FAILED_REPORTED"


class CustomResourceHarness:
    """Run one custom resource invocation end to end."""

    def __init__(
        self,
        reporter: CompletionReporter,
        settings_loader: Callable[[], BuildWaiterSettings] = get_settings,
        codebuild: CodeBuildClient | None = None,
        sleep: Callable[[float], None] = time.sleep,
        context: Any | None = None,
    ) -> None:
        """
        Initialize harness.

        Args:
            reporter: Completion reporter bound to this invocation's log stream
            settings_loader: Settings factory, called inside the guarded region
            codebuild: CodeBuild client (built from settings if None)
            sleep: Sleep function handed to the poller
            context: Lambda context for remaining-time logging
        """
        self._reporter = reporter
        self._settings_loader = settings_loader
        self._codebuild = codebuild
        self._sleep = sleep
        self._context = context
        self.state = InvocationState.START

    def run(self, event: CustomResourceEvent) -> dict[str, str]:
        """
        Trigger the build, wait for it, report, and return or raise.

        Args:
            event: Parsed custom resource request

        Returns:
            dict: {"Status": "SUCCESS"} when the build succeeded or was skipped

        Raises:
            TriggerError: Build could not be started
            BuildLookupError: Build record disappeared while polling
            BuildFailedError: Build ended in FAILED, FAULT, STOPPED or TIMED_OUT
            Exception: Any other error raised while triggering or polling
        """
        outcome = self._trigger_and_wait(event)
        self._finalize(event, outcome)

        if outcome.error is not None:
            raise outcome.error
        return {"Status": outcome.response_status.value}

    def _trigger_and_wait(self, event: CustomResourceEvent) -> InvocationOutcome:
        try:
            settings = self._settings_loader()
            if event.is_delete and not settings.build_on_delete:
                logger.info("_trigger_and_wait - Delete request, skipping build")
                return InvocationOutcome.skipped(DELETE_NOTE)

            request = JobRequest(job_definition_id=settings.project_name)
            codebuild = self._codebuild or CodeBuildClient(region=settings.region)
            trigger = BuildTrigger(codebuild)
            poller = StatusPoller(
                codebuild,
                interval_seconds=settings.poll_interval_seconds,
                sleep=self._sleep,
                context=self._context,
            )
            handle = trigger.start(request.job_definition_id)
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(logger, "_trigger_and_wait - Trigger failed", e)
            return InvocationOutcome.failure(e)

        self._transition(InvocationState.TRIGGERED)
        self._transition(InvocationState.POLLING)

        try:
            status = poller.await_terminal(handle)
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger, "_trigger_and_wait - Polling failed", e, build_id=handle.id
            )
            return InvocationOutcome.failure(e, handle=handle)

        if not status.is_success:
            error = BuildFailedError(handle.id, status.value)
            logger.error("_trigger_and_wait - %s", error, extra={"build_id": handle.id})
            return InvocationOutcome.failure(error, handle=handle, status=status)

        logger.info(
            "_trigger_and_wait - Build succeeded for project: %s",
            request.job_definition_id,
            extra={"build_id": handle.id},
        )
        return InvocationOutcome.success(handle)

    def _finalize(self, event: CustomResourceEvent, outcome: InvocationOutcome) -> None:
        self._reporter.report(
            event.callback_target,
            outcome.response_status,
            outcome.message,
            event.correlation_ids,
            physical_resource_id=event.PhysicalResourceId,
            data=outcome.data,
        )
        self._transition(
            InvocationState.SUCCEEDED_REPORTED if outcome.succeeded else InvocationState.FAILED_REPORTED
        )

    def _transition(self, state: InvocationState) -> None:
        logger.debug("_transition - %s -> %s", self.state.value, state.value)
        self.state = state
