"""
Build status poller.

Queries a build at a fixed interval until it reaches a terminal status.
There is no iteration cap, backoff or jitter: builds take minutes and the
Lambda timeout is the only bound on the loop.

Dependencies: boundary.aws
System role: Second stage of the custom resource invocation
"""

import logging
import time
from typing import Any, Callable

from build_waiter.boundary.aws import CodeBuildClient
from build_waiter.core.custom_resource.lambda_utils.context import remaining_time_ms
from build_waiter.core.custom_resource.models import JobHandle, JobStatus
from build_waiter.core.exceptions import BuildLookupError
from build_waiter.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 5.0


class StatusPoller:
    """Block until a build reaches a terminal status."""

    def __init__(
        self,
        codebuild: CodeBuildClient,
        interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        context: Any | None = None,
    ) -> None:
        """
        Initialize poller.

        Args:
            codebuild: CodeBuild client
            interval_seconds: Fixed wait between queries
            sleep: Blocking sleep function (injectable for tests)
            context: Lambda context, used only to log the remaining time
        """
        self._codebuild = codebuild
        self._interval_seconds = interval_seconds
        self._sleep = sleep
        self._context = context

    def get_status(self, handle: JobHandle) -> JobStatus:
        """
        Query the current status of a build once.

        Raises:
            BuildLookupError: CodeBuild returned no record for the handle
            ValueError: CodeBuild returned a status this package does not know
        """
        builds = self._codebuild.get_builds([handle.id])
        if not builds:
            raise BuildLookupError(handle.id)
        return JobStatus(builds[0]["buildStatus"])

    def await_terminal(self, handle: JobHandle) -> JobStatus:
        """
        Poll until the build is terminal.

        Args:
            handle: Build started by BuildTrigger

        Returns:
            JobStatus: Terminal status (SUCCEEDED, FAILED, FAULT, STOPPED, TIMED_OUT)

        Raises:
            BuildLookupError: No record for the handle (not retried)
        """
        polls = 0
        while True:
            status = self.get_status(handle)
            polls += 1
            log_with_context(
                logger,
                logging.INFO,
                f"await_terminal - Current build status: {status.value}",
                build_id=handle.id,
                poll_count=polls,
                remaining_ms=remaining_time_ms(self._context),
            )
            if status.is_terminal:
                return status
            self._sleep(self._interval_seconds)
