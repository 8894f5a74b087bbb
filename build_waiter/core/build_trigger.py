"""
Build trigger stage.

Starts exactly one asynchronous CodeBuild job and returns its handle.
Failures are not retried here: CloudFormation retries the whole resource.

Dependencies: botocore, boundary.aws
System role: First stage of the custom resource invocation
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from build_waiter.boundary.aws import CodeBuildClient
from build_waiter.core.custom_resource.models import JobHandle
from build_waiter.core.exceptions import TriggerError
from build_waiter.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class BuildTrigger:
    """Start one build of a CodeBuild project."""

    def __init__(self, codebuild: CodeBuildClient) -> None:
        self._codebuild = codebuild

    def start(self, job_definition_id: str) -> JobHandle:
        """
        Start a build.

        Args:
            job_definition_id: CodeBuild project name

        Returns:
            JobHandle: Handle of the started build

        Raises:
            TriggerError: Invalid project, throttling, authorization failure,
                or a response without a build id
        """
        log_with_context(logger, logging.INFO, "start - Starting build", project_name=job_definition_id)

        try:
            build = self._codebuild.start_build(job_definition_id)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "Unknown")
            logger.error("start - ClientError %s: %s", code, error.get("Message", e))
            raise TriggerError(
                f"Failed to start build for project {job_definition_id}: {e}",
                project_name=job_definition_id,
                details={"error_code": code},
            ) from e
        except BotoCoreError as e:
            logger.error("start - %s: %s", type(e).__name__, e)
            raise TriggerError(
                f"Failed to start build for project {job_definition_id}: {e}",
                project_name=job_definition_id,
            ) from e

        build_id = build.get("id")
        if not build_id:
            raise TriggerError(
                f"StartBuild returned no build id for project {job_definition_id}",
                project_name=job_definition_id,
            )

        logger.info("start - Build started with ID: %s", build_id)
        return JobHandle(id=build_id)
