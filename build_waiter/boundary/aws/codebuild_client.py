"""
CodeBuild client for the image-copy project.

Wraps the two job-control calls the build waiter needs. Errors from boto3
propagate unchanged; callers decide how to classify them.

Dependencies: boto3
System role: Job-control API adapter
"""

from typing import Any

import boto3


class CodeBuildClient:
    """CodeBuild client limited to StartBuild and BatchGetBuilds."""

    def __init__(self, region: str | None = None, client: Any | None = None) -> None:
        """
        Initialize CodeBuild client.

        Args:
            region: AWS region (boto3 default chain if None)
            client: Pre-built boto3 codebuild client, mainly for tests
        """
        self._region = region
        self._client = client or boto3.client("codebuild", region_name=region)

    def start_build(self, project_name: str) -> dict[str, Any]:
        """
        Start one build of a project.

        Args:
            project_name: CodeBuild project name

        Returns:
            dict: Build record from the StartBuild response (contains "id")

        Raises:
            ClientError: Service rejected the request
        """
        response = self._client.start_build(projectName=project_name)
        return response.get("build") or {}

    def get_builds(self, build_ids: list[str]) -> list[dict[str, Any]]:
        """
        Fetch build records by id.

        Args:
            build_ids: Build ids to look up

        Returns:
            list[dict]: Build records; ids CodeBuild does not know are omitted

        Raises:
            ClientError: Service rejected the request
        """
        response = self._client.batch_get_builds(ids=build_ids)
        return response.get("builds", [])
