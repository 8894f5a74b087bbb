"""
Shared test fixtures and configuration for entire test suite.

Provides: custom resource events, Lambda context, settings, fake CodeBuild client,
          recording callback transport
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from build_waiter.boundary.aws import CodeBuildClient
from build_waiter.boundary.http import CallbackClient
from build_waiter.configs import BuildWaiterSettings, get_settings
from build_waiter.core.completion_reporter import CompletionReporter

RESPONSE_URL = "https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/signed"
LOG_STREAM = "2026/10/18/[$LATEST]abcdef0123456789"


class RecordingCallback:
    """httpx transport that records every request and answers with a fixed status."""

    def __init__(self, status_code: int = 200, error: Exception | None = None) -> None:
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


class FakeCodeBuild:
    """Scripted boto3 codebuild client."""

    def __init__(self, build_id: str = "CopySkyfloAwsCrawlerImage-1:b-1", statuses: list[str] | None = None) -> None:
        self.build_id = build_id
        self.statuses = list(statuses or ["SUCCEEDED"])
        self.start_calls: list[str] = []
        self.get_calls: list[list[str]] = []
        self.start_error: Exception | None = None

    def start_build(self, projectName: str) -> dict:
        self.start_calls.append(projectName)
        if self.start_error is not None:
            raise self.start_error
        return {"build": {"id": self.build_id, "buildStatus": "IN_PROGRESS"}}

    def batch_get_builds(self, ids: list[str]) -> dict:
        self.get_calls.append(ids)
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        if status is None:
            return {"builds": [], "buildsNotFound": ids}
        return {"builds": [{"id": ids[0], "buildStatus": status}]}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per container; reset between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cfn_event() -> dict:
    """CloudFormation Create request for the custom resource."""
    return {
        "RequestType": "Create",
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:SkyfloTriggerBuildFunction-1",
        "ResponseURL": RESPONSE_URL,
        "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/crawler/1a2b3c",
        "RequestId": "req-0001",
        "LogicalResourceId": "WaitForImageCustomResource",
        "ResourceType": "Custom::TriggerBuild",
        "ResourceProperties": {
            "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:SkyfloTriggerBuildFunction-1",
        },
    }


@pytest.fixture
def lambda_context() -> MagicMock:
    """Minimal Lambda context."""
    context = MagicMock()
    context.log_stream_name = LOG_STREAM
    context.get_remaining_time_in_millis.return_value = 300_000
    return context


@pytest.fixture
def settings() -> BuildWaiterSettings:
    return BuildWaiterSettings(
        project_name="CopySkyfloAwsCrawlerImage-1",
        region="us-east-1",
        poll_interval_seconds=5.0,
    )


@pytest.fixture
def callback() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def reporter(callback: RecordingCallback) -> CompletionReporter:
    client = CallbackClient(transport=httpx.MockTransport(callback))
    return CompletionReporter(client, log_stream_name=LOG_STREAM)


@pytest.fixture
def fake_codebuild() -> FakeCodeBuild:
    return FakeCodeBuild()


@pytest.fixture
def codebuild(fake_codebuild: FakeCodeBuild) -> CodeBuildClient:
    return CodeBuildClient(client=fake_codebuild)
