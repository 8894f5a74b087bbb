"""
Build waiter configuration.

Settings for the CodeBuild project to trigger, the poll cadence and the
build lifecycle. Variable names match the ones set on the custom resource
Lambda by the stack template (PROJECT_NAME, MY_AWS_REGION).

Dependencies: pydantic, pydantic_settings
System role: Out-of-band configuration for the custom resource
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from build_waiter.configs.base import BaseSettings


class BuildWaiterSettings(BaseSettings):
    """Settings for triggering and awaiting one CodeBuild job."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("PROJECT_NAME", "BUILD_WAITER_PROJECT_NAME"),
        description="CodeBuild project that copies the image into ECR",
    )
    region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MY_AWS_REGION", "AWS_REGION"),
        description="AWS region for the CodeBuild client (boto3 default chain if unset)",
    )
    poll_interval_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias=AliasChoices("POLL_INTERVAL_SECONDS", "BUILD_WAITER_POLL_INTERVAL_SECONDS"),
        description="Fixed wait between build status queries",
    )
    build_on_delete: bool = Field(
        default=True,
        validation_alias=AliasChoices("BUILD_ON_DELETE", "BUILD_WAITER_BUILD_ON_DELETE"),
        description="Run the build on stack deletion; false skips it and reports SUCCESS",
    )
