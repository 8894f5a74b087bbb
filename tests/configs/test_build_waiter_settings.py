"""Tests for build waiter settings."""

import pytest

from build_waiter.configs import BaseSettings, BuildWaiterSettings, get_settings
from build_waiter.core.exceptions import ConfigurationError


class TestBuildWaiterSettings:
    """Test BuildWaiterSettings configuration."""

    def test_defaults(self, monkeypatch) -> None:
        """Should default to a 5 second interval and building on every request type."""
        monkeypatch.delenv("POLL_INTERVAL_SECONDS", raising=False)
        monkeypatch.delenv("BUILD_ON_DELETE", raising=False)

        settings = BuildWaiterSettings(project_name="proj")

        assert settings.poll_interval_seconds == 5.0
        assert settings.build_on_delete is True
        assert settings.log_level == "INFO"

    def test_from_stack_template_env_vars(self, monkeypatch) -> None:
        """Should read the variables the stack template sets on the function."""
        monkeypatch.setenv("PROJECT_NAME", "CopySkyfloAwsCrawlerImage-1")
        monkeypatch.setenv("MY_AWS_REGION", "ap-southeast-2")
        monkeypatch.setenv("POLL_INTERVAL_SECONDS", "10")
        monkeypatch.setenv("BUILD_ON_DELETE", "false")

        settings = BuildWaiterSettings()

        assert settings.project_name == "CopySkyfloAwsCrawlerImage-1"
        assert settings.region == "ap-southeast-2"
        assert settings.poll_interval_seconds == 10.0
        assert settings.build_on_delete is False

    def test_region_falls_back_to_aws_region(self, monkeypatch) -> None:
        monkeypatch.delenv("MY_AWS_REGION", raising=False)
        monkeypatch.setenv("AWS_REGION", "us-west-2")

        assert BuildWaiterSettings(project_name="proj").region == "us-west-2"

    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(ValueError):
            BuildWaiterSettings(project_name="proj", poll_interval_seconds=0)


class TestGetSettings:
    """Test the cached settings factory."""

    def test_missing_project_name_raises_configuration_error(self, monkeypatch) -> None:
        monkeypatch.delenv("PROJECT_NAME", raising=False)
        monkeypatch.delenv("BUILD_WAITER_PROJECT_NAME", raising=False)

        with pytest.raises(ConfigurationError, match="(?i)project_name"):
            get_settings()

    def test_cached(self, monkeypatch) -> None:
        monkeypatch.setenv("PROJECT_NAME", "proj")

        assert get_settings() is get_settings()


class TestBaseSettings:
    """Test the always-loadable base settings."""

    def test_log_level_defaults_to_info(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert BaseSettings().log_level == "INFO"

    def test_log_level_is_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", " warning ")

        assert BaseSettings().log_level == "WARNING"

    def test_loads_without_project_name(self, monkeypatch) -> None:
        monkeypatch.delenv("PROJECT_NAME", raising=False)
        monkeypatch.delenv("BUILD_WAITER_PROJECT_NAME", raising=False)

        assert BaseSettings().log_level
