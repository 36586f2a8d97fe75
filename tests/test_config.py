"""Tests for PlatformConfig."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cluster_platform.config import (
    DEFAULT_KUBECONFIG,
    LogLevel,
    PlatformConfig,
    ResolverMode,
)


class TestPlatformConfig:
    """Test settings loading."""

    def test_defaults(self) -> None:
        config = PlatformConfig()

        assert config.mode == ResolverMode.API
        assert config.kubeconfig_path is None
        assert config.kubeconfig_context is None
        assert config.cli_path is None
        assert config.log_level == LogLevel.WARNING
        assert config.effective_kubeconfig_path == DEFAULT_KUBECONFIG

    def test_kubeconfig_from_plain_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The KUBECONFIG variable used by oc/kubectl is honoured."""
        monkeypatch.setenv("KUBECONFIG", "/tmp/kubeconfig")

        config = PlatformConfig()

        assert config.kubeconfig_path == "/tmp/kubeconfig"
        assert config.effective_kubeconfig_path == Path("/tmp/kubeconfig")

    def test_prefixed_env_wins_over_plain(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBECONFIG", "/tmp/plain")
        monkeypatch.setenv("CLUSTER_PLATFORM_KUBECONFIG_PATH", "/tmp/prefixed")

        assert PlatformConfig().kubeconfig_path == "/tmp/prefixed"

    def test_explicit_value_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBECONFIG", "/tmp/env")

        config = PlatformConfig(kubeconfig_path="/tmp/arg")

        assert config.kubeconfig_path == "/tmp/arg"

    def test_empty_kubeconfig_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty KUBECONFIG means no explicit path, as for oc."""
        monkeypatch.setenv("KUBECONFIG", "")

        assert PlatformConfig().kubeconfig_path is None

    def test_mode_and_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLUSTER_PLATFORM_MODE", "cli")
        monkeypatch.setenv("CLUSTER_PLATFORM_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLUSTER_PLATFORM_CLI_PATH", "/usr/local/bin/oc")
        monkeypatch.setenv("CLUSTER_PLATFORM_KUBECONFIG_CONTEXT", "admin")

        config = PlatformConfig()

        assert config.mode == ResolverMode.CLI
        assert config.log_level == LogLevel.DEBUG
        assert config.cli_path == "/usr/local/bin/oc"
        assert config.kubeconfig_context == "admin"

    def test_invalid_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLUSTER_PLATFORM_MODE", "ssh")

        with pytest.raises(ValidationError):
            PlatformConfig()

    def test_home_is_expanded(self) -> None:
        config = PlatformConfig(kubeconfig_path="~/clusters/demo")

        assert config.effective_kubeconfig_path == Path.home() / "clusters" / "demo"
