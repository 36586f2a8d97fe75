"""Configuration for cluster platform resolution."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Location kubectl and oc fall back to when KUBECONFIG is unset
DEFAULT_KUBECONFIG = Path.home() / ".kube" / "config"


class ResolverMode(str, Enum):
    """How the platform type is obtained."""

    API = "api"
    CLI = "cli"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class PlatformConfig(BaseSettings):
    """Settings for resolving a cluster's platform type.

    Loaded from environment variables with the CLUSTER_PLATFORM_ prefix
    or from a .env file. The kubeconfig path also honours the plain
    KUBECONFIG variable used by oc and kubectl.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLUSTER_PLATFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    mode: ResolverMode = Field(
        default=ResolverMode.API,
        description="Resolve through the management API or the oc/kubectl CLI",
    )

    kubeconfig_path: str | None = Field(
        default=None,
        description="Explicit kubeconfig file; disables in-cluster discovery",
    )
    kubeconfig_context: str | None = Field(
        default=None,
        description="Kubeconfig context to use",
    )

    cli_path: str | None = Field(
        default=None,
        description="CLI binary for cli mode (default: oc, then kubectl, from PATH)",
    )

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level for diagnostics written to stderr",
    )

    @field_validator("kubeconfig_path", "kubeconfig_context", "cli_path", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _kubeconfig_from_env(self) -> PlatformConfig:
        if self.kubeconfig_path is None:
            self.kubeconfig_path = os.environ.get("KUBECONFIG") or None
        return self

    @property
    def effective_kubeconfig_path(self) -> Path:
        """Get the kubeconfig file that kubeconfig-based access reads."""
        if self.kubeconfig_path:
            return Path(self.kubeconfig_path).expanduser()
        return DEFAULT_KUBECONFIG
