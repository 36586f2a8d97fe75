"""Access configuration providers for the cluster management API.

Each provider knows one way of building a ``kubernetes.client.ApiClient``.
``establish_access`` tries an ordered list of providers and returns the first
client that loads, so the discovery order is explicit and can be exercised
with stub providers in tests.

Discovery order:
1. An explicit kubeconfig path (command line, settings or KUBECONFIG), alone
2. Otherwise the in-cluster service account, then ~/.kube/config
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from kubernetes import client  # type: ignore[import-untyped]
from kubernetes import config as k8s_config
from kubernetes.config import ConfigException  # type: ignore[import-untyped]

from cluster_platform.config import DEFAULT_KUBECONFIG
from cluster_platform.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from cluster_platform.config import PlatformConfig

logger = logging.getLogger(__name__)


def _single_attempt_configuration() -> client.Configuration:
    """Client configuration whose connection pool never retries a request."""
    configuration = client.Configuration()
    # Read by ApiClient when it builds the urllib3 pool manager
    configuration.retries = False
    return configuration


class AccessProvider(ABC):
    """One way of reaching the cluster's management API."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short label used in logs and error messages."""

    @abstractmethod
    def load(self) -> client.ApiClient:
        """Build an API client.

        Raises:
            Exception: Any error from the underlying loader; the caller
                decides whether to fall through to the next provider.
        """


class KubeconfigProvider(AccessProvider):
    """Loads credentials from a kubeconfig file (or a KUBECONFIG-style list)."""

    def __init__(self, path: str | Path, context: str | None = None) -> None:
        self._path = str(path)
        self._context = context

    @property
    def description(self) -> str:
        if self._context:
            return f"kubeconfig {self._path} (context {self._context})"
        return f"kubeconfig {self._path}"

    def load(self) -> client.ApiClient:
        paths = [Path(p).expanduser() for p in self._path.split(os.pathsep) if p]
        if not any(p.exists() for p in paths):
            raise ConfigException(f"kubeconfig file not found: {self._path}")

        configuration = _single_attempt_configuration()
        k8s_config.load_kube_config(
            config_file=self._path,
            context=self._context,
            client_configuration=configuration,
            persist_config=False,
        )
        return client.ApiClient(configuration=configuration)


class InClusterProvider(AccessProvider):
    """Uses the pod's service account when running inside the cluster."""

    @property
    def description(self) -> str:
        return "in-cluster service account"

    def load(self) -> client.ApiClient:
        configuration = _single_attempt_configuration()
        k8s_config.load_incluster_config(client_configuration=configuration)
        return client.ApiClient(configuration=configuration)


def default_providers(config: PlatformConfig) -> list[AccessProvider]:
    """Build the provider chain for the given settings."""
    if config.kubeconfig_path:
        return [KubeconfigProvider(config.kubeconfig_path, config.kubeconfig_context)]

    return [
        InClusterProvider(),
        KubeconfigProvider(DEFAULT_KUBECONFIG, config.kubeconfig_context),
    ]


def establish_access(providers: Sequence[AccessProvider]) -> client.ApiClient:
    """Return an API client from the first provider that loads.

    Args:
        providers: Providers to try, in order.

    Returns:
        A ready-to-use API client.

    Raises:
        ConfigurationError: If no provider could build a client. The last
            provider's exception is chained and stored on ``cause``.
    """
    if not providers:
        raise ConfigurationError("No cluster access providers configured")

    attempts: list[str] = []
    last_error: Exception | None = None

    for provider in providers:
        try:
            api_client = provider.load()
        except Exception as e:
            logger.debug(f"Access via {provider.description} failed: {e}")
            attempts.append(f"{provider.description}: {e}")
            last_error = e
            continue

        logger.info(f"Using cluster access from {provider.description}")
        return api_client

    raise ConfigurationError(
        "Unable to establish cluster access (" + "; ".join(attempts) + ")",
        cause=last_error,
    ) from last_error
