"""Kubernetes client for reading OpenShift config resources."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kubernetes.client import ApiException  # type: ignore[import-untyped]
from kubernetes.dynamic import DynamicClient  # type: ignore[import-untyped]
from kubernetes.dynamic.exceptions import ResourceNotFoundError  # type: ignore[import-untyped]

from cluster_platform.clients.providers import (
    AccessProvider,
    default_providers,
    establish_access,
)
from cluster_platform.config import PlatformConfig
from cluster_platform.utils.errors import AuthorizationError, FetchError, NotFoundError

if TYPE_CHECKING:
    from kubernetes.client import ApiClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CRDDefinition:
    """Definition of an API resource type served by the cluster."""

    group: str
    version: str
    plural: str
    kind: str
    namespaced: bool = True

    @property
    def api_version(self) -> str:
        """Get the full API version string."""
        return f"{self.group}/{self.version}" if self.group else self.version


class CRDs:
    """Resource definitions used by this package."""

    INFRASTRUCTURE = CRDDefinition(
        group="config.openshift.io",
        version="v1",
        plural="infrastructures",
        kind="Infrastructure",
        namespaced=False,
    )


class K8sClient:
    """Thin wrapper around the Kubernetes dynamic client.

    ``connect`` resolves access through the provider chain; the dynamic
    client itself (which performs API discovery) is created on first use so
    that network failures surface as fetch errors rather than configuration
    errors.
    """

    def __init__(
        self,
        config: PlatformConfig | None = None,
        providers: Sequence[AccessProvider] | None = None,
    ) -> None:
        self._config = config or PlatformConfig()
        self._providers = list(providers) if providers is not None else None
        self._api_client: ApiClient | None = None
        self._dynamic_client: DynamicClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._api_client is not None

    def connect(self) -> None:
        """Establish access to the cluster.

        Raises:
            ConfigurationError: If no access provider succeeds.
        """
        providers = self._providers
        if providers is None:
            providers = default_providers(self._config)
        self._api_client = establish_access(providers)

    def disconnect(self) -> None:
        """Release the underlying API client."""
        if self._api_client is not None:
            self._api_client.close()
        self._api_client = None
        self._dynamic_client = None

    @property
    def dynamic(self) -> DynamicClient:
        """Get the dynamic client, performing API discovery on first use.

        Raises:
            RuntimeError: If the client is not connected.
            FetchError: If API discovery fails.
        """
        if self._api_client is None:
            raise RuntimeError("K8s client not connected. Call connect() first.")
        if self._dynamic_client is None:
            try:
                self._dynamic_client = DynamicClient(self._api_client)
            except Exception as e:
                raise FetchError(f"Failed to reach the cluster API: {e}") from e
        return self._dynamic_client

    def get_resource(self, crd: CRDDefinition) -> Any:
        """Get the dynamic resource handle for a resource type."""
        dynamic = self.dynamic
        try:
            return dynamic.resources.get(api_version=crd.api_version, kind=crd.kind)
        except ResourceNotFoundError as e:
            raise FetchError(
                f"{crd.kind} ({crd.api_version}) is not served by this cluster; "
                "is it an OpenShift cluster?"
            ) from e
        except Exception as e:
            raise FetchError(f"Failed to discover {crd.kind} ({crd.api_version}): {e}") from e

    def get(self, crd: CRDDefinition, name: str, namespace: str | None = None) -> Any:
        """Get a single resource by name.

        Raises:
            NotFoundError: The resource does not exist.
            AuthorizationError: The credentials were rejected or lack access.
            FetchError: Any other failure talking to the API.
        """
        resource = self.get_resource(crd)
        logger.debug(f"Getting {crd.kind} '{name}' from {crd.api_version}")

        try:
            if crd.namespaced:
                return resource.get(name=name, namespace=namespace)
            return resource.get(name=name)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError(crd.kind, name, namespace) from e
            if e.status in (401, 403):
                raise AuthorizationError(
                    f"Not authorized to get {crd.kind} '{name}': {e.reason}"
                ) from e
            raise FetchError(f"Failed to get {crd.kind} '{name}': {e.reason}") from e
        except Exception as e:
            raise FetchError(f"Failed to get {crd.kind} '{name}': {e}") from e
