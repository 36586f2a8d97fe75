"""Platform type resolution through the cluster management API."""

from __future__ import annotations

import logging

from cluster_platform.clients.base import CRDs, K8sClient
from cluster_platform.extraction import PlatformExtractor, StatusFieldExtractor
from cluster_platform.models.infrastructure import INFRASTRUCTURE_NAME, Infrastructure
from cluster_platform.resolvers.base import PlatformResolver

logger = logging.getLogger(__name__)


class ApiPlatformResolver(PlatformResolver):
    """Reads ``status.platformStatus.type`` via the Kubernetes dynamic client."""

    name = "api"

    def __init__(self, k8s: K8sClient, extractor: PlatformExtractor | None = None) -> None:
        self._k8s = k8s
        self._extractor = extractor or StatusFieldExtractor()

    def fetch(self) -> Infrastructure:
        """Fetch the Infrastructure record.

        Raises:
            ConfigurationError: If cluster access cannot be established.
            FetchError: If the resource cannot be read.
        """
        if not self._k8s.is_connected:
            self._k8s.connect()

        resource = self._k8s.get(CRDs.INFRASTRUCTURE, INFRASTRUCTURE_NAME)
        record = Infrastructure.from_k8s(resource)
        logger.debug(f"Fetched Infrastructure '{record.name}'")
        return record

    def resolve(self) -> str:
        try:
            record = self.fetch()
        finally:
            self._k8s.disconnect()

        return self._extractor.extract(record)
