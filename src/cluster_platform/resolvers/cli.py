"""Platform type resolution through the oc/kubectl CLI."""

from __future__ import annotations

import logging

from cluster_platform.clients.cli import ClusterCLI
from cluster_platform.extraction import PlatformExtractor, PrefixScanExtractor
from cluster_platform.models.infrastructure import INFRASTRUCTURE_NAME
from cluster_platform.resolvers.base import PlatformResolver

logger = logging.getLogger(__name__)

INFRASTRUCTURE_KIND = "infrastructure"


class CliPlatformResolver(PlatformResolver):
    """Scans ``oc get infrastructure cluster -o yaml`` output for platformType."""

    name = "cli"

    def __init__(self, cli: ClusterCLI, extractor: PlatformExtractor | None = None) -> None:
        self._cli = cli
        self._extractor = extractor or PrefixScanExtractor()

    def resolve(self) -> str:
        output = self._cli.get_yaml(INFRASTRUCTURE_KIND, INFRASTRUCTURE_NAME)
        logger.debug(f"Read {len(output.splitlines())} lines of CLI output")
        return self._extractor.extract(output)
