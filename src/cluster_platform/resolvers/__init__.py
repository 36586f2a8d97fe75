"""Platform type resolution strategies."""

from __future__ import annotations

import os

from cluster_platform.clients.base import K8sClient
from cluster_platform.clients.cli import ClusterCLI
from cluster_platform.config import PlatformConfig, ResolverMode
from cluster_platform.resolvers.api import ApiPlatformResolver
from cluster_platform.resolvers.base import PlatformResolver
from cluster_platform.resolvers.cli import CliPlatformResolver


def create_resolver(config: PlatformConfig) -> PlatformResolver:
    """Create the resolver selected by ``config.mode``."""
    if config.mode == ResolverMode.CLI:
        # oc and kubectl read KUBECONFIG themselves, including path lists
        kubeconfig = config.kubeconfig_path
        if kubeconfig == os.environ.get("KUBECONFIG"):
            kubeconfig = None
        cli = ClusterCLI(
            cli_path=config.cli_path,
            kubeconfig=kubeconfig,
            context=config.kubeconfig_context,
        )
        return CliPlatformResolver(cli)

    return ApiPlatformResolver(K8sClient(config))


__all__ = [
    "ApiPlatformResolver",
    "CliPlatformResolver",
    "PlatformResolver",
    "create_resolver",
]
