"""Cluster access clients."""

from cluster_platform.clients.base import CRDDefinition, CRDs, K8sClient
from cluster_platform.clients.cli import ClusterCLI
from cluster_platform.clients.providers import (
    AccessProvider,
    InClusterProvider,
    KubeconfigProvider,
    default_providers,
    establish_access,
)

__all__ = [
    "AccessProvider",
    "CRDDefinition",
    "CRDs",
    "ClusterCLI",
    "InClusterProvider",
    "K8sClient",
    "KubeconfigProvider",
    "default_providers",
    "establish_access",
]
