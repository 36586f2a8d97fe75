"""Data models for cluster resources."""

from cluster_platform.models.infrastructure import (
    INFRASTRUCTURE_NAME,
    Infrastructure,
    InfrastructureStatus,
    PlatformStatus,
    PlatformType,
)

__all__ = [
    "INFRASTRUCTURE_NAME",
    "Infrastructure",
    "InfrastructureStatus",
    "PlatformStatus",
    "PlatformType",
]
