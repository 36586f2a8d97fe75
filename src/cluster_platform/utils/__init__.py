"""Utility helpers for cluster platform resolution."""

from cluster_platform.utils.errors import (
    AuthorizationError,
    ConfigurationError,
    ExtractionError,
    FetchError,
    InvocationError,
    NotFoundError,
    PlatformError,
)

__all__ = [
    "PlatformError",
    "ConfigurationError",
    "FetchError",
    "NotFoundError",
    "AuthorizationError",
    "InvocationError",
    "ExtractionError",
]
