"""Platform type extraction.

Two extractors share the ``PlatformExtractor`` interface:

- ``StatusFieldExtractor`` reads ``status.platformStatus.type`` from a
  fetched Infrastructure record.
- ``PrefixScanExtractor`` scans ``oc get -o yaml`` text for the first line
  that starts with ``platformType:``.

The prefix scan is not a YAML parser. It matches the first trimmed line with
the prefix wherever it appears, including inside comments, block scalars or
an unrelated mapping, and returns quoted values with their quotes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from cluster_platform.models.infrastructure import Infrastructure, PlatformType
from cluster_platform.utils.errors import ExtractionError

logger = logging.getLogger(__name__)

PLATFORM_TYPE_PREFIX = "platformType:"


class PlatformExtractor(ABC):
    """Selects the platform type from a fetched source."""

    @abstractmethod
    def extract(self, source: Any) -> str:
        """Return the platform type.

        Raises:
            ExtractionError: If the platform type is missing or empty.
        """


class StatusFieldExtractor(PlatformExtractor):
    """Extracts the platform type from an Infrastructure record.

    Only the structured ``status.platformStatus.type`` is ever returned. The
    deprecated ``status.platform`` is logged for information.
    """

    def extract(self, source: Infrastructure) -> str:
        legacy = source.legacy_platform
        if legacy:
            logger.info(f"Deprecated .status.platform: {legacy}")

        if source.status is not None:
            logger.debug(
                f"Infrastructure '{source.name}': "
                f"infrastructureName={source.status.infrastructure_name}, "
                f"controlPlaneTopology={source.status.control_plane_topology}"
            )

        platform_type = source.platform_type
        if not platform_type:
            raise ExtractionError(
                f"platform type unavailable: Infrastructure '{source.name}' "
                "has no status.platformStatus.type"
            )

        if legacy and legacy != platform_type:
            logger.warning(
                f"Deprecated .status.platform ({legacy}) disagrees with "
                f".status.platformStatus.type ({platform_type}); using the latter"
            )
        if not PlatformType.is_known(platform_type):
            logger.debug(f"Unrecognized platform type: {platform_type}")

        return platform_type


class PrefixScanExtractor(PlatformExtractor):
    """Extracts the platform type from YAML text by line-prefix scan."""

    def __init__(self, prefix: str = PLATFORM_TYPE_PREFIX) -> None:
        self._prefix = prefix

    def extract(self, source: str) -> str:
        key = self._prefix.rstrip(":")

        for line in source.splitlines():
            trimmed = line.strip()
            if not trimmed.startswith(self._prefix):
                continue

            value = trimmed.split(":", 1)[1].strip()
            if not value:
                raise ExtractionError(f"{key} is empty")
            return value

        raise ExtractionError(f"{key} not found")
