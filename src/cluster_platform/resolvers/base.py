"""Base class for platform type resolution strategies."""

from abc import ABC, abstractmethod


class PlatformResolver(ABC):
    """Resolves the cluster's platform type."""

    name: str = "base"

    @abstractmethod
    def resolve(self) -> str:
        """Fetch the Infrastructure resource and return its platform type.

        Raises:
            PlatformError: On any failure; nothing is retried.
        """
