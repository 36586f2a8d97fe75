"""Error types for cluster platform resolution."""


class PlatformError(Exception):
    """Base error for all platform resolution failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PlatformError):
    """No valid access context could be established."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(PlatformError):
    """Access was established but the resource call failed."""

    pass


class NotFoundError(FetchError):
    """Resource not found."""

    def __init__(self, kind: str, name: str, namespace: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.namespace = namespace
        if namespace:
            message = f"{kind} '{name}' not found in namespace '{namespace}'"
        else:
            message = f"{kind} '{name}' not found"
        super().__init__(message)


class AuthorizationError(FetchError):
    """The API rejected the credentials or denied access to the resource."""

    pass


class InvocationError(PlatformError):
    """The external cluster tool could not run or exited abnormally."""

    def __init__(
        self,
        message: str,
        output: str = "",
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class ExtractionError(PlatformError):
    """A response was obtained but the platform type is missing or empty."""

    pass
