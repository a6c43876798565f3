"""Public exceptions for the OKLink SDK."""


class OklinkError(Exception):
    """Base exception for all OKLink SDK errors."""


class OklinkTransportError(OklinkError):
    """Network or HTTP-layer failure (timeout, connection, non-2xx, bad body)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OklinkAPIError(OklinkError):
    """Failure code returned by the OKLink API in an otherwise valid response."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class OklinkConfigError(OklinkError):
    """Configuration error (malformed env vars, invalid config)."""


class OklinkValidationError(OklinkError):
    """Response payload does not match its declared shape."""
