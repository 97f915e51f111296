"""Application error taxonomy mapped to HTTP responses."""


class MemoryGeneratorError(Exception):
    """Base error carrying the HTTP status and user-facing message."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(MemoryGeneratorError):
    """Missing or invalid client input."""

    status_code = 400


class NotFoundError(MemoryGeneratorError):
    """Unknown resource id."""

    status_code = 404


class ConfigurationError(MemoryGeneratorError):
    """Required server configuration is missing."""

    status_code = 500


class UpstreamError(MemoryGeneratorError):
    """The external image-generation service rejected the request."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, status_code=status_code)


class StorageError(MemoryGeneratorError):
    """Disk read or write failed."""

    status_code = 500
