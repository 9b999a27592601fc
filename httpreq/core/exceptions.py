"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error is terminal: the CLI reports it and exits non-zero.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when a command-line option is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="CFG_INVALID")


class TransportError(ApplicationError):
    """Raised when the request cannot be delivered (connection, TLS, DNS)."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class StreamError(ApplicationError):
    """Raised when reading the response body fails mid-stream."""

    def __init__(self, message: str = "Response stream error") -> None:
        super().__init__(message, code="NET_STREAM_ERROR")
