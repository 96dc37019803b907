from __future__ import annotations

from typing import Optional


# ======================================================================
# Exceptions
# ======================================================================

class LeftronicError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class ConfigError(LeftronicError):
    """Raised when client configuration is missing or invalid."""


class EncodingError(LeftronicError):
    """
    Raised when a value or envelope cannot be serialized.
    Encoding happens before any network I/O, so this never reaches the wire.
    """


class NetworkError(LeftronicError):
    """
    Raised when the transport could not complete the request
    (DNS, refused connection, timeout, TLS).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(LeftronicError):
    """Raised when the service answers with any status other than 200."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Leftronic returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
