"""
Exceptions raised by the Gerrit REST client.
"""

from typing import Any


class GerritError(Exception):
    """Base class for all gerritrest errors."""


class GerritTransportError(GerritError):
    """The HTTP transport failed (connection refused, timeout, TLS)."""


class GerritRestError(GerritError):
    """The server answered, but not with what the caller needed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: bytes | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GerritJSONDecodeError(GerritRestError):
    """
    A body declared as application/json could not be parsed.
    The undecoded body is kept on ``body`` for inspection.
    """

    @property
    def body(self) -> bytes:
        return self.response_body or b""


class EntityDecodeError(GerritError):
    """Decoded JSON does not match the shape of the requested entity."""

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.data = data
