"""
Dropbox Paper exception hierarchy.

All exceptions inherit from PaperError for easy catching.
"""

from typing import Any


class PaperError(Exception):
    """Base exception for all dropbox_paper errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class EncodingError(PaperError):
    """A request could not be serialized or a response could not be decoded."""


class TransportError(PaperError):
    """Network-level error (connection failed, DNS, timeout) before any response."""


class RequestCancelledError(PaperError):
    """The caller's deadline expired before the request completed."""

    def __init__(self, message: str, *, deadline: float | None = None, **context: Any) -> None:
        super().__init__(message, deadline=deadline, **context)
        self.deadline = deadline


class RemoteError(PaperError):
    """
    The API answered with a non-200 status and a structured error payload.

    Attributes:
        summary: Human-readable ``error_summary`` from the payload.
        metadata: The ``error`` mapping from the payload.
        status_code: HTTP status of the response.
        endpoint: API path that was called.
    """

    def __init__(
        self,
        summary: str,
        metadata: dict[str, str] | None = None,
        *,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        self.summary = summary
        self.metadata = dict(metadata or {})
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(
            f"{summary}: {self.metadata!r}",
            status_code=status_code,
            endpoint=endpoint,
        )
