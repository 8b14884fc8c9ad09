"""Error types returned (or raised on ``unwrap``) by the SPIKE client.

Exception hierarchy:
    SpikeError (base)
    ├── InvalidArgumentsError   arguments failed validation, nothing was sent
    ├── TransportError          the HTTP exchange could not be completed
    ├── ApiError                the API answered with status >= 400
    └── ResponseParseError      a body did not match the expected typed view
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SpikeError(Exception):
    """Base exception for every error produced by this library."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentsError(SpikeError):
    """Raised before any network attempt when arguments fail validation."""

    def __init__(self, message: str = "Invalid arguments.", *, problems: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.problems = list(problems or [])


class TransportError(SpikeError):
    """The transport failed (DNS, refused connection, timeout, ...).

    Carries no response body. The underlying ``httpx`` exception is
    available as ``__cause__``.
    """


class ApiError(SpikeError):
    """The remote API answered with an HTTP status >= 400.

    ``message`` is the response status line. ``body`` is the decoded
    response payload, if any.
    """

    def __init__(self, message: str, *, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def error_type(self) -> Optional[str]:
        """``error.type`` of the structured error payload, when present."""
        if not isinstance(self.body, dict):
            return None
        error = self.body.get("error")
        if isinstance(error, dict) and error.get("type") is not None:
            return str(error["type"])
        return None


class ResponseParseError(SpikeError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}
