"""Library exceptions."""

from __future__ import annotations

import json
from typing import Any, Optional


class FragmentsError(Exception):
    """Base fragments error.

    Every error records the operation that failed and, where one applies,
    the fragment it targeted.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        fragment_id: Optional[str] = None,
    ):
        self.operation = operation
        self.fragment_id = fragment_id
        super().__init__(self._with_context(message))

    def _with_context(self, message: str) -> str:
        if not self.operation:
            return message
        if self.fragment_id:
            return f"{self.operation} {self.fragment_id}: {message}"
        return f"{self.operation}: {message}"


class TransportError(FragmentsError):
    """The request never reached the server or no response came back."""


class RemoteError(FragmentsError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        status: int,
        body: str,
        *,
        operation: Optional[str] = None,
        fragment_id: Optional[str] = None,
    ):
        self.status = status
        self.body = body
        message = f"HTTP {status}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message, operation=operation, fragment_id=fragment_id)

    @property
    def detail(self) -> Optional[Any]:
        """The error body parsed as JSON, or ``None`` if it is plain text."""
        try:
            return json.loads(self.body)
        except (ValueError, RecursionError):
            return None


class EncodingError(FragmentsError):
    """A payload could not be serialized for its declared content type."""


class AuthenticationError(FragmentsError):
    """No usable credential could be produced for a request."""


class InvalidResponseError(FragmentsError):
    """A successful response carried a body that does not match its envelope."""

    def __init__(
        self,
        message: str,
        payload: Optional[object] = None,
        *,
        operation: Optional[str] = None,
        fragment_id: Optional[str] = None,
    ):
        super().__init__(message, operation=operation, fragment_id=fragment_id)
        self.payload = payload


class ConversionNotSupported(FragmentsError):
    """A conversion target is not offered for the fragment's content type."""
