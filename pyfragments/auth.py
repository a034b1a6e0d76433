"""
Credentials for fragment requests.

The client only ever asks an ``AuthContext`` for request headers; how the
token was obtained (OIDC redirect, keyring, environment) is not its concern.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Protocol, Union, runtime_checkable

from pyfragments.exceptions import AuthenticationError

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class AuthContext(Protocol):
    def authorization_headers(
        self, content_type: Optional[str] = None
    ) -> Dict[str, str]:
        """Return headers authorizing one request with an optional body type."""
        ...


class BearerTokenAuth:
    """
    ``Authorization: Bearer <token>`` credentials.

    ``token`` is either the token itself or a zero-argument callable that
    returns it, so an expiring token can be refreshed between requests.
    """

    def __init__(self, token: Union[str, Callable[[], Optional[str]], None]):
        self._token = token

    def _resolve_token(self) -> str:
        token = self._token() if callable(self._token) else self._token
        if not token:
            LOGGER.warning("No bearer token available")
            raise AuthenticationError("no bearer token available")
        return token

    def authorization_headers(
        self, content_type: Optional[str] = None
    ) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._resolve_token()}"}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token=***)"
