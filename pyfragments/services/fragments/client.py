"""
HTTP client for the fragments store.

FragmentClient maps 1:1 to the /v1/fragments endpoints, encodes request
bodies and decodes responses with ContentCodec, and hands list results back
through CollectionView ordering. Every call is a single attempt: no retries,
no caching.
"""

from __future__ import annotations

import logging
import os
import time
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

import requests
from pydantic import ValidationError

from pyfragments.auth import AuthContext
from pyfragments.config import ClientConfig, ConversionPolicy
from pyfragments.exceptions import (
    AuthenticationError,
    ConversionNotSupported,
    EncodingError,
    InvalidResponseError,
    RemoteError,
    TransportError,
)

from .codec import ContentCodec
from .collection import CollectionView
from .conversions import can_convert, normalize_target
from .domain import FragmentPayload
from .models.dto import DeleteConfirmation, FragmentMetadata, HealthStatus
from .models.wire import (
    FragmentEnvelope,
    FragmentListResponse,
    FragmentRecord,
    StatusResponse,
)

LOGGER = logging.getLogger(__name__)

FRAGMENTS_PATH = "/v1/fragments"

# Accepts no cookies, so nothing carries over from one request to the next.
_NO_COOKIES = DefaultCookiePolicy(allowed_domains=[])


# ------------------------------- Transport -----------------------------------


class _FragmentsHttp:
    """
    Minimal HTTP transport:
      - one attempt per request
      - network failures -> TransportError, non-2xx -> RemoteError
      - no cookie persistence between requests
      - bounded debug dumps (PYFRAGMENTS_DEBUG, PYFRAGMENTS_DEBUG_MAX_BYTES)
    """

    def __init__(self, base_url: str, session: requests.Session):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._session.cookies.set_policy(_NO_COOKIES)
        LOGGER.debug("Initialized _FragmentsHttp with base_url: %s", self._base_url)

    def _build_url(self, path: str, params: Optional[Dict[str, object]] = None) -> str:
        q = urlencode(params or {})
        return f"{self._base_url}{path}" + (f"?{q}" if q else "")

    def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        fragment_id: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, object]] = None,
        data: Optional[bytes] = None,
    ) -> requests.Response:
        url = self._build_url(path, params)
        LOGGER.info("%s %s", method, url)
        try:
            resp = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as e:
            LOGGER.error("%s %s failed before a response arrived: %s", method, url, e)
            raise TransportError(
                str(e), operation=operation, fragment_id=fragment_id
            ) from e

        code = resp.status_code
        LOGGER.debug("%s %s returned status %d", method, url, code)
        if not 200 <= code < 300:
            self._dump_http_debug(operation, method, url, resp)
            body = resp.content.decode("utf-8", errors="replace")
            LOGGER.error("%s %s failed with code %d: %s", method, url, code, body)
            raise RemoteError(
                code, body, operation=operation, fragment_id=fragment_id
            )
        return resp

    @staticmethod
    def json_body(
        resp: requests.Response,
        *,
        operation: str,
        fragment_id: Optional[str] = None,
    ) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            LOGGER.error("%s: response body is not JSON", operation)
            raise InvalidResponseError(
                "Invalid JSON response",
                payload=resp.content.decode("utf-8", errors="replace"),
                operation=operation,
                fragment_id=fragment_id,
            ) from e

    @staticmethod
    def _dump_http_debug(op: str, method: str, url: str, resp) -> None:
        if not os.getenv("PYFRAGMENTS_DEBUG"):
            return
        ts = time.strftime("%Y%m%d-%H%M%S")
        out_dir = os.path.join("workspace", "fragments_debug")
        path = os.path.join(out_dir, f"{ts}_{op}_http_response.txt")
        body_text = resp.content.decode("utf-8", errors="replace")
        max_bytes = int(os.getenv("PYFRAGMENTS_DEBUG_MAX_BYTES", "524288"))
        if len(body_text) > max_bytes:
            body_text = body_text[:max_bytes] + "\n[truncated]\n"
        try:
            os.makedirs(out_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(
                    f"{method} {url}\nstatus={resp.status_code}\n"
                    f"headers={dict(resp.headers)}\n\n"
                )
                f.write(body_text)
        except OSError as e:
            LOGGER.debug("Could not write HTTP debug dump to %s: %s", path, e)


# ------------------------------ Client ---------------------------------------


class FragmentClient:
    """
    Authenticated CRUD and conversion against /v1/fragments.

    Each operation takes the ``AuthContext`` to use for that call, so one
    client can serve several principals.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ClientConfig()
        self._http = _FragmentsHttp(self.config.base_url, session or requests.Session())
        self._codec = ContentCodec()
        LOGGER.info("FragmentClient initialized for %s", self.config.base_url)

    # ----- Queries -----

    def list(self, auth: AuthContext) -> List[FragmentMetadata]:
        """All of the caller's fragments, freshest first."""
        op = "list fragments"
        headers = self._headers(auth, op)
        resp = self._http.request(
            "GET", FRAGMENTS_PATH, operation=op, headers=headers, params={"expand": 1}
        )
        data = self._http.json_body(resp, operation=op)
        try:
            listing = FragmentListResponse.model_validate(data)
        except ValidationError as e:
            LOGGER.error("List response validation failed.")
            raise InvalidResponseError(
                "List response validation failed", payload=data, operation=op
            ) from e
        fragments = [_normalize(item) for item in listing.fragments]
        LOGGER.info("List returned %d fragments.", len(fragments))
        return CollectionView.sort(fragments)

    def read(self, auth: AuthContext, fragment_id: str) -> FragmentPayload:
        """Fetch a fragment's content, decoded by the response's Content-Type."""
        op = "read fragment"
        headers = self._headers(auth, op, fragment_id)
        resp = self._http.request(
            "GET",
            self._fragment_path(fragment_id),
            operation=op,
            fragment_id=fragment_id,
            headers=headers,
        )
        return self._codec.decode(resp.content, resp.headers.get("Content-Type"))

    def read_as(
        self,
        auth: AuthContext,
        fragment_id: str,
        target: str,
        *,
        source_type: Optional[str] = None,
    ) -> FragmentPayload:
        """
        Fetch a fragment converted to ``target`` (``html``, ``txt``, ``png``...).

        Under ``ConversionPolicy.STRICT`` the caller must pass the fragment's
        ``source_type`` and out-of-catalog targets fail before any request.
        """
        op = "convert fragment"
        ext = normalize_target(target)
        if self.config.conversion_policy is ConversionPolicy.STRICT:
            if not source_type:
                raise ConversionNotSupported(
                    "source type is required for strict conversions",
                    operation=op,
                    fragment_id=fragment_id,
                )
            if not can_convert(source_type, ext):
                LOGGER.warning(
                    "Refusing conversion of %s from %s to %s",
                    fragment_id,
                    source_type,
                    ext,
                )
                raise ConversionNotSupported(
                    f"{source_type} cannot be converted to {ext}",
                    operation=op,
                    fragment_id=fragment_id,
                )
        headers = self._headers(auth, op, fragment_id)
        resp = self._http.request(
            "GET",
            self._fragment_path(fragment_id, ext),
            operation=op,
            fragment_id=fragment_id,
            headers=headers,
        )
        return self._codec.decode(resp.content, resp.headers.get("Content-Type"))

    def health(self) -> HealthStatus:
        """Unauthenticated server status check (``GET /``)."""
        op = "health check"
        resp = self._http.request("GET", "/", operation=op)
        data = self._http.json_body(resp, operation=op)
        try:
            status = StatusResponse.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(
                "Status response validation failed", payload=data, operation=op
            ) from e
        details = {k: v for k, v in data.items() if k != "status"}
        return HealthStatus(status=status.status, details=details)

    # ----- Mutations -----

    def create(
        self, auth: AuthContext, payload: Any, content_type: str
    ) -> FragmentMetadata:
        """Store a new fragment; returns the server-assigned metadata."""
        op = "create fragment"
        body = self._encode(payload, content_type, op)
        headers = self._headers(auth, op, content_type=content_type)
        resp = self._http.request(
            "POST", FRAGMENTS_PATH, operation=op, headers=headers, data=body
        )
        created = self._fragment_envelope(resp, op)
        LOGGER.info("Created fragment %s (%s)", created.id, created.content_type)
        return created

    def update(
        self, auth: AuthContext, fragment_id: str, payload: Any, content_type: str
    ) -> FragmentMetadata:
        """
        Replace a fragment's content.

        ``content_type`` is sent as given; it is expected to match the type the
        fragment was created with, which only the server can enforce.
        """
        op = "update fragment"
        body = self._encode(payload, content_type, op, fragment_id)
        headers = self._headers(auth, op, fragment_id, content_type=content_type)
        resp = self._http.request(
            "PUT",
            self._fragment_path(fragment_id),
            operation=op,
            fragment_id=fragment_id,
            headers=headers,
            data=body,
        )
        return self._fragment_envelope(resp, op, fragment_id)

    def delete(self, auth: AuthContext, fragment_id: str) -> DeleteConfirmation:
        op = "delete fragment"
        headers = self._headers(auth, op, fragment_id)
        resp = self._http.request(
            "DELETE",
            self._fragment_path(fragment_id),
            operation=op,
            fragment_id=fragment_id,
            headers=headers,
        )
        data = self._http.json_body(resp, operation=op, fragment_id=fragment_id)
        try:
            status = StatusResponse.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(
                "Delete response validation failed",
                payload=data,
                operation=op,
                fragment_id=fragment_id,
            ) from e
        LOGGER.info("Deleted fragment %s", fragment_id)
        return DeleteConfirmation(fragment_id=fragment_id, status=status.status, body=data)

    # ----- Helpers -----

    @staticmethod
    def _fragment_path(fragment_id: str, ext: Optional[str] = None) -> str:
        path = f"{FRAGMENTS_PATH}/{quote(fragment_id, safe='')}"
        return f"{path}.{ext}" if ext else path

    @staticmethod
    def _headers(
        auth: AuthContext,
        operation: str,
        fragment_id: Optional[str] = None,
        *,
        content_type: Optional[str] = None,
    ) -> Dict[str, str]:
        try:
            headers = dict(auth.authorization_headers(content_type))
        except Exception as e:
            LOGGER.error("%s: credentials unavailable: %s", operation, e)
            message = str(e) if isinstance(e, AuthenticationError) else repr(e)
            raise AuthenticationError(
                f"could not produce credentials: {message}",
                operation=operation,
                fragment_id=fragment_id,
            ) from e
        if content_type:
            # The declared type is authoritative, whatever the collaborator set.
            headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
            headers["Content-Type"] = content_type
        return headers

    def _encode(
        self,
        payload: Any,
        content_type: str,
        operation: str,
        fragment_id: Optional[str] = None,
    ) -> bytes:
        try:
            return self._codec.encode(payload, content_type)
        except EncodingError as e:
            raise EncodingError(
                str(e), operation=operation, fragment_id=fragment_id
            ) from e

    def _fragment_envelope(
        self, resp: requests.Response, operation: str, fragment_id: Optional[str] = None
    ) -> FragmentMetadata:
        data = self._http.json_body(resp, operation=operation, fragment_id=fragment_id)
        try:
            envelope = FragmentEnvelope.model_validate(data)
        except ValidationError as e:
            LOGGER.error("%s: fragment envelope validation failed.", operation)
            raise InvalidResponseError(
                "Fragment envelope validation failed",
                payload=data,
                operation=operation,
                fragment_id=fragment_id,
            ) from e
        return _normalize(envelope.fragment)


def _normalize(item) -> FragmentMetadata:
    """Accept a bare identifier or a full record; always return metadata."""
    if isinstance(item, str):
        return FragmentMetadata(id=item)
    record: FragmentRecord = item
    return FragmentMetadata(
        id=record.id,
        owner_id=record.owner_id,
        content_type=record.type,
        size=record.size,
        created=record.created,
        updated=record.updated,
    )

