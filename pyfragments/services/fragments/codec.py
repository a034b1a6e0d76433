"""
Request body encoding and response decoding for fragment payloads.

Encoding is driven by the declared content type. Decoding is driven by the
response's declared type only for the binary/non-binary split: everything
that is not an image is read as UTF-8 text and then opportunistically parsed
as JSON, whatever the server said it was.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pyfragments.exceptions import EncodingError

from .domain import (
    BinaryPayload,
    ContentFamily,
    FragmentPayload,
    StructuredPayload,
    TextPayload,
    content_family,
)

LOGGER = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


class ContentCodec:
    """Translate between payload values and wire bytes."""

    def encode(self, payload: Any, content_type: str) -> bytes:
        """
        Build the request body for ``payload`` declared as ``content_type``.

        Structured: strings and bytes are taken as already serialized and sent
        unchanged; any other value, and the value of a StructuredPayload, is
        serialized to compact JSON.
        Binary: the buffer is sent untouched, whatever format it really holds.
        Text: the string is sent as UTF-8.
        """
        family = content_family(content_type)
        parsed = isinstance(payload, StructuredPayload)
        value = _unwrap(payload)
        LOGGER.debug(
            "fragments.codec.encode type=%s family=%s", content_type, family.value
        )

        if family is ContentFamily.STRUCTURED:
            if isinstance(value, str) and not parsed:
                return value.encode("utf-8")
            if isinstance(value, _BYTES_TYPES) and not parsed:
                return bytes(value)
            try:
                text = json.dumps(
                    value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
                )
            except (TypeError, ValueError) as e:
                raise EncodingError(
                    f"cannot serialize {type(value).__name__} as {content_type}: {e}"
                ) from e
            return text.encode("utf-8")

        if family is ContentFamily.BINARY:
            if not isinstance(value, _BYTES_TYPES):
                raise EncodingError(
                    f"{content_type} needs a bytes payload, got {type(value).__name__}"
                )
            return bytes(value)

        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, _BYTES_TYPES):
            return bytes(value)
        raise EncodingError(
            f"{content_type} needs a str payload, got {type(value).__name__}"
        )

    def decode(self, data: bytes, content_type: Optional[str]) -> FragmentPayload:
        """Decode a response body. Never raises."""
        observed = content_type or ""
        if observed and content_family(observed) is ContentFamily.BINARY:
            LOGGER.debug("fragments.codec.decode binary bytes=%d", len(data))
            return BinaryPayload(data=bytes(data), content_type=observed)

        text = bytes(data).decode("utf-8", errors="replace")
        structured = self.try_parse_structured(text, observed)
        if structured is not None:
            LOGGER.debug("fragments.codec.decode structured type=%s", observed)
            return structured
        LOGGER.debug("fragments.codec.decode text type=%s", observed)
        return TextPayload(text=text, content_type=observed)

    @staticmethod
    def try_parse_structured(
        text: str, content_type: str = ""
    ) -> Optional[StructuredPayload]:
        """Return the JSON reading of ``text``, or ``None`` if it is not JSON."""
        try:
            value = json.loads(text)
        except (ValueError, RecursionError):
            return None
        return StructuredPayload(value=value, content_type=content_type)


def _unwrap(payload: Any) -> Any:
    if isinstance(payload, TextPayload):
        return payload.text
    if isinstance(payload, StructuredPayload):
        return payload.value
    if isinstance(payload, BinaryPayload):
        return payload.data
    return payload
