"""Content types and the payload variants they map to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ContentFamily(str, Enum):
    TEXT = "text"
    STRUCTURED = "structured"
    BINARY = "binary"


def media_type(content_type: str) -> str:
    """Bare, lower-cased media type: ``Text/Plain; charset=utf-8`` -> ``text/plain``."""
    return content_type.split(";", 1)[0].strip().lower()


def content_family(content_type: str) -> ContentFamily:
    mt = media_type(content_type)
    if mt.startswith("image/"):
        return ContentFamily.BINARY
    if mt == "application/json" or mt.endswith("+json"):
        return ContentFamily.STRUCTURED
    return ContentFamily.TEXT


@dataclass(frozen=True)
class TextPayload:
    text: str
    content_type: str

    @property
    def family(self) -> ContentFamily:
        return ContentFamily.TEXT


@dataclass(frozen=True)
class StructuredPayload:
    value: Any
    content_type: str

    @property
    def family(self) -> ContentFamily:
        return ContentFamily.STRUCTURED


@dataclass(frozen=True)
class BinaryPayload:
    data: bytes
    content_type: str

    @property
    def family(self) -> ContentFamily:
        return ContentFamily.BINARY

    def __repr__(self) -> str:
        return f"BinaryPayload(content_type={self.content_type!r}, size={len(self.data)})"


FragmentPayload = Union[TextPayload, StructuredPayload, BinaryPayload]
