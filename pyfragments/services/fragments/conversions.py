"""Which output formats a fragment of a given content type can be converted to."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .domain import ContentFamily, content_family, media_type

_MARKDOWN = "text/markdown"
_HTML = "text/html"
_JSON = "application/json"

# Source media type -> conversion targets, in display order.
CONVERSIONS: Dict[str, Tuple[str, ...]] = {
    _MARKDOWN: ("html", "txt"),
    _HTML: ("txt",),
    _JSON: ("txt",),
    "image/png": ("jpg", "webp", "avif"),
    "image/jpeg": ("png", "webp", "avif"),
    "image/webp": ("png", "jpg", "avif"),
    "image/avif": ("png", "jpg", "webp"),
}


def normalize_target(target: str) -> str:
    """``.PNG`` -> ``png``."""
    return target.strip().lstrip(".").lower()


def conversions_for(content_type: Optional[str]) -> Tuple[str, ...]:
    """Targets offered for ``content_type``; unknown or missing types get none."""
    if not content_type:
        return ()
    mt = media_type(content_type)
    targets = CONVERSIONS.get(mt)
    if targets is None and content_family(mt) is ContentFamily.STRUCTURED:
        targets = CONVERSIONS[_JSON]
    return targets or ()


def can_convert(content_type: Optional[str], target: str) -> bool:
    return normalize_target(target) in conversions_for(content_type)
