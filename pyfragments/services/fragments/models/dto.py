"""Fragment data transfer objects handed to callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class FragmentMetadata:
    """Server-reported metadata for one fragment.

    A fragment listed by bare identifier has every other field ``None``.
    """

    id: str
    owner_id: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    @property
    def last_modified(self) -> Optional[datetime]:
        return self.updated or self.created


@dataclass(frozen=True)
class CollectionEntry:
    """One render-ready row of a fragment listing."""

    fragment: FragmentMetadata
    conversions: Tuple[str, ...]


@dataclass(frozen=True)
class DeleteConfirmation:
    fragment_id: str
    status: str
    body: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HealthStatus:
    status: str
    details: Dict[str, Any] = field(default_factory=dict)
