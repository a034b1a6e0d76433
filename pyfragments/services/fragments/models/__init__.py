"""Public exports for fragments service data models."""

from __future__ import annotations

from .dto import (
    CollectionEntry,
    DeleteConfirmation,
    FragmentMetadata,
    HealthStatus,
)

__all__ = [
    "CollectionEntry",
    "DeleteConfirmation",
    "FragmentMetadata",
    "HealthStatus",
]
