"""
Public API for the fragments service.

  - FragmentClient.list(auth) -> List[FragmentMetadata] (freshest first)
  - FragmentClient.create(auth, payload, content_type) -> FragmentMetadata
  - FragmentClient.read(auth, fragment_id) -> FragmentPayload
  - FragmentClient.update(auth, fragment_id, payload, content_type) -> FragmentMetadata
  - FragmentClient.delete(auth, fragment_id) -> DeleteConfirmation
  - FragmentClient.read_as(auth, fragment_id, target) -> FragmentPayload
  - FragmentClient.health() -> HealthStatus
"""

from .aio import AsyncFragmentClient
from .client import FragmentClient
from .codec import ContentCodec
from .collection import CollectionView
from .conversions import conversions_for
from .domain import (
    BinaryPayload,
    ContentFamily,
    FragmentPayload,
    StructuredPayload,
    TextPayload,
    content_family,
)
from .models import CollectionEntry, DeleteConfirmation, FragmentMetadata, HealthStatus

__all__ = [
    "AsyncFragmentClient",
    "BinaryPayload",
    "CollectionEntry",
    "CollectionView",
    "ContentCodec",
    "ContentFamily",
    "DeleteConfirmation",
    "FragmentClient",
    "FragmentMetadata",
    "FragmentPayload",
    "HealthStatus",
    "StructuredPayload",
    "TextPayload",
    "content_family",
    "conversions_for",
]
