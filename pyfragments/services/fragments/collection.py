"""
Ordering and per-row conversion options for fragment listings.

Freshest first: by last update, falling back to creation time. Fragments
with neither timestamp go last; ties keep their input order.
"""

from __future__ import annotations

from datetime import timezone
from typing import Iterable, List, Sequence, Tuple

from .conversions import conversions_for
from .models.dto import CollectionEntry, FragmentMetadata


def _sort_key(indexed: Tuple[int, FragmentMetadata]) -> Tuple[int, float, int]:
    index, fragment = indexed
    ts = fragment.last_modified
    if ts is None:
        return (1, 0.0, index)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return (0, -ts.timestamp(), index)


class CollectionView:
    """Pure views over a list of ``FragmentMetadata``; inputs are never mutated."""

    @staticmethod
    def sort(fragments: Iterable[FragmentMetadata]) -> List[FragmentMetadata]:
        return [f for _, f in sorted(enumerate(fragments), key=_sort_key)]

    @staticmethod
    def conversions_for(fragment: FragmentMetadata) -> Tuple[str, ...]:
        return conversions_for(fragment.content_type)

    @classmethod
    def entries(cls, fragments: Sequence[FragmentMetadata]) -> List[CollectionEntry]:
        return [
            CollectionEntry(fragment=f, conversions=cls.conversions_for(f))
            for f in cls.sort(fragments)
        ]
