"""Tests for fragment listing order and per-row conversions."""

import unittest
from datetime import datetime, timedelta, timezone

from pyfragments.services.fragments.collection import CollectionView
from pyfragments.services.fragments.models.dto import FragmentMetadata

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def frag(fid, *, created=None, updated=None, content_type=None):
    return FragmentMetadata(
        id=fid, content_type=content_type, created=created, updated=updated
    )


class CollectionViewTest(unittest.TestCase):
    def test_freshest_first(self):
        items = [
            frag("old", created=T0),
            frag("new", created=T0, updated=T0 + timedelta(hours=2)),
            frag("mid", created=T0 + timedelta(hours=1)),
        ]
        self.assertEqual([f.id for f in CollectionView.sort(items)], ["new", "mid", "old"])

    def test_undated_last_in_input_order(self):
        items = [frag("a"), frag("dated", created=T0), frag("b")]
        self.assertEqual(
            [f.id for f in CollectionView.sort(items)], ["dated", "a", "b"]
        )

    def test_stable_for_equal_timestamps(self):
        items = [frag("x", updated=T0), frag("y", updated=T0), frag("z", updated=T0)]
        self.assertEqual([f.id for f in CollectionView.sort(items)], ["x", "y", "z"])

    def test_idempotent(self):
        items = [
            frag("1", created=T0),
            frag("2"),
            frag("3", updated=T0 + timedelta(minutes=5)),
            frag("4", created=T0),
        ]
        once = CollectionView.sort(items)
        self.assertEqual(CollectionView.sort(once), once)

    def test_input_is_not_mutated(self):
        items = [frag("a", created=T0), frag("b", created=T0 + timedelta(days=1))]
        snapshot = list(items)
        CollectionView.sort(items)
        self.assertEqual(items, snapshot)

    def test_naive_timestamps_are_treated_as_utc(self):
        items = [
            frag("naive", created=datetime(2024, 5, 1, 13, 0)),
            frag("aware", created=T0),
        ]
        self.assertEqual(
            [f.id for f in CollectionView.sort(items)], ["naive", "aware"]
        )

    def test_conversions_for(self):
        self.assertEqual(
            CollectionView.conversions_for(frag("m", content_type="text/markdown")),
            ("html", "txt"),
        )
        self.assertEqual(CollectionView.conversions_for(frag("bare")), ())

    def test_entries(self):
        items = [
            frag("img", created=T0, content_type="image/png"),
            frag("doc", updated=T0 + timedelta(hours=1), content_type="text/html"),
        ]
        entries = CollectionView.entries(items)
        self.assertEqual([e.fragment.id for e in entries], ["doc", "img"])
        self.assertEqual(entries[0].conversions, ("txt",))
        self.assertEqual(entries[1].conversions, ("jpg", "webp", "avif"))


if __name__ == "__main__":
    unittest.main()
