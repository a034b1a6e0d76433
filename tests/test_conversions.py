"""Tests for the conversion catalog."""

import unittest

from pyfragments.services.fragments.conversions import (
    can_convert,
    conversions_for,
    normalize_target,
)


class ConversionsTest(unittest.TestCase):
    def test_catalog(self):
        self.assertEqual(conversions_for("text/markdown"), ("html", "txt"))
        self.assertEqual(conversions_for("text/html"), ("txt",))
        self.assertEqual(conversions_for("application/json"), ("txt",))
        self.assertEqual(conversions_for("image/png"), ("jpg", "webp", "avif"))
        self.assertEqual(conversions_for("image/jpeg"), ("png", "webp", "avif"))
        self.assertEqual(conversions_for("image/webp"), ("png", "jpg", "avif"))
        self.assertEqual(conversions_for("image/avif"), ("png", "jpg", "webp"))

    def test_no_conversions(self):
        self.assertEqual(conversions_for("text/plain"), ())
        self.assertEqual(conversions_for("application/x-unknown"), ())
        self.assertEqual(conversions_for("image/gif"), ())
        self.assertEqual(conversions_for(""), ())
        self.assertEqual(conversions_for(None), ())

    def test_parameters_are_ignored(self):
        self.assertEqual(
            conversions_for("text/markdown; charset=utf-8"), ("html", "txt")
        )

    def test_never_offers_self_conversion(self):
        own = {
            "text/markdown": "md",
            "text/html": "html",
            "application/json": "json",
            "image/png": "png",
            "image/jpeg": "jpg",
            "image/webp": "webp",
            "image/avif": "avif",
        }
        for content_type, ext in own.items():
            self.assertNotIn(ext, conversions_for(content_type))

    def test_targets(self):
        self.assertEqual(normalize_target(".PNG"), "png")
        self.assertTrue(can_convert("text/markdown", "HTML"))
        self.assertFalse(can_convert("text/markdown", "png"))


if __name__ == "__main__":
    unittest.main()
