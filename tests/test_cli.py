"""Tests for the pyfragments command line."""

import os
import tempfile
import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from pyfragments.cli.main import app
from pyfragments.exceptions import RemoteError
from pyfragments.services.fragments import (
    BinaryPayload,
    StructuredPayload,
    TextPayload,
)
from pyfragments.services.fragments.models.dto import (
    DeleteConfirmation,
    FragmentMetadata,
    HealthStatus,
)


class CliTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.client = MagicMock()
        patcher = patch("pyfragments.cli.utils.auth.get_client", return_value=self.client)
        patcher.start()
        self.addCleanup(patcher.stop)
        env = patch.dict(os.environ, {"PYFRAGMENTS_TOKEN": "cli-token"})
        env.start()
        self.addCleanup(env.stop)

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(app, list(args), **kwargs)

    def test_list(self):
        self.client.list.return_value = [
            FragmentMetadata(
                id="md1",
                content_type="text/markdown",
                size=4,
                updated=datetime(2024, 5, 1, tzinfo=timezone.utc),
            ),
        ]
        result = self.invoke("fragments", "list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("md1", result.output)
        self.assertIn("html, txt", result.output)
        auth = self.client.list.call_args[0][0]
        self.assertEqual(
            auth.authorization_headers()["Authorization"], "Bearer cli-token"
        )

    def test_list_empty(self):
        self.client.list.return_value = []
        result = self.invoke("fragments", "list")
        self.assertIn("No fragments found", result.output)

    def test_create_text(self):
        self.client.create.return_value = FragmentMetadata(
            id="new1", content_type="text/markdown", size=4
        )
        result = self.invoke(
            "fragments", "create", "--type", "text/markdown", "--text", "# Hi"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("new1", result.output)
        _, payload, content_type = self.client.create.call_args[0]
        self.assertEqual((payload, content_type), ("# Hi", "text/markdown"))

    def test_create_json(self):
        self.client.create.return_value = FragmentMetadata(id="j1")
        result = self.invoke(
            "fragments", "create", "--type", "application/json", "--json", '{"a": 1}'
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.client.create.call_args[0][1], {"a": 1})

    def test_create_needs_one_source(self):
        result = self.invoke("fragments", "create", "--text", "a", "--json", "1")
        self.assertEqual(result.exit_code, 1)
        self.client.create.assert_not_called()

    def test_get_text_and_json(self):
        self.client.read.return_value = TextPayload(
            text="hello there", content_type="text/plain"
        )
        result = self.invoke("fragments", "get", "t1")
        self.assertIn("hello there", result.output)

        self.client.read.return_value = StructuredPayload(
            value={"key": "value"}, content_type="application/json"
        )
        result = self.invoke("fragments", "get", "j1")
        self.assertIn('"key"', result.output)

    def test_get_binary_to_file(self):
        self.client.read.return_value = BinaryPayload(
            data=b"\x89PNG", content_type="image/png"
        )
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "out.png")
            result = self.invoke("fragments", "get", "i1", "--output", target)
            self.assertEqual(result.exit_code, 0, result.output)
            with open(target, "rb") as f:
                self.assertEqual(f.read(), b"\x89PNG")

    def test_convert(self):
        self.client.read_as.return_value = TextPayload(
            text="<h1>Hi</h1>", content_type="text/html"
        )
        result = self.invoke("fragments", "convert", "m1", "html")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<h1>Hi</h1>", result.output)
        self.client.read_as.assert_called_once()
        self.assertEqual(self.client.read_as.call_args[0][1:], ("m1", "html"))

    def test_delete_force(self):
        self.client.delete.return_value = DeleteConfirmation(
            fragment_id="d1", status="ok", body={"status": "ok"}
        )
        result = self.invoke("fragments", "delete", "d1", "--force")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("status: ok", result.output)

    def test_delete_cancelled(self):
        result = self.invoke("fragments", "delete", "d1", input="n\n")
        self.assertIn("Deletion cancelled", result.output)
        self.client.delete.assert_not_called()

    def test_remote_error_exits_1(self):
        self.client.read.side_effect = RemoteError(
            404, "no such fragment", operation="read fragment", fragment_id="x"
        )
        result = self.invoke("fragments", "get", "x")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("no such fragment", result.output)

    def test_health(self):
        self.client.health.return_value = HealthStatus(
            status="ok", details={"version": "1.0"}
        )
        result = self.invoke("health")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Status: ok", result.output)
        self.assertIn("version: 1.0", result.output)

    @patch.dict(os.environ, {"PYFRAGMENTS_TOKEN": ""})
    @patch("pyfragments.cli.utils.auth._get_username", return_value=None)
    def test_not_logged_in(self, _):
        result = self.invoke("fragments", "list")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Not logged in", result.output)


if __name__ == "__main__":
    unittest.main()
