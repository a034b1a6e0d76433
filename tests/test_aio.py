"""Tests for the coroutine facade."""

import asyncio
import unittest
from unittest.mock import MagicMock

from pyfragments.auth import BearerTokenAuth
from pyfragments.exceptions import RemoteError
from pyfragments.services.fragments import AsyncFragmentClient, TextPayload
from pyfragments.services.fragments.models.dto import (
    DeleteConfirmation,
    FragmentMetadata,
)


class AsyncFragmentClientTest(unittest.TestCase):
    def setUp(self):
        self.sync = MagicMock()
        self.client = AsyncFragmentClient(client=self.sync)
        self.auth = BearerTokenAuth("t")

    def test_operations_delegate(self):
        self.sync.list.return_value = [FragmentMetadata(id="a")]
        self.sync.create.return_value = FragmentMetadata(id="b")
        self.sync.read.return_value = TextPayload(text="x", content_type="text/plain")
        self.sync.delete.return_value = DeleteConfirmation(fragment_id="b", status="ok")

        async def scenario():
            listed = await self.client.list(self.auth)
            created = await self.client.create(self.auth, "x", "text/plain")
            payload = await self.client.read(self.auth, created.id)
            deleted = await self.client.delete(self.auth, created.id)
            return listed, created, payload, deleted

        listed, created, payload, deleted = asyncio.run(scenario())
        self.assertEqual(listed, [FragmentMetadata(id="a")])
        self.assertEqual(created.id, "b")
        self.assertEqual(payload.text, "x")
        self.assertEqual(deleted.status, "ok")
        self.sync.create.assert_called_once_with(self.auth, "x", "text/plain")

    def test_read_as_forwards_source_type(self):
        self.sync.read_as.return_value = TextPayload(text="t", content_type="text/plain")
        asyncio.run(
            self.client.read_as(self.auth, "m", "txt", source_type="text/markdown")
        )
        self.sync.read_as.assert_called_once_with(
            self.auth, "m", "txt", source_type="text/markdown"
        )

    def test_concurrent_calls(self):
        self.sync.read.side_effect = lambda auth, fid: TextPayload(
            text=fid, content_type="text/plain"
        )

        async def scenario():
            return await asyncio.gather(
                *(self.client.read(self.auth, str(i)) for i in range(5))
            )

        results = asyncio.run(scenario())
        self.assertEqual([p.text for p in results], ["0", "1", "2", "3", "4"])

    def test_errors_propagate(self):
        self.sync.update.side_effect = RemoteError(400, "bad type")

        with self.assertRaises(RemoteError):
            asyncio.run(self.client.update(self.auth, "u", "x", "text/plain"))


if __name__ == "__main__":
    unittest.main()
