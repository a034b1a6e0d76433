"""
Coroutine facade over FragmentClient.

Each call runs the blocking request in a worker thread, so concurrent calls
proceed independently. Worker threads share only the session's connection
pool; the session stores no cookies. There is no cancellation: a caller
wanting bounded latency wraps calls in ``asyncio.wait_for``; the worker
thread still runs to completion.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional

import requests

from pyfragments.auth import AuthContext
from pyfragments.config import ClientConfig

from .client import FragmentClient
from .domain import FragmentPayload
from .models.dto import DeleteConfirmation, FragmentMetadata, HealthStatus


class AsyncFragmentClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        *,
        client: Optional[FragmentClient] = None,
    ):
        self._client = client or FragmentClient(config, session)

    @property
    def config(self) -> ClientConfig:
        return self._client.config

    async def list(self, auth: AuthContext) -> List[FragmentMetadata]:
        return await asyncio.to_thread(self._client.list, auth)

    async def create(
        self, auth: AuthContext, payload: Any, content_type: str
    ) -> FragmentMetadata:
        return await asyncio.to_thread(self._client.create, auth, payload, content_type)

    async def read(self, auth: AuthContext, fragment_id: str) -> FragmentPayload:
        return await asyncio.to_thread(self._client.read, auth, fragment_id)

    async def update(
        self, auth: AuthContext, fragment_id: str, payload: Any, content_type: str
    ) -> FragmentMetadata:
        return await asyncio.to_thread(
            self._client.update, auth, fragment_id, payload, content_type
        )

    async def delete(self, auth: AuthContext, fragment_id: str) -> DeleteConfirmation:
        return await asyncio.to_thread(self._client.delete, auth, fragment_id)

    async def read_as(
        self,
        auth: AuthContext,
        fragment_id: str,
        target: str,
        *,
        source_type: Optional[str] = None,
    ) -> FragmentPayload:
        def _read_as():
            return self._client.read_as(
                auth, fragment_id, target, source_type=source_type
            )

        return await asyncio.to_thread(_read_as)

    async def health(self) -> HealthStatus:
        return await asyncio.to_thread(self._client.health)
