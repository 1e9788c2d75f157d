"""Shared fixtures: settings and clients backed by httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from unbxd_client.client import UnbxdClient
from unbxd_client.config import ClientSettings


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(site_key="demo-site", api_key="secret-key", secure=True)


@pytest.fixture
def client(settings):
    with UnbxdClient(settings) as instance:
        yield instance


@pytest.fixture
def make_client(settings):
    """Build a client whose sync and async HTTP calls go to ``handler``."""

    created: list[tuple[httpx.Client, httpx.AsyncClient]] = []

    def _factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> UnbxdClient:
        transport = httpx.MockTransport(handler)
        sync_client = httpx.Client(transport=transport)
        async_client = httpx.AsyncClient(transport=transport)
        created.append((sync_client, async_client))
        return UnbxdClient(
            kwargs.pop("settings", settings),
            http_client=sync_client,
            async_http_client=async_client,
            **kwargs,
        )

    yield _factory
    for sync_client, _ in created:
        sync_client.close()
