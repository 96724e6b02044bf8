"""Shared fixtures for client tests.

No network: every client is wired to an ``httpx.MockTransport`` whose
handler records the requests it sees and answers with a canned response.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from scorecard import ScorecardClient


class FakeApi:
    """MockTransport handler: records requests, replies with ``status``/``payload``.

    A ``str`` payload is sent as text/plain, ``None`` as an empty body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.payload: Any = {"entries": []}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is None:
            return httpx.Response(self.status)
        if isinstance(self.payload, str):
            return httpx.Response(self.status, text=self.payload)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def transport(api) -> httpx.MockTransport:
    return httpx.MockTransport(api)


@pytest.fixture
async def client(transport):
    """A ScorecardClient against the fake API, authenticated with a token."""
    async with ScorecardClient(transport=transport) as client:
        client.auth("Token test-token")
        yield client
