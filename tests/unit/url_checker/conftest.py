# -*- coding: utf-8 -*-
import asyncio

import pytest

from linkstate.url_checker import TransportOutcome


class StubTransport:
    """
    Transport answering from a route table and recording every request.

    Routes map ``(method, url)`` or ``url`` to a TransportOutcome, an exception
    to raise, or a callable ``(method, url) -> TransportOutcome``.
    """

    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default or TransportOutcome.from_status(200)
        self.calls = []

    async def request(self, method, url):
        self.calls.append((method, url))
        answer = self.routes.get((method, url), self.routes.get(url, self.default))
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(method, url)
        return answer


class GatedTransport(StubTransport):
    """Stub transport that holds every request until ``release`` is set."""

    def __init__(self, routes=None, default=None):
        super().__init__(routes, default)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def request(self, method, url):
        self.started.set()
        await self.release.wait()
        return await super().request(method, url)


@pytest.fixture
def stub_transport():
    return StubTransport


@pytest.fixture
def gated_transport():
    return GatedTransport
