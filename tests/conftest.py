from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

BASE_URL = "http://livy.example.com:8998"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    @classmethod
    def json(cls, payload: Any, status_code: int = 200) -> "Recorder":
        return cls(lambda request: httpx.Response(status_code, json=payload))

    @classmethod
    def raw(cls, content: bytes, status_code: int = 200) -> "Recorder":
        return cls(lambda request: httpx.Response(status_code, content=content))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mock_server() -> type[Recorder]:
    """The Recorder class: build one per test with mock_server(handler), .json() or .raw()."""
    return Recorder
