from __future__ import annotations

import json
import random
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from algolia_search import RequestDispatcher


class RecordingHandler:
    """요청을 기록하고 고정 응답을 돌려주는 MockTransport 핸들러."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_path(self) -> str:
        return self.last.url.raw_path.decode("ascii")

    def last_json(self) -> Any:
        return json.loads(self.last.content.decode("utf-8"))


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def make_dispatcher() -> Iterator[Callable[..., RequestDispatcher]]:
    created: list[RequestDispatcher] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        hosts: list[str] | None = None,
        **overrides: Any,
    ) -> RequestDispatcher:
        config = {
            "application_id": "app",
            "api_key": "search-key",
            "hosts": hosts if hosts is not None else ["h1.example.test"],
            **overrides,
        }
        dispatcher = RequestDispatcher(
            config,
            transport=httpx.MockTransport(handler),
            rng=random.Random(7),
        )
        created.append(dispatcher)
        return dispatcher

    yield factory

    for dispatcher in created:
        dispatcher.close()
