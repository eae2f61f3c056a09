"""Shared fixtures: tokens files and a mocked chat-completion endpoint."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

PIRATE_REPLY = "Arrr! The Eiffel Tower be the finest landmark in all of Paris, matey!"


def completion_body(text: str | None, model: str = "gpt-4o") -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


class RecordingEndpoint:
    """httpx handler that records requests and answers with a fixed response."""

    def __init__(self, status_code: int = 200, body: dict[str, Any] | None = None):
        self.status_code = status_code
        self.body = body if body is not None else completion_body(PIRATE_REPLY)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def endpoint() -> RecordingEndpoint:
    return RecordingEndpoint()


@pytest.fixture
def unauthorized_endpoint() -> RecordingEndpoint:
    return RecordingEndpoint(
        status_code=401,
        body={"error": {"message": "Bad credentials", "type": "invalid_request_error", "code": "unauthorized"}},
    )


@pytest.fixture
def write_tokens(tmp_path) -> Callable[[str], str]:
    def _write(content: str, name: str = ".tokens.yaml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def tokens() -> dict[str, Any]:
    return {"copilot_token": "ghu_test_token", "api_url": "https://api.githubcopilot.com"}
