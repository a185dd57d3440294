"""
Pytest configuration and shared fixtures for the auth adapter tests
"""
import asyncio
import json
import sys
from pathlib import Path

import pytest
from starlette.datastructures import Headers
from starlette.requests import Request

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.scheme.base_responses import ResponseSink


class FakeAuthClient:
    """Records every envelope and answers with a canned (status, body) reply."""

    def __init__(self, status=200, body=None, error=None):
        self.status = status
        self.body = body
        self.error = error
        self.calls = []

    async def invoke(self, envelope):
        self.calls.append(envelope)
        if self.error is not None:
            raise self.error
        return self.status, self.body


class CallbackRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, err, result=None):
        self.calls.append((err, result))


def make_request(headers=None, path="/login"):
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "query_string": b"",
        "headers": Headers(headers=headers or {}).raw,
    }
    return Request(scope)


def sink_json(sink):
    return json.loads(sink.response.body)


def run(awaitable):
    async def _wrap():
        return await awaitable
    return asyncio.run(_wrap())


@pytest.fixture
def sink():
    return ResponseSink()


@pytest.fixture
def recorder():
    return CallbackRecorder()
