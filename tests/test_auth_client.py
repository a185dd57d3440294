"""
Tests for AuthApiClient using httpx.MockTransport.
"""

import json

import httpx
import pytest

from app.config.settings import global_settings
from app.core.auth import AuthApiClient, close_auth_client, get_auth_client
from app.core.auth import client as client_module

from conftest import run


ENVELOPE = {
    "version": 1,
    "componentName": "MA",
    "interface": {"interfaceName": "check", "para": {"id": "u1", "skey": "s1"}},
}


def client_with(handler, **kwargs):
    return AuthApiClient(url="http://auth.test/mina_auth/", transport=httpx.MockTransport(handler), **kwargs)


async def invoke_once(client, envelope=ENVELOPE):
    async with client:
        return await client.invoke(envelope)


class TestInvoke:
    def test_posts_json_envelope(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"returnCode": 0, "returnData": {}})

        status, body = run(invoke_once(client_with(handler)))

        assert status == 200
        assert body == {"returnCode": 0, "returnData": {}}
        [request] = seen
        assert request.method == "POST"
        assert str(request.url) == "http://auth.test/mina_auth/"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == ENVELOPE

    def test_non_json_body_returned_as_text(self):
        def handler(request):
            return httpx.Response(200, text="<html>bad gateway</html>")

        status, body = run(invoke_once(client_with(handler)))
        assert status == 200
        assert body == "<html>bad gateway</html>"

    def test_error_status_is_returned_not_raised(self):
        def handler(request):
            return httpx.Response(503, json={"detail": "down"})

        status, body = run(invoke_once(client_with(handler)))
        assert status == 503
        assert body == {"detail": "down"}

    def test_transport_errors_propagate(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            run(invoke_once(client_with(handler)))

    def test_defaults_from_settings(self):
        client = AuthApiClient()
        assert client.url == global_settings.auth.url
        assert client.timeout == global_settings.auth.timeout

    def test_explicit_timeout(self):
        assert AuthApiClient(url="http://auth.test", timeout=2.5).timeout == 2.5

    def test_reuses_connection_pool_across_calls(self):
        def handler(request):
            return httpx.Response(200, json={"returnCode": 0})

        client = client_with(handler)

        async def twice():
            async with client:
                await client.invoke(ENVELOPE)
                first = client.client
                await client.invoke(ENVELOPE)
                assert client.client is first
            return first

        first = run(twice())
        assert first.is_closed
        assert client._client is None


class TestSharedClient:
    def test_get_auth_client_is_shared(self, monkeypatch):
        monkeypatch.setattr(client_module, "_auth_client", None)
        assert get_auth_client() is get_auth_client()

    def test_close_auth_client_resets_shared_instance(self, monkeypatch):
        monkeypatch.setattr(client_module, "_auth_client", None)
        first = get_auth_client()
        run(close_auth_client())
        assert client_module._auth_client is None
        assert get_auth_client() is not first
