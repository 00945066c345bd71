import asyncio
import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from amasign.exceptions import (
    ProtocolViolation, RemoteRejected, TimeoutError, TransportError,
)
from amasign.providers.http import HTTPProvider

from conftest import ScriptedProvider, error_response, tool_response


def run(coro):
    return asyncio.run(coro)


def test_envelope_shape_and_ids():
    provider = ScriptedProvider([tool_response({"ok": 1}), tool_response({"ok": 2})])
    run(provider.call_tool("get_chain_stats", {}))
    run(provider.call_tool("get_validators", {}))

    first, second = provider.sent
    assert first == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "tools/call",
        "params": {"name": "get_chain_stats", "arguments": {}},
    }
    assert second["id"] == 2


def test_request_ids_are_per_provider():
    a = ScriptedProvider([tool_response({})])
    b = ScriptedProvider([tool_response({})])
    run(a.call_tool("x", {}))
    run(b.call_tool("x", {}))
    assert a.sent[0]["id"] == b.sent[0]["id"] == 1


def test_tool_text_is_decoded():
    provider = ScriptedProvider([tool_response({"height": 7}), tool_response("not json")])
    assert run(provider.call_tool("get_chain_stats", {})) == {"height": 7}
    assert run(provider.call_tool("get_chain_stats", {})) == "not json"


def test_error_member_raises_remote_rejected():
    provider = ScriptedProvider([error_response(code=-32602, message="insufficient_balance")])
    with pytest.raises(RemoteRejected) as info:
        run(provider.call_tool("create_transaction", {}))
    assert info.value.detail == {"code": -32602, "message": "insufficient_balance"}
    assert info.value.code == -32602


def test_tool_is_error_raises_remote_rejected():
    response = tool_response("boom")
    response["result"]["isError"] = True
    provider = ScriptedProvider([response])
    with pytest.raises(RemoteRejected) as info:
        run(provider.call_tool("submit_transaction", {}))
    assert info.value.detail == "boom"


@pytest.mark.parametrize("response", [
    {"jsonrpc": "2.0", "id": 1},
    {"jsonrpc": "2.0", "id": 1, "result": {}},
    {"jsonrpc": "2.0", "id": 1, "result": {"content": []}},
    {"jsonrpc": "2.0", "id": 1, "result": {"content": [{"type": "text"}]}},
])
def test_malformed_result_raises_protocol_violation(response):
    provider = ScriptedProvider([response])
    with pytest.raises(ProtocolViolation):
        run(provider.call_tool("create_transaction", {}))


async def _serve(handler, func, timeout=5):
    app = web.Application()
    app.router.add_post("/", handler)
    server = TestServer(app)
    await server.start_server()
    try:
        provider = HTTPProvider(endpoint=str(server.make_url("/")), timeout=timeout)
        async with provider:
            return await func(provider)
    finally:
        await server.close()


def test_http_provider_posts_json():
    received = []

    async def handler(request):
        received.append(await request.json())
        return web.json_response(tool_response({"blob": "b"}))

    async def call(provider):
        return await provider.call_tool("create_transaction", {"signer": "s"})

    assert run(_serve(handler, call)) == {"blob": "b"}
    assert received[0]["method"] == "tools/call"
    assert received[0]["params"]["arguments"] == {"signer": "s"}


def test_http_provider_status_error():
    async def handler(request):
        return web.Response(status=502, text="bad gateway")

    async def call(provider):
        return await provider.call_tool("get_chain_stats", {})

    with pytest.raises(TransportError) as info:
        run(_serve(handler, call))
    assert info.value.code == 502


def test_http_provider_invalid_json():
    async def handler(request):
        return web.Response(text="<html>")

    async def call(provider):
        return await provider.call_tool("get_chain_stats", {})

    with pytest.raises(ProtocolViolation):
        run(_serve(handler, call))


def test_http_provider_timeout():
    async def handler(request):
        await asyncio.sleep(1)
        return web.json_response(tool_response({}))

    async def call(provider):
        return await provider.call_tool("get_chain_stats", {})

    with pytest.raises(TimeoutError):
        run(_serve(handler, call, timeout=0.2))


def test_http_provider_connection_refused():
    async def call():
        async with HTTPProvider(endpoint="http://127.0.0.1:1", timeout=2) as provider:
            await provider.call_tool("get_chain_stats", {})

    with pytest.raises(TransportError):
        run(call())


def test_http_provider_context_manager():
    async def call():
        provider = HTTPProvider(endpoint="http://127.0.0.1:1/")
        assert provider.endpoint == "http://127.0.0.1:1"
        async with provider:
            assert provider.is_connected
        return provider.is_connected

    assert run(call()) is False


def test_http_provider_non_utf8_body():
    async def handler(request):
        return web.Response(body=b'{"x":"\xff\xfe"}', content_type="application/json")

    async def call(provider):
        return await provider.call_tool("get_chain_stats", {})

    with pytest.raises(ProtocolViolation):
        run(_serve(handler, call))
