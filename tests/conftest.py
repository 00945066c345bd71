import json

import pytest

from amasign.exceptions import AmadeusError
from amasign.providers.base import BaseProvider
from amasign.utils.encoding import encode_base58


def tool_response(payload, request_id=1):
    """JSON-RPC response whose first text content is ``payload``."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "result": {"content": [{"type": "text", "text": text}]},
    }


def error_response(code=-32602, message="validation_failed", request_id=1):
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


class ScriptedProvider(BaseProvider):
    """Provider that replays canned responses and records requests."""

    def __init__(self, responses):
        super().__init__()
        self.responses = list(responses)
        self.sent = []
        self.connected = False

    async def send(self, payload):
        self.sent.append(payload)
        if not self.responses:
            raise AssertionError("unexpected request")
        response = self.responses.pop(0)
        if isinstance(response, AmadeusError):
            raise response
        return response

    async def connect(self):
        self.connected = True

    async def disconnect(self):
        self.connected = False

    @property
    def is_connected(self):
        return self.connected


@pytest.fixture
def seed_bytes():
    return bytes(range(1, 65))


@pytest.fixture
def seed(seed_bytes):
    return encode_base58(seed_bytes)
