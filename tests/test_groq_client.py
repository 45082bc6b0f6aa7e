"""
Tests for the Groq client: request shape and failure classification,
exercised through the real OpenAI SDK over an httpx mock transport.
"""

import asyncio
import json

import httpx
import pytest

from config.config import ProviderConfig
from debate_simulator.llm_clients.errors import (
    MalformedResponseError,
    ServerRejectionError,
    TransportError
)
from debate_simulator.llm_clients.groq_client import GroqClient


TEST_CONFIG = ProviderConfig(
    name="Groq",
    api_key="test-key",
    base_url="https://api.groq.test/openai/v1",
    temperature=0.7
)


def _completion(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama-3.3-70b-versatile",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop"
            }
        ]
    }


def _client(handler, timeout=5.0):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GroqClient(config=TEST_CONFIG, timeout=timeout, http_client=http_client)


@pytest.mark.asyncio
async def test_generate_sends_chat_completion_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion("A fine argument."))

    client = _client(handler)
    text = await client.generate(
        model_id="llama-3.3-70b-versatile",
        prompt="Debate Topic: tea",
        system_prompt="You are a skilled debater.",
        max_tokens=150
    )
    await client.close()

    assert text == "A fine argument."
    assert seen["url"] == "https://api.groq.test/openai/v1/chat/completions"
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"]["model"] == "llama-3.3-70b-versatile"
    assert seen["body"]["messages"] == [
        {"role": "system", "content": "You are a skilled debater."},
        {"role": "user", "content": "Debate Topic: tea"},
    ]
    assert seen["body"]["max_tokens"] == 150
    assert seen["body"]["temperature"] == 0.7


@pytest.mark.asyncio
@pytest.mark.parametrize("status, eligible", [
    (404, True),
    (429, True),
    (503, True),
    (400, False),
    (401, False),
    (500, False),
])
async def test_error_status_becomes_server_rejection(status, eligible):
    def handler(request):
        return httpx.Response(status, json={"error": {"message": "model trouble"}})

    client = _client(handler)
    with pytest.raises(ServerRejectionError) as exc_info:
        await client.generate(model_id="gemma2-9b-it", prompt="p")

    error = exc_info.value
    assert error.status_code == status
    assert error.fallback_eligible is eligible
    assert error.model_id == "gemma2-9b-it"
    assert "model trouble" in error.body
    assert error.message.startswith(f"Groq API error (gemma2-9b-it): {status}")


@pytest.mark.asyncio
async def test_sdk_does_not_retry_on_its_own():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503, text="overloaded")

    client = _client(handler)
    with pytest.raises(ServerRejectionError):
        await client.generate(model_id="llama3-70b-8192", prompt="p")

    assert len(calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("exc", [
    httpx.ConnectError("connection refused"),
    httpx.ReadTimeout("read timed out"),
    httpx.RemoteProtocolError("connection reset"),
])
async def test_network_failure_becomes_transport_error(exc):
    def handler(request):
        raise exc

    client = _client(handler)
    with pytest.raises(TransportError):
        await client.generate(model_id="llama3-70b-8192", prompt="p")


@pytest.mark.asyncio
async def test_wall_clock_timeout_becomes_transport_error():
    async def handler(request):
        await asyncio.sleep(1)
        return httpx.Response(200, json=_completion("too late"))

    client = _client(handler, timeout=0.05)
    with pytest.raises(TransportError) as exc_info:
        await client.generate(model_id="llama3-70b-8192", prompt="p")

    assert "timed out" in exc_info.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    json.dumps(_completion(None)),
    json.dumps({**_completion("x"), "choices": []}),
    "<html>gateway</html>",
])
async def test_unusable_success_body_is_malformed(body):
    def handler(request):
        return httpx.Response(200, content=body.encode(), headers={"content-type": "application/json"})

    client = _client(handler)
    with pytest.raises(MalformedResponseError) as exc_info:
        await client.generate(model_id="llama3-70b-8192", prompt="p")

    assert exc_info.value.message.startswith("Invalid response from Groq API:")


def test_missing_api_key_is_rejected():
    config = ProviderConfig(name="Groq", api_key=None, base_url=TEST_CONFIG.base_url)
    with pytest.raises(ValueError, match="Groq API key not configured"):
        GroqClient(config=config)
