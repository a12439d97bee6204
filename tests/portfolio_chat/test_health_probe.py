"""Tests for the HTTP availability probe."""

import httpx
import pytest

import portfolio_chat.health as health_module
from portfolio_chat.endpoints import GenerationEndpoint
from portfolio_chat.health import PROBE_PROMPT, HttpAvailabilityProbe


class ProbeClient:
    response = None
    error = None
    calls = []

    def __init__(self, *args, **kwargs):
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url, json):
        ProbeClient.calls.append({"url": url, "json": json, "timeout": self.kwargs.get("timeout")})
        if ProbeClient.error is not None:
            raise ProbeClient.error
        return ProbeClient.response


@pytest.fixture
def probe_client(monkeypatch):
    ProbeClient.response = None
    ProbeClient.error = None
    ProbeClient.calls = []
    monkeypatch.setattr(health_module.httpx, "AsyncClient", ProbeClient)
    return ProbeClient


def test_probe_init_defaults():
    assert HttpAvailabilityProbe().timeout == 5.0


def test_probe_init_custom_timeout():
    assert HttpAvailabilityProbe(timeout=2.5).timeout == 2.5


@pytest.mark.asyncio
async def test_probe_ok(probe_client, endpoint, mock_logger):
    probe_client.response = httpx.Response(200, json={"candidates": []})
    assert await HttpAvailabilityProbe(timeout=3.0, log=mock_logger).probe(endpoint) is True

    call = probe_client.calls[0]
    assert call["json"] == {"contents": [{"parts": [{"text": PROBE_PROMPT}]}]}
    assert call["timeout"] == 3.0
    mock_logger.info.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [301, 302, 304, 307, 400, 401, 403, 429, 500, 503])
async def test_probe_error_status(probe_client, endpoint, status):
    probe_client.response = httpx.Response(status)
    assert await HttpAvailabilityProbe().probe(endpoint) is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("slow"),
        httpx.ConnectError("refused"),
        httpx.RemoteProtocolError("garbled"),
        RuntimeError("unexpected"),
    ],
)
async def test_probe_never_raises(probe_client, endpoint, error, mock_logger):
    probe_client.error = error
    assert await HttpAvailabilityProbe(log=mock_logger).probe(endpoint) is False
    mock_logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_probe_without_api_key_skips_request(probe_client):
    endpoint = GenerationEndpoint(api_key=None)
    assert await HttpAvailabilityProbe().probe(endpoint) is False
    assert probe_client.calls == []
