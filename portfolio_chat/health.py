from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from portfolio_chat._logging import get_component_logger
from portfolio_chat.adapters.gemini import build_payload
from portfolio_chat.endpoints import GenerationEndpoint
from portfolio_chat.telemetry import span

PROBE_PROMPT = "test"


class AvailabilityProbe(ABC):
    @abstractmethod
    async def probe(self, endpoint: GenerationEndpoint) -> bool:
        ...


class HttpAvailabilityProbe(AvailabilityProbe):
    """
    Sends a trivial generateContent request and reports whether it succeeded.

    A True result is only a hint: the service can go away between the probe
    and the first real request. Never raises.
    """

    def __init__(self, timeout: float = 5.0, log: Optional[Any] = None):
        self.timeout = timeout
        self.logger = get_component_logger("AvailabilityProbe", log)

    async def probe(self, endpoint: GenerationEndpoint) -> bool:
        if not endpoint.api_key:
            self.logger.warning("availability_probe_failed", detail="no api key configured")
            return False

        try:
            async with span("availability.probe", logger=self.logger, model=endpoint.model):
                async with httpx.AsyncClient(
                    timeout=self.timeout, headers=endpoint.headers()
                ) as client:
                    resp = await client.post(endpoint.url, json=build_payload(PROBE_PROMPT))
        except httpx.TimeoutException:
            self.logger.warning("availability_probe_failed", detail="timeout")
            return False
        except httpx.ConnectError as exc:
            self.logger.warning("availability_probe_failed", detail=f"connection error: {exc}")
            return False
        except Exception as exc:
            self.logger.warning(
                "availability_probe_failed",
                detail=f"probe error: {type(exc).__name__}: {exc}",
            )
            return False

        if resp.is_success:
            self.logger.info("availability_probe_ok", detail=f"HTTP {resp.status_code}")
            return True

        self.logger.warning("availability_probe_failed", detail=f"HTTP {resp.status_code}")
        return False
