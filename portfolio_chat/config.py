"""
Environment-driven settings for portfolio_chat.

Environment Variables:
    PORTFOLIO_CHAT_API_KEY           Gemini API key (falls back to GEMINI_API_KEY)
    PORTFOLIO_CHAT_MODEL             Model name (default: gemini-pro)
    PORTFOLIO_CHAT_BASE_URL          API base URL
    PORTFOLIO_CHAT_KNOWLEDGE_BASE    Path to the profile JSON
    PORTFOLIO_CHAT_TEST_MODE         1/true/yes/on to always use rule-based answers
    PORTFOLIO_CHAT_PROBE_TIMEOUT     Seconds for the startup probe (default: 5)
    PORTFOLIO_CHAT_REQUEST_TIMEOUT   Seconds for a generation call (default: 10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from portfolio_chat.adapters.gemini import GeminiAdapter
from portfolio_chat.endpoints import DEFAULT_BASE_URL, DEFAULT_MODEL, GenerationEndpoint
from portfolio_chat.health import HttpAvailabilityProbe
from portfolio_chat.knowledge import DEFAULT_KNOWLEDGE_BASE, JsonKnowledgeStore
from portfolio_chat.resolver import ResponseResolver

ENV_PREFIX = "PORTFOLIO_CHAT_"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_float(value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"Expected a number of seconds, got {value!r}") from None
    if parsed <= 0:
        raise ValueError(f"Timeout must be positive, got {value!r}")
    return parsed


@dataclass
class Settings:
    api_key: Optional[str] = field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    knowledge_base: Path = DEFAULT_KNOWLEDGE_BASE
    test_mode: bool = False
    probe_timeout: float = 5.0
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(ENV_PREFIX + name)

        return cls(
            api_key=get("API_KEY") or env.get("GEMINI_API_KEY") or None,
            model=get("MODEL") or DEFAULT_MODEL,
            base_url=get("BASE_URL") or DEFAULT_BASE_URL,
            knowledge_base=Path(get("KNOWLEDGE_BASE") or DEFAULT_KNOWLEDGE_BASE),
            test_mode=_env_bool(get("TEST_MODE")),
            probe_timeout=_env_float(get("PROBE_TIMEOUT"), 5.0),
            request_timeout=_env_float(get("REQUEST_TIMEOUT"), 10.0),
        )

    def endpoint(self) -> GenerationEndpoint:
        return GenerationEndpoint(model=self.model, base_url=self.base_url, api_key=self.api_key)


def build_resolver(settings: Optional[Settings] = None, log: Optional[Any] = None) -> ResponseResolver:
    """Wire the default collaborators. Call ``await resolver.initialize()`` before use."""
    settings = settings or Settings.from_env()
    endpoint = settings.endpoint()
    return ResponseResolver(
        store=JsonKnowledgeStore(settings.knowledge_base),
        probe=HttpAvailabilityProbe(timeout=settings.probe_timeout, log=log),
        backend=GeminiAdapter(endpoint, timeout=settings.request_timeout, log=log),
        endpoint=endpoint,
        test_mode=settings.test_mode,
        log=log,
    )
