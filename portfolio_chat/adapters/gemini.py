"""
Gemini generateContent adapter.

Request:
    {"contents": [{"parts": [{"text": prompt}]}],
     "generationConfig": {"temperature": ..., "maxOutputTokens": ...}}

Expected response:
    {"candidates": [{"content": {"parts": [{"text": answer}]}}]}

Anything else is a PARSE error. No retries: a failed call is reported once
and the caller decides what to do with it.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx

from portfolio_chat._logging import get_component_logger
from portfolio_chat.adapters.base import GenerationBackend
from portfolio_chat.endpoints import GenerationEndpoint
from portfolio_chat.telemetry import span
from portfolio_chat.types import ErrorCategory, GenerationConfig, GenerationError


def _categorize_exception(exc: Exception) -> GenerationError:
    name = exc.__class__.__name__
    if "Timeout" in name:
        return GenerationError(ErrorCategory.TIMEOUT, str(exc) or name)
    if "Network" in name or "Connect" in name:
        return GenerationError(ErrorCategory.CONNECTION, str(exc) or name)
    return GenerationError(ErrorCategory.BACKEND, str(exc) or name)


def extract_candidate_text(payload: Any) -> Optional[str]:
    """Return candidates[0].content.parts[0].text, or None if the shape differs."""
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


def build_payload(prompt: str, config: Optional[GenerationConfig] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
    if config is not None:
        payload["generationConfig"] = {
            "temperature": config.temperature,
            "maxOutputTokens": config.max_output_tokens,
        }
    return payload


class GeminiAdapter(GenerationBackend):
    def __init__(
        self,
        endpoint: GenerationEndpoint,
        timeout: float = 10.0,
        log: Optional[Any] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.logger = get_component_logger("GeminiAdapter", log)

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        payload = build_payload(prompt, config)

        async with span("gemini.generate", logger=self.logger, model=self.endpoint.model):
            try:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 5.0)),
                    headers=self.endpoint.headers(),
                ) as client:
                    resp = await client.post(self.endpoint.url, json=payload)
            except httpx.HTTPError as exc:
                raise _categorize_exception(exc) from exc

        if not resp.is_success:
            raise GenerationError(
                ErrorCategory.BACKEND,
                f"HTTP {resp.status_code}",
                raw_backend=resp.text,
            )

        try:
            data = resp.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise GenerationError(ErrorCategory.PARSE, str(exc), raw_backend=resp.text) from exc

        text = extract_candidate_text(data)
        if text is None or not text.strip():
            raise GenerationError(
                ErrorCategory.PARSE,
                "response has no candidates[0].content.parts[0].text",
                raw_backend=data,
            )
        return text.strip()
