"""ResponseResolver: answers chat messages for the portfolio widget.

Resolution order for each message:
1. Knowledge base not loaded -> "still loading" result (success=False)
2. Test mode, or the startup probe failed -> FallbackMatcher
3. Otherwise -> remote generation, with FallbackMatcher on any failure

A failed remote call only affects the request that made it. The probe
result is recorded once by initialize() and never revoked afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from portfolio_chat._logging import get_component_logger
from portfolio_chat.adapters.base import GenerationBackend
from portfolio_chat.endpoints import GenerationEndpoint
from portfolio_chat.fallback import FallbackMatcher
from portfolio_chat.health import AvailabilityProbe
from portfolio_chat.knowledge import KnowledgeStore
from portfolio_chat.prompts import build_prompt, get_suggested_questions
from portfolio_chat.types import (
    ChatResult,
    GenerationConfig,
    GenerationError,
    LoadError,
    Profile,
    ResponseSource,
)

NOT_READY_MESSAGE = "Still loading my knowledge base. Give me a moment!"


@dataclass
class ResolverState:
    knowledge_base: Optional[Profile] = None
    remote_available: bool = False


class ResponseResolver:
    """One instance per session/context; owns its own ResolverState."""

    def __init__(
        self,
        store: KnowledgeStore,
        probe: AvailabilityProbe,
        backend: GenerationBackend,
        endpoint: GenerationEndpoint,
        test_mode: bool = False,
        matcher: Optional[FallbackMatcher] = None,
        generation_config: Optional[GenerationConfig] = None,
        log: Optional[Any] = None,
    ):
        self.store = store
        self.probe = probe
        self.backend = backend
        self.endpoint = endpoint
        self.test_mode = test_mode
        self.matcher = matcher or FallbackMatcher()
        self.generation_config = generation_config or GenerationConfig()
        self.logger = get_component_logger("ResponseResolver", log)
        self._state = ResolverState()
        self._load_attempted = False

    @classmethod
    async def create(cls, *args, **kwargs) -> "ResponseResolver":
        resolver = cls(*args, **kwargs)
        await resolver.initialize()
        return resolver

    @property
    def knowledge_base(self) -> Optional[Profile]:
        return self._state.knowledge_base

    @property
    def remote_available(self) -> bool:
        return self._state.remote_available

    @property
    def is_ready(self) -> bool:
        return self._state.knowledge_base is not None

    async def initialize(self) -> None:
        """Load the knowledge base, then probe the remote service.

        Runs once. A failed load is final for this instance and skips the probe.
        """
        if self._load_attempted:
            return
        self._load_attempted = True

        try:
            profile = self.store.load()
        except LoadError as exc:
            self.logger.error("knowledge_base_load_failed", error=str(exc))
            return

        self._state.knowledge_base = profile
        self.logger.info("knowledge_base_loaded", name=profile.name)

        if self.test_mode:
            self.logger.info("remote_disabled", reason="test_mode")
            return

        if await self.probe.probe(self.endpoint):
            self._state.remote_available = True
            self.logger.info("remote_available", model=self.endpoint.model)
        else:
            self.logger.warning("remote_unavailable", fallback="rule_based")

    async def resolve(self, user_message: str) -> ChatResult:
        profile = self._state.knowledge_base
        if profile is None:
            return ChatResult(
                success=False,
                message=NOT_READY_MESSAGE,
                source=ResponseSource.NOT_READY,
            )

        if self.test_mode or not self._state.remote_available:
            return self.matcher.resolve(user_message)

        prompt = build_prompt(profile, user_message)
        try:
            text = await self.backend.generate(prompt, self.generation_config)
        except GenerationError as exc:
            self.logger.warning(
                "remote_generation_failed",
                category=exc.category.value,
                error=exc.message,
            )
            return self.matcher.resolve(user_message)
        except Exception as exc:
            self.logger.warning(
                "remote_generation_failed",
                category="unknown",
                error=f"{type(exc).__name__}: {exc}",
            )
            return self.matcher.resolve(user_message)

        if not text or not text.strip():
            self.logger.warning("remote_generation_failed", category="parse", error="empty text")
            return self.matcher.resolve(user_message)

        return ChatResult(success=True, message=text, source=ResponseSource.REMOTE)

    def get_suggested_questions(self) -> List[str]:
        return get_suggested_questions()
