from __future__ import annotations

from abc import ABC, abstractmethod

from portfolio_chat.types import GenerationConfig


class GenerationBackend(ABC):
    @abstractmethod
    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        """Return the generated text or raise GenerationError."""
        ...
