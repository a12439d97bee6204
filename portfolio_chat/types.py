from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class ErrorCategory(str, Enum):
    TIMEOUT = "timeout"
    BACKEND = "backend"
    CONNECTION = "connection"
    PARSE = "parse"
    UNKNOWN = "unknown"


class ResponseSource(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"
    NOT_READY = "not_ready"


class LoadError(Exception):
    """Knowledge base is missing or malformed."""


@dataclass
class GenerationError(Exception):
    category: ErrorCategory
    message: str
    raw_backend: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


@dataclass(frozen=True)
class ProfileMetrics:
    projects_delivered: Union[int, float, str]
    client_satisfaction: str
    sales_enabled: Union[int, float, str]
    team_size: Union[int, float, str]


@dataclass(frozen=True)
class Profile:
    name: str
    current_role: str
    metrics: ProfileMetrics

    @property
    def first_name(self) -> str:
        return self.name.split()[0] if self.name.strip() else self.name


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.7
    max_output_tokens: int = 300


@dataclass(frozen=True)
class ChatResult:
    """
    Output contract of every resolution path:
      - success is False only while the knowledge base is not loaded
      - source records which path produced the message
    """
    success: bool
    message: str
    source: ResponseSource = ResponseSource.FALLBACK

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "message": self.message}
