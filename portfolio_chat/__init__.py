from .types import (
    ChatResult,
    ErrorCategory,
    GenerationConfig,
    GenerationError,
    LoadError,
    Profile,
    ProfileMetrics,
    ResponseSource,
)
from .endpoints import GenerationEndpoint
from .knowledge import KnowledgeStore, JsonKnowledgeStore
from .health import AvailabilityProbe, HttpAvailabilityProbe
from .adapters import GenerationBackend, GeminiAdapter
from .fallback import FallbackMatcher, MatchRule, DEFAULT_RULES
from .resolver import ResponseResolver, ResolverState
from .config import Settings, build_resolver

__version__ = "0.1.0"

__all__ = [
    # Types
    "ChatResult",
    "ErrorCategory",
    "GenerationConfig",
    "GenerationError",
    "LoadError",
    "Profile",
    "ProfileMetrics",
    "ResponseSource",
    # Endpoint
    "GenerationEndpoint",
    # Knowledge
    "KnowledgeStore",
    "JsonKnowledgeStore",
    # Health
    "AvailabilityProbe",
    "HttpAvailabilityProbe",
    # Backends
    "GenerationBackend",
    "GeminiAdapter",
    # Fallback
    "FallbackMatcher",
    "MatchRule",
    "DEFAULT_RULES",
    # Resolver
    "ResponseResolver",
    "ResolverState",
    "build_resolver",
    "Settings",
]
