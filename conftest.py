"""
Root conftest to ensure proper import paths.

This file exists at the project root so that the project directory is on
sys.path before pytest starts collecting tests, even when the package has
not been installed with ``pip install -e .``.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

# Ensure project root is in Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from portfolio_chat.adapters.base import GenerationBackend  # noqa: E402
from portfolio_chat.endpoints import GenerationEndpoint  # noqa: E402
from portfolio_chat.health import AvailabilityProbe  # noqa: E402
from portfolio_chat.knowledge import KnowledgeStore  # noqa: E402
from portfolio_chat.types import (  # noqa: E402
    GenerationConfig,
    LoadError,
    Profile,
    ProfileMetrics,
)


# ============================================================================
# Shared Test Fixtures
# ============================================================================

@pytest.fixture
def anyio_backend():
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def mock_logger():
    """Create a mock structlog-style logger.

    The logger supports:
    - bind(**kwargs) -> logger (returns itself with context)
    - debug/info/warning/error/critical methods
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


SAMPLE_DOCUMENT = {
    "profile": {
        "name": "Omar Alieh",
        "current_role": "Digital Transformation Leader at Odoo Middle East",
    },
    "key_metrics": {
        "projects_delivered": "32+",
        "client_satisfaction": "96%",
        "sales_enabled": "250K+",
        "team_size": 10,
    },
}


@pytest.fixture
def sample_document():
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def profile():
    return Profile(
        name="Omar Alieh",
        current_role="Digital Transformation Leader at Odoo Middle East",
        metrics=ProfileMetrics(
            projects_delivered="32+",
            client_satisfaction="96%",
            sales_enabled="250K+",
            team_size=10,
        ),
    )


@pytest.fixture
def knowledge_file(tmp_path, sample_document):
    path = tmp_path / "knowledge_base.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def endpoint():
    return GenerationEndpoint(model="gemini-pro", base_url="https://gemini.test/v1beta", api_key="test-key")


# ============================================================================
# Collaborator stubs
# ============================================================================

class StaticStore(KnowledgeStore):
    def __init__(self, profile: Optional[Profile] = None, error: Optional[Exception] = None):
        self.profile = profile
        self.error = error
        self.calls = 0

    def load(self) -> Profile:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.profile


class StaticProbe(AvailabilityProbe):
    def __init__(self, available: bool):
        self.available = available
        self.calls = 0

    async def probe(self, endpoint: GenerationEndpoint) -> bool:
        self.calls += 1
        return self.available


class ScriptedBackend(GenerationBackend):
    """Returns ``reply`` or raises ``error``; records every prompt it receives."""

    def __init__(self, reply: str = "", error: Optional[BaseException] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []
        self.configs: List[GenerationConfig] = []

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def static_store(profile):
    return StaticStore(profile)


@pytest.fixture
def failing_store():
    return StaticStore(error=LoadError("Knowledge base not found: missing.json"))


@pytest.fixture
def make_resolver(profile, endpoint, mock_logger):
    """Build an uninitialized ResponseResolver around stub collaborators."""
    from portfolio_chat.resolver import ResponseResolver

    def _make(available=True, backend=None, store=None, test_mode=False, probe=None):
        return ResponseResolver(
            store=store or StaticStore(profile),
            probe=probe or StaticProbe(available),
            backend=backend or ScriptedBackend(reply="Hello there."),
            endpoint=endpoint,
            test_mode=test_mode,
            log=mock_logger,
        )

    return _make


@pytest.fixture
def scripted_backend():
    return ScriptedBackend


@pytest.fixture
def static_probe():
    return StaticProbe
