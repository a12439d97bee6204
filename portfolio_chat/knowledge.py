"""
JSON knowledge base loader.

The knowledge base is the profile document the portfolio site ships:

    {
      "profile": {"name": ..., "current_role": ...},
      "key_metrics": {"projects_delivered": ..., "client_satisfaction": ...,
                      "sales_enabled": ..., "team_size": ...}
    }

Any other sections in the document are ignored.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from portfolio_chat.types import LoadError, Profile, ProfileMetrics

DEFAULT_KNOWLEDGE_BASE = Path(__file__).parent / "data" / "knowledge_base.json"

_METRIC_FIELDS = ("projects_delivered", "client_satisfaction", "sales_enabled", "team_size")


class KnowledgeStore(ABC):
    @abstractmethod
    def load(self) -> Profile:
        ...


class JsonKnowledgeStore(KnowledgeStore):
    """Loads the profile from a JSON file on disk."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else DEFAULT_KNOWLEDGE_BASE

    def load(self) -> Profile:
        if not self.path.exists():
            raise LoadError(f"Knowledge base not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as exc:
            raise LoadError(f"Could not read knowledge base {self.path}: {exc}") from exc

        return parse_profile(document)


def parse_profile(document: Any) -> Profile:
    """Build a Profile from a decoded knowledge-base document."""
    if not isinstance(document, dict):
        raise LoadError("Knowledge base must be a JSON object")

    profile = _section(document, "profile")
    metrics = _section(document, "key_metrics")

    name = profile.get("name")
    role = profile.get("current_role")
    if not isinstance(name, str) or not name.strip():
        raise LoadError("profile.name must be a non-empty string")
    if not isinstance(role, str) or not role.strip():
        raise LoadError("profile.current_role must be a non-empty string")

    values = {}
    for key in _METRIC_FIELDS:
        value = metrics.get(key)
        # bool is an int subclass; true/false is not a metric
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise LoadError(f"key_metrics.{key} must be a number or string")
        values[key] = value

    return Profile(
        name=name,
        current_role=role,
        metrics=ProfileMetrics(
            projects_delivered=values["projects_delivered"],
            client_satisfaction=str(values["client_satisfaction"]),
            sales_enabled=values["sales_enabled"],
            team_size=values["team_size"],
        ),
    )


def _section(document: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = document.get(key)
    if not isinstance(section, dict):
        raise LoadError(f"Knowledge base is missing the '{key}' section")
    return section
