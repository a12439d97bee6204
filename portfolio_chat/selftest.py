from __future__ import annotations

from importlib import metadata
from typing import TYPE_CHECKING, Optional

from portfolio_chat._logging import get_component_logger

if TYPE_CHECKING:
    from portfolio_chat.config import Settings


def _version(pkg: str) -> str:
    try:
        return metadata.version(pkg)
    except metadata.PackageNotFoundError:
        return "unknown"


def run_selftest(settings: Optional[Settings] = None) -> bool:
    """
    Dependency and knowledge-base check; no network calls.
    """
    logger = get_component_logger("selftest")

    try:
        import httpx  # noqa: F401
        import structlog  # noqa: F401
    except ImportError as exc:
        logger.error("selftest_missing_dependency", error=str(exc))
        return False
    logger.info("selftest_dependencies", httpx=_version("httpx"), structlog=_version("structlog"))

    from portfolio_chat.config import Settings
    from portfolio_chat.knowledge import JsonKnowledgeStore
    from portfolio_chat.types import LoadError

    settings = settings or Settings.from_env()
    try:
        profile = JsonKnowledgeStore(settings.knowledge_base).load()
    except LoadError as exc:
        logger.error("selftest_knowledge_base_failed", path=str(settings.knowledge_base), error=str(exc))
        return False
    logger.info("selftest_knowledge_base_ok", name=profile.name)

    logger.info(
        "selftest_remote",
        model=settings.model,
        api_key_configured=bool(settings.api_key),
        test_mode=settings.test_mode,
    )
    logger.info("selftest_ok")
    return True


if __name__ == "__main__":
    raise SystemExit(0 if run_selftest() else 1)
