from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from portfolio_chat._logging import get_logger


@asynccontextmanager
async def span(name: str, logger: Optional[Any] = None, **kwargs) -> AsyncIterator[None]:
    log = logger or get_logger()
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        log.debug("span_finished", span=name, elapsed_ms=elapsed_ms, **kwargs)
