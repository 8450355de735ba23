from __future__ import annotations

import time
from typing import Optional


def deadline_from_timeout_ms(timeout_ms: float) -> Optional[float]:
    """
    Absolute time.perf_counter() deadline, or None for no limit.
    """
    if not timeout_ms or timeout_ms <= 0:
        return None
    return time.perf_counter() + (timeout_ms / 1000.0)


def deadline_expired(deadline: Optional[float]) -> bool:
    return deadline is not None and time.perf_counter() > deadline
