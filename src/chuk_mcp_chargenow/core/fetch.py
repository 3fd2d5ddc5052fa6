"""
Best-effort execution of upstream calls.

Every HTTP call in the pipeline is wrapped here so that a failure turns into
a logged, empty result instead of an exception.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FetchOutcome(Generic[T]):
    """Value of a best-effort call, or its fallback plus the cause."""

    value: T
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def best_effort(
    label: str,
    call: Callable[[], Awaitable[T]],
    default: T,
) -> FetchOutcome[T]:
    """Await ``call()`` and absorb any failure.

    Args:
        label: Name of the call, used in log messages
        call: Zero-argument coroutine factory
        default: Value returned when the call fails

    Returns:
        FetchOutcome with the call's value, or ``default`` and the error text
    """
    try:
        return FetchOutcome(value=await call())
    except Exception as e:
        logger.error("%s failed: %s", label, e)
        return FetchOutcome(value=default, error=str(e) or type(e).__name__)
