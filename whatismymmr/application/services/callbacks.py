"""Callback-style delivery for callers that do not await results."""
from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

from whatismymmr.core.logging import get_logger

logger = get_logger(__name__, service="callback")

T = TypeVar("T")

Callback = Callable[[Optional[T], Optional[BaseException]], None]


def _deliver(callback: Callback, result, error: Optional[BaseException]) -> None:
    # a failing callback is logged; it never changes what the caller gets
    try:
        callback(result, error)
    except Exception:
        logger.error(lambda: f"callback {callback!r} raised", exc_info=True)


async def with_callback(awaitable: Awaitable[T], callback: Optional[Callback] = None) -> T:
    """Await ``awaitable`` and also report its outcome to ``callback``.

    The callback runs exactly once, as ``callback(result, None)`` or
    ``callback(None, error)``; the result is then returned, or the error
    re-raised, so both delivery paths see the same outcome. An exception
    raised by the callback itself is logged and otherwise ignored.
    """
    try:
        result = await awaitable
    except Exception as exc:
        if callback is not None:
            _deliver(callback, None, exc)
        raise
    if callback is not None:
        _deliver(callback, result, None)
    return result
