"""
Async helpers.

try_catch() turns the success/failure channel of an awaitable into a plain
return value, so callers can branch on result.ok instead of using try/except.
"""
from __future__ import annotations

from typing import Awaitable, TypeVar

from tidykit.logging_config import get_logger
from tidykit.schemas.common import Failure, Success, TryCatchResult

logger = get_logger(__name__)

T = TypeVar('T')


async def try_catch(awaitable: Awaitable[T]) -> TryCatchResult[T, Exception]:
    """
    Await a computation once and wrap its outcome in a result object.

    No retry, timeout or cancellation is added. Only Exception subclasses are
    captured: asyncio.CancelledError, KeyboardInterrupt and SystemExit still
    propagate.

    Args:
        awaitable: Coroutine, Task or Future to await

    Returns:
        Success(data=value) if it resolved, Failure(error=exc) if it raised

    Example:
        result = await try_catch(fetch_user(user_id))
        if result.ok:
            print(result.data)
        else:
            logger.warning("fetch failed", error=str(result.error))
    """
    try:
        data = await awaitable
    except Exception as e:
        logger.debug("Wrapped computation failed", error_type=type(e).__name__, error=str(e))
        return Failure(error=e)
    return Success(data=data)
