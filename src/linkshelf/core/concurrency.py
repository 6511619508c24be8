"""Structured concurrent join for independent side effects."""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def run_concurrently(*aws: Awaitable[Any]) -> list[Any]:
    """Run awaitables concurrently and wait for all of them to finish.

    Unlike a bare ``asyncio.gather``, a failure in one awaitable does not
    return control while its siblings are still running: every awaitable is
    driven to completion first, then the first failure (in argument order)
    is re-raised.

    Returns:
        The results, in argument order, when every awaitable succeeded.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
