# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Helpers to branch the search over concurrently running asyncio tasks"""

import asyncio
import typing as t

from recipe_tools.errors import BranchesExhaustedError, NoElementsError
from recipe_tools.messages import debug

T = t.TypeVar('T')


def _discard(tasks: t.Iterable['asyncio.Future[t.Any]']) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
        elif not task.cancelled():
            # mark the exception as retrieved, we don't care about it anymore
            task.exception()


async def skip_errors(
    awaitables: t.Iterable[t.Awaitable[T]],
    errors: t.Tuple[t.Type[BaseException], ...] = (Exception,),
) -> t.AsyncIterator[T]:
    """
    Run all awaitables concurrently and yield the successful results in the input order.

    Failures of the given exception types are dropped,
    unless all the awaitables failed, then BranchesExhaustedError is raised.
    Other exceptions are propagated. Empty input yields nothing.

    Tasks which are still running when the iteration is left early are cancelled.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    failures: t.List[BaseException] = []
    succeeded = False

    try:
        for task in tasks:
            try:
                result = await task
            except errors as e:
                debug('Skipping failed branch: %s', e)
                failures.append(e)
                continue

            succeeded = True
            yield result
    finally:
        _discard(tasks)

    if failures and not succeeded:
        raise BranchesExhaustedError(failures)


async def _aiter(items: t.Union[t.AsyncIterable[T], t.Iterable[T]]) -> t.AsyncIterator[T]:
    if isinstance(items, t.AsyncIterable):
        async for item in items:
            yield item
    else:
        for item in items:
            yield item


async def find_max(
    items: t.Union[t.AsyncIterable[T], t.Iterable[T]],
    key: t.Callable[[T], t.Any],
) -> T:
    """
    Consume all the items and return the one with the greatest key.
    The first one wins when several items share the greatest key.

    :raises NoElementsError: If there are no items.
    """
    found = False
    best: t.Any = None
    best_score: t.Any = None

    async for item in _aiter(items):
        score = key(item)
        if not found or score > best_score:
            found = True
            best = item
            best_score = score

    if not found:
        raise NoElementsError('Cannot select the best result from an empty sequence')

    return best
