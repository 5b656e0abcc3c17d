# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Recipe source wrapper that memoizes, bounds and times out fetches of another source"""

import asyncio
import typing as t

from recipe_tools.environment import RecipeManagerSettings
from recipe_tools.errors import FetchingError
from recipe_tools.messages import debug, hint
from recipe_tools.recipe import Recipe, RecipeIdentifier

from .base import RecipeSource


class CachedRecipeSource(RecipeSource):
    """
    Wraps another source.

    - fetched recipes are kept in memory, failures are not
    - concurrent fetches of the same recipe share one call to the wrapped source
    - at most `max_concurrent` fetches of the wrapped source run at the same time
    - each fetch of the wrapped source is limited to `timeout` seconds

    Defaults are taken from :class:`RecipeManagerSettings`.
    """

    def __init__(
        self,
        source: RecipeSource,
        max_concurrent: t.Optional[int] = None,
        timeout: t.Optional[float] = None,
        cache: t.Optional[bool] = None,
    ) -> None:
        settings = RecipeManagerSettings()

        self._source = source
        self._max_concurrent = max_concurrent or settings.MAX_CONCURRENT_FETCHES
        self._timeout = settings.FETCH_TIMEOUT if timeout is None else timeout
        self._cache = settings.CACHE_RECIPES if cache is None else cache

        # the semaphore and pending fetches belong to one event loop, see _bind_loop
        self._loop: t.Optional[asyncio.AbstractEventLoop] = None
        self._semaphore: t.Optional[asyncio.Semaphore] = None
        self._pending: t.Dict[RecipeIdentifier, 'asyncio.Future[Recipe]'] = {}
        self._recipes: t.Dict[RecipeIdentifier, Recipe] = {}

    @property
    def name(self) -> str:
        return f'cached {self._source.name}'

    @property
    def source(self) -> RecipeSource:
        return self._source

    @property
    def timeout(self) -> t.Optional[float]:
        return self._timeout

    @property
    def max_concurrent(self) -> int:
        return self._max_concurrent

    def clear(self) -> None:
        self._recipes.clear()

    def _bind_loop(self) -> None:
        loop = asyncio.get_running_loop()
        if loop is self._loop:
            return

        if self._loop is not None:
            debug('Event loop changed, resetting pending fetches of %s', self._source)

        self._loop = loop
        self._semaphore = asyncio.Semaphore(self._max_concurrent)
        self._pending = {}

    async def fetch(self, identifier: RecipeIdentifier) -> Recipe:
        if identifier in self._recipes:
            return self._recipes[identifier]

        self._bind_loop()

        if not self._cache:
            return await self._fetch(identifier)

        pending = self._pending.get(identifier)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(identifier))
            self._pending[identifier] = pending
            pending.add_done_callback(lambda _: self._pending.pop(identifier, None))
        else:
            debug('Waiting for the ongoing fetch of recipe "%s"', identifier)

        # one cancelled waiter must not cancel the fetch for the others
        return await asyncio.shield(pending)

    async def _fetch(self, identifier: RecipeIdentifier) -> Recipe:
        assert self._semaphore is not None
        async with self._semaphore:
            debug('Fetching recipe "%s" from %s', identifier, self._source)
            try:
                recipe = await asyncio.wait_for(self._source.fetch(identifier), self._timeout)
            except asyncio.TimeoutError as e:
                hint(
                    'Fetching recipes from %s is slow, '
                    'set RECIPE_MANAGER_FETCH_TIMEOUT to wait longer',
                    self._source,
                )
                raise FetchingError(
                    f'Timed out fetching recipe "{identifier}" after {self._timeout} seconds'
                ) from e

        if self._cache:
            self._recipes[identifier] = recipe

        return recipe
