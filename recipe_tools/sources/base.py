# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod

from recipe_tools.recipe import Recipe, RecipeIdentifier


class RecipeSource(ABC):
    """
    Provider of recipes for the resolver.

    Sources are queried concurrently for different recipes,
    so implementations must be safe for concurrent use.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.name

    @abstractmethod
    async def fetch(self, identifier: RecipeIdentifier) -> Recipe:
        """
        Fetch the recipe of the given identifier.

        :raises RecipeNotFoundError: If the source doesn't know the recipe.
        :raises FetchingError: If the recipe cannot be retrieved.
        """
