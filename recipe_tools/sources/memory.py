# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Recipe source that keeps all the recipes in memory"""

import typing as t
from collections import Counter

from pydantic import ValidationError

from recipe_tools.errors import RecipeNotFoundError, SourceError
from recipe_tools.recipe import DependencyGroup, Recipe, RecipeIdentifier, Release
from recipe_tools.recipe.models import DependencyInput
from recipe_tools.utils import polish_validation_error
from recipe_tools.versions import SemanticVersion

from .base import RecipeSource


class MemoryRecipeSource(RecipeSource):
    def __init__(
        self,
        recipes: t.Optional[
            t.Mapping[t.Union[str, RecipeIdentifier], t.Union[Recipe, t.Dict[str, t.Any]]]
        ] = None,
    ) -> None:
        self._recipes: t.Dict[RecipeIdentifier, Recipe] = {}
        self.fetch_count: t.Counter[RecipeIdentifier] = Counter()

        for identifier, recipe in (recipes or {}).items():
            self.add(identifier, recipe)

    @classmethod
    def fromdict(cls, d: t.Mapping[str, t.Dict[str, t.Any]]) -> 'MemoryRecipeSource':
        """
        Create source from plain dicts, e.g.::

            {
                'org/a': {
                    'versions': {
                        '1.0.0': {'dependencies': {'org/b': '^1.0.0'}},
                        '1.1.0': {},
                    },
                },
            }

        The recipe name defaults to the name part of the identifier.
        """
        return cls(d)

    def add(
        self,
        identifier: t.Union[str, RecipeIdentifier],
        recipe: t.Union[Recipe, t.Dict[str, t.Any]],
    ) -> None:
        identifier = RecipeIdentifier.parse(identifier)

        if not isinstance(recipe, Recipe):
            details = dict(recipe)
            details.setdefault('name', identifier.name)
            try:
                recipe = Recipe.fromdict(details)
            except ValidationError as e:
                raise SourceError(
                    f'Invalid recipe "{identifier}":\n{polish_validation_error(e)}'
                ) from e

        self._recipes[identifier] = recipe

    def add_release(
        self,
        identifier: t.Union[str, RecipeIdentifier],
        version: t.Union[str, SemanticVersion],
        dependencies: t.Optional[DependencyInput] = None,
        url: t.Optional[str] = None,
    ) -> None:
        """Add one release, creating the recipe when it doesn't exist yet"""
        identifier = RecipeIdentifier.parse(identifier)
        recipe = self._recipes.get(identifier) or Recipe(name=identifier.name)

        versions = dict(recipe.versions)
        versions[SemanticVersion(version)] = Release(
            url=url,
            dependencies=None if dependencies is None else DependencyGroup.of(dependencies),
        )
        self._recipes[identifier] = recipe.model_copy(update={'versions': versions})

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._recipes

    async def fetch(self, identifier: RecipeIdentifier) -> Recipe:
        self.fetch_count[identifier] += 1

        try:
            return self._recipes[identifier]
        except KeyError:
            raise RecipeNotFoundError(identifier)
