# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import asyncio

import pytest

from recipe_tools.errors import RecipeNotFoundError, SourceError
from recipe_tools.recipe import Dependency, Recipe, RecipeIdentifier
from recipe_tools.sources import MemoryRecipeSource

A = RecipeIdentifier.parse('test/a')


class TestMemoryRecipeSource:
    def test_fromdict(self):
        source = MemoryRecipeSource.fromdict({
            'test/a': {'versions': {'1.0.0': {'dependencies': {'test/b': '^1.0.0'}}}},
            'test/b': {'name': 'custom', 'versions': {'1.0.0': {}}},
        })

        recipe = asyncio.run(source.fetch(A))

        assert recipe.name == 'a'
        assert [str(version) for version, _ in recipe.releases()] == ['1.0.0']
        assert asyncio.run(source.fetch(RecipeIdentifier.parse('test/b'))).name == 'custom'
        assert A in source

    def test_not_found(self):
        source = MemoryRecipeSource()

        with pytest.raises(RecipeNotFoundError, match='Recipe "test/a" was not found') as e:
            asyncio.run(source.fetch(A))

        assert e.value.identifier == A
        assert source.fetch_count[A] == 1

    def test_invalid_recipe(self):
        source = MemoryRecipeSource()

        with pytest.raises(SourceError) as e:
            source.add('test/a', {'versions': {'1.0': {}}})

        assert str(e.value).startswith('Invalid recipe "test/a":\nInvalid field "versions:1.0')
        assert A not in source

    def test_add_recipe(self):
        source = MemoryRecipeSource()
        recipe = Recipe(name='other')

        source.add('Test/A', recipe)

        assert asyncio.run(source.fetch(A)) is recipe

    def test_add_release(self):
        source = MemoryRecipeSource()

        source.add_release('test/a', '1.0.0')
        source.add_release('test/a', '2.0.0', {'test/b': '*'}, url='https://example.com/a')
        source.add_release('test/a', '1.0.0', {'test/c': '1.0.0'})

        recipe = asyncio.run(source.fetch(A))

        assert recipe.name == 'a'
        assert [
            (str(version), release.url, release.dependency_entries())
            for version, release in recipe.releases()
        ] == [
            ('2.0.0', 'https://example.com/a', [Dependency.parse('test/b@*')]),
            ('1.0.0', None, [Dependency.parse('test/c@1.0.0')]),
        ]

    def test_fetch_count(self):
        source = MemoryRecipeSource()
        source.add_release('test/a', '1.0.0')

        async def fetch_twice():
            await source.fetch(A)
            await source.fetch(A)

        asyncio.run(fetch_twice())

        assert source.fetch_count == {A: 2}
        assert source.name == 'MemoryRecipeSource'
        assert str(source) == 'MemoryRecipeSource'
