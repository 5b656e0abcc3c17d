# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import asyncio
import typing as t

import pytest

from recipe_manager import resolve
from recipe_tools import HINT_LEVEL, get_logger
from recipe_tools.environment import RecipeManagerSettings
from recipe_tools.errors import ResolutionError
from recipe_tools.recipe import Dependency
from recipe_tools.sources import MemoryRecipeSource


@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = get_logger()
    logger.setLevel(HINT_LEVEL)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    for name in RecipeManagerSettings.known_env_vars():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def source():
    return MemoryRecipeSource()


def to_dependencies(dependencies: t.Union[t.Mapping[str, str], t.Iterable[str]]):
    """
    Root dependencies either as a mapping `{'org/a': '^1.0.0'}`
    or as a list `['org/a@^1.0.0', 'org/a@1.0.0']` to require the same recipe twice
    """
    if isinstance(dependencies, t.Mapping):
        return [Dependency.of(identifier, req) for identifier, req in dependencies.items()]

    return [Dependency.parse(dependency) for dependency in dependencies]


@pytest.fixture()
def check_resolver_result():
    def check(source, dependencies, result=None, error=None, strategy=None, locks=None):
        coro = resolve(source, to_dependencies(dependencies), strategy=strategy, locks=locks)

        if error:
            with pytest.raises(error) as e:
                asyncio.run(coro)

            return e.value

        try:
            resolved = asyncio.run(coro)
        except ResolutionError as e:
            pytest.fail('Resolution failed:\n{}'.format('\n'.join(str(err) for err in e.chain())))

        assert {str(identifier): str(version) for identifier, version in resolved.items()} == result

        return resolved

    return check
