# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import pytest

from recipe_tools.environment import RecipeManagerSettings


def test_defaults():
    settings = RecipeManagerSettings()

    assert not settings.DEBUG_MODE
    assert not settings.NO_HINTS
    assert not settings.NO_COLORS
    assert settings.FETCH_TIMEOUT is None
    assert settings.MAX_CONCURRENT_FETCHES == 16
    assert settings.CACHE_RECIPES


@pytest.mark.parametrize(
    'value, expected',
    [
        ('1', True),
        ('y', True),
        ('Yes', True),
        ('TRUE', True),
        ('t', True),
        ('0', False),
        ('no', False),
        ('', False),
        ('whatever', False),
    ],
)
def test_bool_values(monkeypatch, value, expected):
    monkeypatch.setenv('RECIPE_MANAGER_DEBUG_MODE', value)

    assert RecipeManagerSettings().DEBUG_MODE is expected


def test_disable_cache(monkeypatch):
    monkeypatch.setenv('RECIPE_MANAGER_CACHE_RECIPES', '0')

    assert not RecipeManagerSettings().CACHE_RECIPES


@pytest.mark.parametrize(
    'name, value',
    [
        ('RECIPE_MANAGER_FETCH_TIMEOUT', 'soon'),
        ('RECIPE_MANAGER_MAX_CONCURRENT_FETCHES', 'many'),
        ('RECIPE_MANAGER_MAX_CONCURRENT_FETCHES', '0'),
        ('RECIPE_MANAGER_MAX_CONCURRENT_FETCHES', '-5'),
    ],
)
def test_invalid_values_fall_back_to_default(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    settings = RecipeManagerSettings()

    assert settings.FETCH_TIMEOUT is None
    assert settings.MAX_CONCURRENT_FETCHES == 16


def test_prefix_is_case_sensitive(monkeypatch):
    monkeypatch.setenv('recipe_manager_max_concurrent_fetches', '3')

    assert RecipeManagerSettings().MAX_CONCURRENT_FETCHES == 16


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv('RECIPE_MANAGER_MAX_CONCURRENT_FETCHES', '3')

    assert RecipeManagerSettings(MAX_CONCURRENT_FETCHES=7).MAX_CONCURRENT_FETCHES == 7


def test_known_env_vars():
    assert RecipeManagerSettings.known_env_vars() == [
        'RECIPE_MANAGER_CACHE_RECIPES',
        'RECIPE_MANAGER_DEBUG_MODE',
        'RECIPE_MANAGER_FETCH_TIMEOUT',
        'RECIPE_MANAGER_MAX_CONCURRENT_FETCHES',
        'RECIPE_MANAGER_NO_COLORS',
        'RECIPE_MANAGER_NO_HINTS',
    ]
