# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
This module contains the environment variable settings of the recipe manager.
"""

import typing as t
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo, ValidatorFunctionWrapHandler
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _env_to_bool(value: t.Union[str, bool]) -> bool:
    """Returns True if environment variable is set to 1, t, y, yes, true, or False otherwise"""
    if isinstance(value, bool):
        return value

    return value.lower() in {'1', 't', 'true', 'y', 'yes'}


class RecipeManagerSettings(BaseSettings):
    """
    Recipe Manager settings.

    All the settings are read from environment variables prefixed with ``RECIPE_MANAGER_``.
    Invalid values fall back to the default of the field.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix='RECIPE_MANAGER_',
    )

    # LOGGING

    # by default log-level is hint(15)
    DEBUG_MODE: bool = Field(False, description='Enable debug mode.')  # log-level: debug(10)

    NO_HINTS: bool = Field(
        False, description='Disable hints in the output.'
    )  # log-level: notice/info(20)

    NO_COLORS: bool = Field(False, description='Disable colored output.')  # with colorama or not

    # RECIPE SOURCES

    FETCH_TIMEOUT: t.Optional[float] = Field(
        default=None,
        description="""
            | Timeout for fetching a single recipe in seconds.
            | If not set, fetches never time out.
        """,
    )

    MAX_CONCURRENT_FETCHES: int = Field(
        default=16,
        gt=0,
        description='Maximum number of recipe fetches running at the same time.',
    )

    CACHE_RECIPES: bool = Field(
        True,
        description="""
            | Keep fetched recipes in memory during runtime.
            | Set 0 to disable.
        """,
    )

    @field_validator('*', mode='wrap')
    @classmethod
    def fallback_to_default(
        cls, v: t.Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> t.Any:
        field = cls.model_fields[info.field_name]

        try:
            if v is None:
                return field.default

            if field.annotation is bool:
                return _env_to_bool(v)
            else:
                return handler(v)
        except Exception:  # all exceptions will fall back to default
            return field.default

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: t.Type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> t.Tuple[PydanticBaseSettingsSource, ...]:
        # explicit keyword arguments first, then the environment
        return (init_settings, env_settings)

    @classmethod
    @lru_cache(1)
    def known_env_vars(cls) -> t.List[str]:
        prefix = cls.model_config.get('env_prefix', '')
        return sorted(prefix + name for name in cls.model_fields)
