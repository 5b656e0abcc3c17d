# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging as lib_logging

LOGGING_NAMESPACE = __package__
HINT_LEVEL = 15


def get_logger() -> lib_logging.Logger:
    """
    Get logger for the recipe manager.

    Use this instead of `logging.getLogger(__package__)` to get the universal logger for both
    recipe_manager and recipe_tools
    """
    return lib_logging.getLogger(LOGGING_NAMESPACE)


from recipe_tools.environment import RecipeManagerSettings  # noqa: E402
from recipe_tools.logging import setup_logging  # noqa: E402
from recipe_tools.messages import debug, hint, notice  # noqa: E402

__all__ = [
    'HINT_LEVEL',
    'LOGGING_NAMESPACE',
    'RecipeManagerSettings',
    'debug',
    'get_logger',
    'hint',
    'notice',
    'setup_logging',
]
