# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from recipe_tools import RecipeManagerSettings, setup_logging

from .resolver import (
    DependencyResolver,
    ResolutionStrategy,
    SumResolutionStrategy,
    create_locks,
    resolve,
)

if RecipeManagerSettings().DEBUG_MODE:
    setup_logging()

__all__ = [
    'DependencyResolver',
    'ResolutionStrategy',
    'SumResolutionStrategy',
    'create_locks',
    'resolve',
]
