# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .base import RecipeSource
from .cached import CachedRecipeSource
from .memory import MemoryRecipeSource

__all__ = [
    'CachedRecipeSource',
    'MemoryRecipeSource',
    'RecipeSource',
]
