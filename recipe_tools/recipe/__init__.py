# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .models import (
    Dependency,
    DependencyGroup,
    Recipe,
    RecipeIdentifier,
    Release,
)

__all__ = [
    'Dependency',
    'DependencyGroup',
    'Recipe',
    'RecipeIdentifier',
    'Release',
]
