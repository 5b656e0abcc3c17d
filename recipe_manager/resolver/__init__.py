# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .assignment import Assignment, empty_assignment, merge, with_value
from .combinators import find_max, skip_errors
from .resolver import DependencyResolver, create_locks, resolve
from .strategy import ResolutionStrategy, SumResolutionStrategy

__all__ = [
    'Assignment',
    'DependencyResolver',
    'ResolutionStrategy',
    'SumResolutionStrategy',
    'empty_assignment',
    'find_max',
    'create_locks',
    'merge',
    'resolve',
    'skip_errors',
    'with_value',
]
