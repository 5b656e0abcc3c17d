# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .models import DependencyLock, DependencyLocks, ResolvedDependency

__all__ = [
    'DependencyLock',
    'DependencyLocks',
    'ResolvedDependency',
]
