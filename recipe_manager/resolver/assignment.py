# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Resolved assignments are read-only mappings from recipe identifiers to versions.

Every "modification" builds a new mapping, so an assignment handed to one branch
of the search can never be observed changing by its siblings.
"""

import typing as t
from types import MappingProxyType

from recipe_tools.errors import InternalError
from recipe_tools.recipe import RecipeIdentifier
from recipe_tools.versions import SemanticVersion

K = t.TypeVar('K')
V = t.TypeVar('V')

Assignment = t.Mapping[RecipeIdentifier, SemanticVersion]


def freeze(mapping: t.Mapping[K, V]) -> t.Mapping[K, V]:
    return MappingProxyType(dict(mapping))


def empty_assignment() -> Assignment:
    return MappingProxyType({})


def with_value(mapping: t.Mapping[K, V], key: K, value: V) -> t.Mapping[K, V]:
    """Return a new mapping equal to `mapping` with `key` bound to `value`"""
    extended = dict(mapping)
    extended[key] = value
    return MappingProxyType(extended)


def merge(x: t.Mapping[K, V], y: t.Mapping[K, V], strict: bool = False) -> t.Mapping[K, V]:
    """
    Return a new mapping with all the entries of `x` and `y`,
    entries of `y` win on collision.

    :param strict: raise InternalError instead of overwriting a different value
    """
    if strict:
        for key, value in y.items():
            if key in x and x[key] != value:
                raise InternalError(
                    f'Cannot merge assignments, "{key}" is bound to both {x[key]} and {value}'
                )

    merged = dict(x)
    merged.update(y)
    return MappingProxyType(merged)
