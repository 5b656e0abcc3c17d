# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t
from abc import ABC, abstractmethod

from recipe_tools.recipe import RecipeIdentifier
from recipe_tools.versions import SemanticVersion


class ResolutionStrategy(ABC):
    """
    Ranks valid resolutions, the higher score wins.

    Strategies are shared by all the concurrently evaluated branches,
    so they must not keep any mutable state.
    """

    @abstractmethod
    def score(self, resolved: t.Mapping[RecipeIdentifier, SemanticVersion]) -> t.Any:
        """Return an orderable score of the resolved versions"""


class SumResolutionStrategy(ResolutionStrategy):
    """
    Sum of the weights of all the resolved versions,
    weight of `major.minor.patch` is `major * 10000 + minor * 100 + patch`.

    .. note::

        Minor and patch parts are assumed to be lower than 100.
        Bigger values overlap with the next part, e.g. `1.0.100` weights as much as `1.1.0`.
    """

    RADIX = 100

    @classmethod
    def weight(cls, version: SemanticVersion) -> int:
        return (version.major * cls.RADIX + version.minor) * cls.RADIX + version.patch

    def score(self, resolved: t.Mapping[RecipeIdentifier, SemanticVersion]) -> int:
        return sum(self.weight(version) for version in resolved.values())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SumResolutionStrategy)

    def __hash__(self) -> int:
        return hash(SumResolutionStrategy)

    def __repr__(self) -> str:
        return 'SumResolutionStrategy()'
