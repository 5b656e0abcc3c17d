# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Locked results of the resolver"""

import typing as t

from pydantic import Field

from recipe_tools.recipe import RecipeIdentifier
from recipe_tools.utils import BaseModel
from recipe_tools.versions import SemanticVersion


class ResolvedDependency(BaseModel):
    version: SemanticVersion
    # where the version was taken from, e.g. the url of the release
    origin: t.Optional[str] = None

    def __str__(self) -> str:
        if self.origin:
            return f'{self.version} from {self.origin}'

        return str(self.version)


class DependencyLock(BaseModel):
    identifier: RecipeIdentifier
    resolved: ResolvedDependency

    def __str__(self) -> str:
        return f'{self.identifier} ({self.resolved})'


class DependencyLocks(BaseModel):
    locks: t.Dict[RecipeIdentifier, ResolvedDependency] = Field(default_factory=dict)

    @classmethod
    def of(
        cls,
        locks: t.Union[
            None,
            t.Mapping[RecipeIdentifier, ResolvedDependency],
            t.Iterable[DependencyLock],
        ] = None,
    ) -> 'DependencyLocks':
        if locks is None:
            return cls()

        if isinstance(locks, t.Mapping):
            return cls(locks=dict(locks))

        return cls(locks={lock.identifier: lock.resolved for lock in locks})

    @classmethod
    def from_assignment(
        cls,
        assignment: t.Mapping[RecipeIdentifier, SemanticVersion],
        origins: t.Optional[t.Mapping[RecipeIdentifier, str]] = None,
    ) -> 'DependencyLocks':
        """
        Build locks from a successful resolution.

        :param assignment: resolved versions
        :param origins: optional origin of each resolved version
        """
        origins = origins or {}
        return cls(
            locks={
                identifier: ResolvedDependency(version=version, origin=origins.get(identifier))
                for identifier, version in sorted(assignment.items())
            }
        )

    def entries(self) -> t.List[DependencyLock]:
        return [
            DependencyLock(identifier=identifier, resolved=resolved)
            for identifier, resolved in self.locks.items()
        ]

    def assignment(self) -> t.Dict[RecipeIdentifier, SemanticVersion]:
        """Locked versions, used to pin a previous resolution"""
        return {identifier: resolved.version for identifier, resolved in self.locks.items()}

    def __hash__(self) -> int:
        return hash(frozenset(self.locks.items()))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.locks

    def __len__(self) -> int:
        return len(self.locks)
