# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import asyncio
import typing as t

from recipe_tools.errors import ConflictError, ResolutionError, UnsatisfiableError
from recipe_tools.lock import DependencyLocks
from recipe_tools.messages import debug, notice
from recipe_tools.recipe import Dependency, Recipe, RecipeIdentifier, Release
from recipe_tools.sources import RecipeSource
from recipe_tools.versions import SemanticVersion

from .assignment import Assignment, empty_assignment, freeze, with_value
from .combinators import find_max, skip_errors
from .strategy import ResolutionStrategy, SumResolutionStrategy


class DependencyResolver:
    """
    Finds a version for every recipe reachable from a list of dependencies,
    such that all the requirements on each recipe are satisfied.

    Every candidate version of a recipe is explored as a separate branch,
    branches run concurrently and the surviving one with the best score
    according to the resolution strategy wins.
    """

    def __init__(
        self,
        source: RecipeSource,
        strategy: t.Optional[ResolutionStrategy] = None,
        pinned: t.Optional[t.Mapping[RecipeIdentifier, SemanticVersion]] = None,
    ) -> None:
        self.source = source
        self.strategy = strategy or SumResolutionStrategy()
        # versions tried exclusively, as long as they satisfy the requirement
        self.pinned = freeze(pinned or {})

    async def resolve(
        self,
        dependencies: t.Iterable[Dependency],
        resolved: t.Optional[Assignment] = None,
    ) -> Assignment:
        """
        Satisfy the dependencies one after another,
        each step sees the versions decided by the previous ones.

        :param dependencies: dependencies to satisfy, in order
        :param resolved: versions already decided
        :raises ResolutionError: If the dependencies cannot be satisfied.
        """
        resolved = empty_assignment() if resolved is None else freeze(resolved)

        for dependency in dependencies:
            resolved = await self.step(resolved, dependency)

        return resolved

    async def step(self, resolved: Assignment, dependency: Dependency) -> Assignment:
        identifier = dependency.identifier

        if identifier in resolved:
            version = resolved[identifier]
            if dependency.requirement.is_satisfied_by(version):
                return resolved

            raise ConflictError(identifier, version, dependency)

        # whatever a source fails with, the recipe is unreachable and the branch fails
        try:
            recipe = await self.source.fetch(identifier)
        except Exception as e:
            debug('Cannot get recipe "%s": %s', identifier, e)
            raise UnsatisfiableError(dependency) from e

        candidates = self.candidates(recipe, dependency)
        debug(
            'Resolving %s, candidates: %s',
            dependency,
            ', '.join(str(version) for version, _ in candidates) or 'none',
        )

        branches = (
            self.resolve(release.dependency_entries(), with_value(resolved, identifier, version))
            for version, release in candidates
        )

        try:
            best = await find_max(
                skip_errors(branches, errors=(ResolutionError,)),
                key=self.strategy.score,
            )
        except ResolutionError as e:
            raise UnsatisfiableError(dependency) from e

        debug('Resolved %s to %s', dependency, best[identifier])
        return best

    def candidates(
        self, recipe: Recipe, dependency: Dependency
    ) -> t.List[t.Tuple[SemanticVersion, Release]]:
        """Releases matching the requirement, the highest version first"""
        matching = [
            (version, release)
            for version, release in recipe.releases()
            if dependency.requirement.is_satisfied_by(version)
        ]

        pinned = self.pinned.get(dependency.identifier)
        if pinned is not None:
            locked = [(version, release) for version, release in matching if version == pinned]
            if locked:
                return locked

            debug('Locked version %s does not satisfy %s, ignoring it', pinned, dependency)

        return matching


async def resolve(
    source: RecipeSource,
    dependencies: t.Iterable[Dependency],
    strategy: t.Optional[ResolutionStrategy] = None,
    locks: t.Optional[DependencyLocks] = None,
) -> t.Dict[RecipeIdentifier, SemanticVersion]:
    """
    Resolve the versions of all the recipes reachable from the dependencies.

    :param source: where to get the recipes from
    :param dependencies: direct dependencies, in order
    :param strategy: how to rank valid resolutions, sum of the versions by default
    :param locks: versions of a previous resolution, preferred when they are still valid
    :raises ResolutionError: If the dependencies cannot be satisfied.
    """
    dependencies = list(dependencies)

    if locks:
        try:
            resolved = await DependencyResolver(
                source, strategy, pinned=locks.assignment()
            ).resolve(dependencies)
            return dict(resolved)
        except ResolutionError as e:
            notice(
                'Failed to resolve the dependencies with the locked versions. Error: %s.\n'
                'Retrying without the locked versions.',
                e,
            )
            debug('Caused by:\n%s', '\n'.join(str(cause) for cause in e.chain()[1:]))

    resolved = await DependencyResolver(source, strategy).resolve(dependencies)
    return dict(resolved)


async def create_locks(source: RecipeSource, resolved: Assignment) -> DependencyLocks:
    """
    Build locks of a resolution, recording the url of each release as its origin.
    """
    identifiers = sorted(resolved)
    recipes = await asyncio.gather(*(source.fetch(identifier) for identifier in identifiers))

    origins = {}
    for identifier, recipe in zip(identifiers, recipes):
        release = recipe.versions.get(resolved[identifier])
        origin = release.url if release and release.url else recipe.url
        if origin:
            origins[identifier] = origin

    return DependencyLocks.from_assignment(resolved, origins)
