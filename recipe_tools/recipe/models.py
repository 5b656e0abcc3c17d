# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import re
import typing as t
from functools import total_ordering

from pydantic import Field, GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from recipe_tools.utils import BaseModel
from recipe_tools.versions import Requirement, SemanticVersion

IDENTIFIER_PART_RE = re.compile(r'^[a-z0-9][a-z0-9_.+\-]*$')


@total_ordering
class RecipeIdentifier:
    """
    Identifier of a recipe, in the form of `organization/name`.
    Both parts are case-insensitive.
    """

    __slots__ = ('_organization', '_name')

    def __init__(self, organization: str, name: str) -> None:
        organization = organization.strip().lower()
        name = name.strip().lower()

        for part in (organization, name):
            if not IDENTIFIER_PART_RE.match(part):
                raise ValueError(f'Invalid recipe identifier part: "{part}"')

        self._organization = organization
        self._name = name

    @classmethod
    def parse(cls, text: t.Union[str, 'RecipeIdentifier']) -> 'RecipeIdentifier':
        if isinstance(text, RecipeIdentifier):
            return text

        parts = text.strip().split('/')
        if len(parts) != 2:
            raise ValueError(f'Recipe identifier must be "organization/name", got "{text}"')

        return cls(*parts)

    @property
    def organization(self) -> str:
        return self._organization

    @property
    def name(self) -> str:
        return self._name

    def encode(self) -> str:
        return f'{self._organization}/{self._name}'

    def _key(self) -> t.Tuple[str, str]:
        return self._organization, self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecipeIdentifier):
            return NotImplemented

        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RecipeIdentifier):
            return NotImplemented

        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f'RecipeIdentifier("{self}")'

    @classmethod
    def _validate(cls, value: t.Any) -> 'RecipeIdentifier':
        if not isinstance(value, (str, RecipeIdentifier)):
            raise ValueError(f'Invalid recipe identifier: {value!r}')

        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(when_used='always'),
        )


class Dependency(BaseModel):
    """One edge of the dependency graph: a recipe and the versions acceptable for it"""

    identifier: RecipeIdentifier
    requirement: Requirement = Field(default_factory=Requirement.any)

    @classmethod
    def of(
        cls,
        identifier: t.Union[str, RecipeIdentifier],
        requirement: t.Union[str, Requirement] = '*',
    ) -> 'Dependency':
        return cls(
            identifier=RecipeIdentifier.parse(identifier),
            requirement=Requirement(requirement),
        )

    @classmethod
    def parse(cls, text: str) -> 'Dependency':
        """Parse `organization/name@requirement`, the requirement part is optional"""
        identifier, _, requirement = text.partition('@')
        return cls.of(identifier, requirement or '*')

    def encode(self) -> str:
        return f'{self.identifier}@{self.requirement}'

    def __str__(self) -> str:
        return self.encode()


DependencyInput = t.Union[
    'DependencyGroup',
    t.Mapping[t.Union[str, RecipeIdentifier], t.Union[str, Requirement]],
    t.Iterable[Dependency],
]


class DependencyGroup:
    """
    Immutable group of dependencies with at most one dependency per recipe identifier.
    Entries keep their insertion order.
    """

    __slots__ = ('_dependencies',)

    def __init__(self, dependencies: t.Iterable[Dependency] = ()) -> None:
        self._dependencies: t.Dict[RecipeIdentifier, Dependency] = {}
        for dependency in dependencies:
            if dependency.identifier in self._dependencies:
                raise ValueError(f'Duplicate dependency on "{dependency.identifier}"')

            self._dependencies[dependency.identifier] = dependency

    @classmethod
    def _from_unique(cls, dependencies: t.Dict[RecipeIdentifier, Dependency]) -> 'DependencyGroup':
        group = cls()
        group._dependencies = dependencies
        return group

    @classmethod
    def of(cls, dependencies: t.Optional[DependencyInput] = None) -> 'DependencyGroup':
        if dependencies is None:
            return cls()

        if isinstance(dependencies, DependencyGroup):
            return dependencies

        if isinstance(dependencies, t.Mapping):
            return cls(
                Dependency.of(identifier, requirement)
                for identifier, requirement in dependencies.items()
            )

        return cls(dependencies)

    def entries(self) -> t.List[Dependency]:
        return list(self._dependencies.values())

    def identifiers(self) -> t.List[RecipeIdentifier]:
        return list(self._dependencies.keys())

    def requires(self, identifier: t.Union[str, RecipeIdentifier]) -> bool:
        return RecipeIdentifier.parse(identifier) in self._dependencies

    def get(self, identifier: t.Union[str, RecipeIdentifier]) -> t.Optional[Dependency]:
        return self._dependencies.get(RecipeIdentifier.parse(identifier))

    def add_dependency(self, dependency: Dependency) -> 'DependencyGroup':
        """Return a new group with the dependency added, replacing the one on the same recipe"""
        dependencies = dict(self._dependencies)
        dependencies[dependency.identifier] = dependency
        return self._from_unique(dependencies)

    def add_dependency_group(self, other: 'DependencyGroup') -> 'DependencyGroup':
        dependencies = dict(self._dependencies)
        dependencies.update(other._dependencies)
        return self._from_unique(dependencies)

    def remove_dependency(self, identifier: t.Union[str, RecipeIdentifier]) -> 'DependencyGroup':
        identifier = RecipeIdentifier.parse(identifier)
        if identifier not in self._dependencies:
            return self

        dependencies = dict(self._dependencies)
        del dependencies[identifier]
        return self._from_unique(dependencies)

    def serialize(self) -> t.Dict[str, str]:
        return {str(dep.identifier): str(dep.requirement) for dep in self._dependencies.values()}

    def __iter__(self) -> t.Iterator[Dependency]:
        return iter(self._dependencies.values())

    def __len__(self) -> int:
        return len(self._dependencies)

    def __bool__(self) -> bool:
        return bool(self._dependencies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyGroup):
            return NotImplemented

        # the order of entries does not matter for equality
        return self._dependencies == other._dependencies

    def __hash__(self) -> int:
        return hash(frozenset(self._dependencies.values()))

    def __repr__(self) -> str:
        return f'DependencyGroup({self.serialize()})'

    @classmethod
    def _validate(cls, value: t.Any) -> 'DependencyGroup':
        if isinstance(value, (str, bytes)):
            raise ValueError(f'Invalid dependency group: {value!r}')

        return cls.of(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda group: group.serialize()
            ),
        )


class Release(BaseModel):
    """Metadata of one version of a recipe"""

    url: t.Optional[str] = None
    dependencies: t.Optional[DependencyGroup] = None

    def dependency_entries(self) -> t.List[Dependency]:
        if self.dependencies is None:
            return []

        return self.dependencies.entries()


class Recipe(BaseModel):
    """Published metadata of a recipe: all the known versions and their releases"""

    name: str
    url: t.Optional[str] = None
    versions: t.Dict[SemanticVersion, Release] = Field(default_factory=dict)

    def releases(self) -> t.List[t.Tuple[SemanticVersion, Release]]:
        """All releases, the highest version first"""
        return sorted(self.versions.items(), key=lambda item: item[0], reverse=True)

    def latest(self) -> t.Optional[t.Tuple[SemanticVersion, Release]]:
        releases = self.releases()
        return releases[0] if releases else None
