# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Semantic versions and version requirements"""

import re
import typing as t
from functools import total_ordering

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema
from semantic_version import SimpleSpec, Version

# ">= 1.0.0" -> ">=1.0.0"
_OPERATOR_SPACE_RE = re.compile(r'(<=|>=|==|!=|~=|<|>|=|\^|~)\s+')
_CLAUSE_SEPARATOR_RE = re.compile(r'[\s,]+')


@total_ordering
class SemanticVersion:
    """
    Represents the version of a recipe release, `major.minor.patch[-prerelease]`
    """

    __slots__ = ('_semver',)

    def __init__(self, version: t.Union[str, Version, 'SemanticVersion']) -> None:
        if isinstance(version, SemanticVersion):
            self._semver: Version = version._semver
        elif isinstance(version, Version):
            self._semver = version
        else:
            self._semver = Version(version.strip())

    @classmethod
    def of(cls, major: int, minor: int = 0, patch: int = 0) -> 'SemanticVersion':
        return cls(Version(major=major, minor=minor, patch=patch))

    @classmethod
    def parse(cls, text: str) -> 'SemanticVersion':
        return cls(text)

    @property
    def major(self) -> int:
        return self._semver.major

    @property
    def minor(self) -> int:
        return self._semver.minor

    @property
    def patch(self) -> int:
        return self._semver.patch

    @property
    def semver(self) -> Version:
        return self._semver

    def encode(self) -> str:
        return str(self._semver)

    @classmethod
    def _validate(cls, value: t.Any) -> 'SemanticVersion':
        if not isinstance(value, (str, Version, SemanticVersion)):
            raise ValueError(f'Invalid version: {value!r}')

        return cls(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                other = SemanticVersion(other)
            except ValueError:
                return NotImplemented
        elif not isinstance(other, SemanticVersion):
            return NotImplemented

        return self._semver == other._semver

    def __lt__(self, other: object) -> bool:
        if isinstance(other, str):
            other = SemanticVersion(other)
        elif not isinstance(other, SemanticVersion):
            return NotImplemented

        return self._semver < other._semver

    def __hash__(self) -> int:
        return hash(self._semver)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f'SemanticVersion("{self}")'

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(when_used='always'),
        )


class Requirement:
    """
    Predicate selecting acceptable versions.

    Accepts everything `semantic_version.SimpleSpec` understands
    (``*``, ``1.0.0``, ``==1.0.0``, ``^1.2.0``, ``>=1.0.0,<2.0.0``)
    and additionally clauses separated by whitespace (``>=1.0.0 <2.0.0``).
    """

    __slots__ = ('_text', '_spec')

    def __init__(self, text: t.Union[str, 'Requirement']) -> None:
        if isinstance(text, Requirement):
            self._text: str = text._text
            self._spec: SimpleSpec = text._spec
            return

        self._text = self.normalize(text)
        self._spec = SimpleSpec(self._text)

    @staticmethod
    def normalize(text: str) -> str:
        text = _OPERATOR_SPACE_RE.sub(r'\1', text.strip())
        clauses = [clause for clause in _CLAUSE_SEPARATOR_RE.split(text) if clause]
        if not clauses:
            raise ValueError('Empty version requirement')

        return ','.join(clauses)

    @classmethod
    def parse(cls, text: str) -> 'Requirement':
        return cls(text)

    @classmethod
    def any(cls) -> 'Requirement':
        return cls('*')

    @classmethod
    def exact(cls, version: t.Union[str, SemanticVersion]) -> 'Requirement':
        return cls(f'=={SemanticVersion(version)}')

    @classmethod
    def validate(cls, text: str) -> bool:
        try:
            cls(text)
        except ValueError:
            return False

        return True

    def is_satisfied_by(self, version: t.Union[str, SemanticVersion]) -> bool:
        return self._spec.match(SemanticVersion(version).semver)

    def __contains__(self, version: t.Union[str, SemanticVersion]) -> bool:
        return self.is_satisfied_by(version)

    def encode(self) -> str:
        return self._text

    @classmethod
    def _validate(cls, value: t.Any) -> 'Requirement':
        if not isinstance(value, (str, Requirement)):
            raise ValueError(f'Invalid version requirement: {value!r}')

        return cls(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                other = Requirement(other)
            except ValueError:
                return NotImplemented
        elif not isinstance(other, Requirement):
            return NotImplemented

        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f'Requirement("{self}")'

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(when_used='always'),
        )
