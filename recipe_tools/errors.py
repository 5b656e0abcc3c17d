# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

if t.TYPE_CHECKING:
    from recipe_tools.recipe import Dependency, RecipeIdentifier
    from recipe_tools.versions import SemanticVersion


class FatalError(RuntimeError):
    """Generic unrecoverable runtime error"""

    exit_code = 2

    def __init__(self, *args: t.Any, **kwargs: t.Any) -> None:
        super().__init__(*args)
        exit_code = kwargs.pop('exit_code', None)
        if exit_code:
            self.exit_code = exit_code


class InternalError(RuntimeError):
    """Internal Error, should report to us"""

    def __init__(self, extra_msg: t.Optional[str] = None):
        err = (
            'This is an internal error of the recipe manager. '
            'Please report it together with the traceback log. Thanks for reporting! '
        )

        if extra_msg:
            err = extra_msg + '\n' + err

        super().__init__(err)


class ResolutionError(FatalError):
    """
    Base class of all dependency resolution failures.

    Resolution errors are chained with ``raise ... from ...``,
    so the whole path from the failed root dependency
    down to the deepest failure can be recovered with :meth:`chain`.
    """

    @property
    def cause(self) -> t.Optional[BaseException]:
        return self.__cause__

    def chain(self) -> t.List[BaseException]:
        """
        Return this error followed by all its causes, the deepest one last.
        """
        errors: t.List[BaseException] = []
        current: t.Optional[BaseException] = self
        while current is not None and current not in errors:
            errors.append(current)
            if isinstance(current, ResolutionError):
                current = current.cause
            else:
                current = current.__cause__

        return errors


class ConflictError(ResolutionError):
    """A package is already resolved to a version that does not satisfy a new requirement"""

    def __init__(
        self,
        identifier: 'RecipeIdentifier',
        version: 'SemanticVersion',
        dependency: 'Dependency',
    ) -> None:
        self.identifier = identifier
        self.version = version
        self.dependency = dependency

        super().__init__(f'{identifier}@{version} does not satisfy {dependency}')


class UnsatisfiableError(ResolutionError):
    """No candidate version of a package leads to a successful resolution"""

    def __init__(self, dependency: 'Dependency') -> None:
        self.dependency = dependency

        super().__init__(f'Could not satisfy {dependency}')


class BranchesExhaustedError(ResolutionError):
    """Every one of the concurrently evaluated branches failed"""

    def __init__(self, errors: t.Sequence[BaseException]) -> None:
        if not errors:
            raise InternalError('"BranchesExhaustedError" requires at least one error')

        self.errors = list(errors)

        super().__init__(
            f'All {len(self.errors)} candidates failed, the last one with: {self.errors[-1]}'
        )

    @property
    def cause(self) -> t.Optional[BaseException]:
        return self.__cause__ or self.errors[-1]


class NoElementsError(ResolutionError):
    """Cannot select an element from an empty sequence"""


class ProcessingError(FatalError):
    pass


class SourceError(ProcessingError):
    pass


class FetchingError(SourceError):
    pass


class RecipeNotFoundError(SourceError):
    def __init__(self, identifier: 'RecipeIdentifier') -> None:
        self.identifier = identifier

        super().__init__(f'Recipe "{identifier}" was not found')
