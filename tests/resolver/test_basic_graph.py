# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

from recipe_manager import ResolutionStrategy
from recipe_tools.recipe import RecipeIdentifier
from recipe_tools.versions import SemanticVersion


def test_no_dependencies(source, check_resolver_result):
    check_resolver_result(source, {}, {})


def test_highest_matching_version(source, check_resolver_result):
    source.add_release('test/a', '1.0.0')
    source.add_release('test/a', '1.1.0')
    source.add_release('test/a', '2.0.0')

    check_resolver_result(source, {'test/a': '>=1.0.0 <2.0.0'}, {'test/a': '1.1.0'})


def test_simple_dependencies(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', {'test/aa': '1.0.0', 'test/ab': '1.0.0'})
    source.add_release('test/b', '1.0.0', {'test/ba': '1.0.0', 'test/bb': '1.0.0'})
    source.add_release('test/aa', '1.0.0')
    source.add_release('test/ab', '1.0.0')
    source.add_release('test/ba', '1.0.0')
    source.add_release('test/bb', '1.0.0')

    check_resolver_result(
        source,
        {'test/a': '1.0.0', 'test/b': '1.0.0'},
        {
            'test/a': '1.0.0',
            'test/aa': '1.0.0',
            'test/ab': '1.0.0',
            'test/b': '1.0.0',
            'test/ba': '1.0.0',
            'test/bb': '1.0.0',
        },
    )


def test_transitive_dependency(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', {'test/b': '^1.0.0'})
    source.add_release('test/b', '1.0.0')
    source.add_release('test/b', '1.2.0')
    source.add_release('test/b', '2.0.0')

    check_resolver_result(source, {'test/a': '*'}, {'test/a': '1.0.0', 'test/b': '1.2.0'})


def test_shared_dependencies_with_overlapping_constraints(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', {'test/shared': '>=2.0.0,<4.0.0'})
    source.add_release('test/b', '1.0.0', {'test/shared': '>=3.0.0,<5.0.0'})
    for version in ['2.0.0', '3.0.0', '3.6.9', '4.0.0', '5.0.0']:
        source.add_release('test/shared', version)

    # the first dependency picks 3.6.9, which also satisfies the second one
    check_resolver_result(
        source,
        {'test/a': '1.0.0', 'test/b': '1.0.0'},
        {'test/a': '1.0.0', 'test/b': '1.0.0', 'test/shared': '3.6.9'},
    )


def test_requirements_are_case_insensitive_on_identifiers(source, check_resolver_result):
    source.add_release('Test/A', '1.0.0')

    check_resolver_result(source, {'TEST/a': '*'}, {'test/a': '1.0.0'})


def test_same_recipe_required_twice(source, check_resolver_result):
    source.add_release('test/a', '1.0.0')
    source.add_release('test/a', '1.4.0')
    source.add_release('test/a', '2.0.0')

    check_resolver_result(source, ['test/a@<1.5.0', 'test/a@>=1.0.0'], {'test/a': '1.4.0'})


def test_circular_dependency(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', {'test/b': '1.0.0'})
    source.add_release('test/b', '1.0.0', {'test/a': '^1.0.0'})

    check_resolver_result(source, {'test/a': '1.0.0'}, {'test/a': '1.0.0', 'test/b': '1.0.0'})


def test_self_dependency(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', {'test/a': '1.0.0'})

    check_resolver_result(source, {'test/a': '*'}, {'test/a': '1.0.0'})


def test_higher_score_wins_over_higher_direct_version(source, check_resolver_result):
    source.add_release('test/a', '2.0.0', {'test/b': '1.0.0'})
    source.add_release('test/a', '1.0.0', {'test/b': '5.0.0'})
    source.add_release('test/b', '1.0.0')
    source.add_release('test/b', '5.0.0')

    # 1.0.0 + 5.0.0 scores higher than 2.0.0 + 1.0.0
    check_resolver_result(source, {'test/a': '*'}, {'test/a': '1.0.0', 'test/b': '5.0.0'})


def test_prerelease_versions(source, check_resolver_result):
    source.add_release('test/a', '1.0.0')
    source.add_release('test/a', '1.1.0-beta.1')

    check_resolver_result(source, {'test/a': '>=1.1.0-alpha'}, {'test/a': '1.1.0-beta.1'})


def test_releases_with_urls_are_equivalent(source, check_resolver_result):
    source.add_release('test/a', '1.0.0', url='https://example.com/a/1.0.0')
    source.add_release('test/a', '1.1.0', url='https://example.com/a/1.1.0')

    check_resolver_result(source, {'test/a': '*'}, {'test/a': '1.1.0'})


class ConstantStrategy(ResolutionStrategy):
    def score(self, resolved: t.Mapping[RecipeIdentifier, SemanticVersion]) -> int:
        return 0


class LowestStrategy(ResolutionStrategy):
    def score(self, resolved: t.Mapping[RecipeIdentifier, SemanticVersion]) -> t.Tuple[int, ...]:
        return tuple(-version.major for version in resolved.values())


def test_ties_keep_the_highest_version(source, check_resolver_result):
    source.add_release('test/a', '1.0.0')
    source.add_release('test/a', '3.0.0')
    source.add_release('test/a', '2.0.0')

    check_resolver_result(
        source, {'test/a': '*'}, {'test/a': '3.0.0'}, strategy=ConstantStrategy()
    )


def test_custom_strategy(source, check_resolver_result):
    source.add_release('test/a', '1.0.0')
    source.add_release('test/a', '3.0.0')
    source.add_release('test/a', '2.0.0')

    check_resolver_result(source, {'test/a': '*'}, {'test/a': '1.0.0'}, strategy=LowestStrategy())
