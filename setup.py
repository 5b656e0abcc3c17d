# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

import io
import os

import setuptools

NAME = 'recipe_manager'
SHORT_DESCRIPTION = 'Concurrent transitive dependency resolver for recipes'
LICENSE = 'Apache License 2.0'
REQUIRES = [
    'colorama',
    'pydantic>=2',
    'pydantic-core',
    'pydantic-settings',
    'semantic_version>=2.8',
    'typing_extensions;python_version<"3.11"',
]
EXTRAS_REQUIRE = {
    'test': [
        'pytest',
    ],
}

info = {}  # type: ignore
path = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(path, 'README.md'), mode='r', encoding='utf-8') as readme:
    LONG_DESCRIPTION = readme.read()

with io.open(
    os.path.join(path, 'recipe_tools', '__version__.py'), mode='r', encoding='utf-8'
) as f:
    exec(f.read(), info)  # nosec

setuptools.setup(
    name=NAME,
    description=SHORT_DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license=LICENSE,
    version=info['__version__'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    packages=setuptools.find_packages(
        include=('recipe_manager', 'recipe_manager.*', 'recipe_tools', 'recipe_tools.*')
    ),
    scripts=[],
    install_requires=REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    python_requires='>=3.8',
    include_package_data=True,
)
