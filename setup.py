#!/usr/bin/env python3
"""
Setup script for yamlcompose.

yamlcompose turns YAML parser events into node graphs (the "compose" step
of a YAML loader). YAML text is tokenised and parsed by PyYAML; the
composer itself is pure Python.

Install for development with tests:
    pip install -e '.[test]'
"""

from setuptools import setup

setup(
    name='yamlcompose',
    version='0.1.0',
    description='Compose YAML event streams into node graphs',
    packages=['yamlcompose'],
    package_data={'yamlcompose': ['__init__.pyi']},
    python_requires='>=3.8',
    install_requires=[
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
