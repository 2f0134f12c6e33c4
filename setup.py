#!/usr/bin/env python
import os, re, sys

from setuptools import setup

def get_version(package):
    init_py = open(os.path.join(package, '__init__.py')).read()
    return re.search("__version__ = ['\"]([^'\"]+)['\"]", init_py).group(1)

def get_description(package):
    init_py = open(os.path.join(package, '__init__.py')).read()
    return re.search("__description__ = ['\"]([^'\"]+)['\"]", init_py).group(1)

def get_packages(packages):
    return [
        dirpath
        for dirpath, _, _ in os.walk(packages)
        if os.path.exists(os.path.join(dirpath, '__init__.py'))
    ]

setup(
    name="viewkit",
    version=get_version('viewkit'),
    description=get_description('viewkit'),
    packages=get_packages('viewkit'),
    package_dir={
        "viewkit": "viewkit",
    },
    python_requires=">=3.10",
    install_requires=[
        "anyio >= 4.0, < 5",
        "jinja2",
    ],
    extras_require={
        'test': [
            "coverage >= 5.3",
            "mypy",
            "pytest",
            "pytest-timeout",
            "anyio[trio]",
        ],
        'dev': [
            "bandit",
            "black",
            "pylint",
            "ruff",
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
