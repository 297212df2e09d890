#!/usr/bin/env python

"""Setup instructions.

Install ksubset with pip:
    pip install ksubset

For developers, from a source checkout:
    pip install -e .[test]
"""

import re
from setuptools import setup

# Fetch version from ksubset/__init__.py
INITFILE = "ksubset/__init__.py"
CUR_VERSION = (
    re.search(
        r"^__version__ = ['\"]([^'\"]*)['\"]",
        open(INITFILE, "r").read(),
        re.M)
    .group(1))


setup(
    name="ksubset",
    packages=["ksubset", "ksubset.src", "ksubset.jit"],
    version=CUR_VERSION,
    author="ksubset developers",
    description="Ranking, unranking and lazy enumeration of k-subsets",
    long_description=open('README.rst').read(),
    long_description_content_type='text/x-rst',
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "numba",
        "pydantic>=2.0",
        "loguru",
    ],
    extras_require={
        "test": ["pytest", "scipy"],
    },
    entry_points={'console_scripts': ['ksubset = ksubset.src.cli:main']},
    license='GPLv3',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
