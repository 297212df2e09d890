#!/usr/bin/env python

"""ksubset: rank, unrank and lazily enumerate k-subsets.

Treats the set of all k-element subsets of range(n) as an addressable
sequence: sizes via exact 64-bit binomial coefficients, ranks via the
combinatorial number system, and lazy enumeration via cursors that
hold a single subset at a time.

Change log
==========

1.0
---
- require Python>=3.10
- require pydantic>=2.0
- random subsets drawn with RANKSB instead of reservoir sampling
"""

__version__ = "1.0.0"
__author__ = "ksubset developers"

from loguru import logger
from ksubset.src.utils import KSubsetError, InvalidArgumentError, ArithmeticOverflowError
from ksubset.src.binomial import binomial, gcd
from ksubset.src.subset import Subset
from ksubset.src.cursors import Cursor, SequentialCursor, BoundedCursor, RandomCursor, random_cursor
from ksubset.src.sequence import IteratorState, SubsetIterator, SubsetSequence
from ksubset.src.ksubset import KSubset
from ksubset.src.random_subset import random_subset

# library use is silent until set_log_level() is called.
logger.disable("ksubset")
