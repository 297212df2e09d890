#!/usr/bin/env python

"""Split k-subset enumeration jobs into rank intervals and samples.

Large enumerations can be split into chunks of consecutive ranks so
that each chunk is enumerated lazily and independently, e.g., by
separate workers. Random samples draw distinct ranks and unrank them,
so no enumeration is needed to sample from a very large space.
"""

from typing import Iterator
import numpy as np
from numpy.random import default_rng
from loguru import logger
from ksubset.src.ksubset import KSubset
from ksubset.src.sequence import SubsetSequence
from ksubset.src.subset import Subset
from ksubset.src.utils import InvalidArgumentError


def get_chunks_info(total: int, max_chunk_size: int) -> list[tuple[int, int]]:
    """Splits the rank interval [0, total) into chunks.

    Parameters
    ----------
    total: int
        The number of ranks, e.g., KSubset.size().
    max_chunk_size: int
        Max number of ranks in a chunk.

    Returns
    -------
        List of (start, end) half-open rank intervals.
    """
    if max_chunk_size < 1:
        raise InvalidArgumentError(f"max_chunk_size must be positive: {max_chunk_size}")
    chunks = []
    start = 0

    while start < total:
        end = min(start + max_chunk_size, total)
        chunks.append((start, end))
        start = end

    return chunks


def get_subsets_from_chunk(ksub: KSubset, start: int, end: int) -> SubsetSequence:
    """Return a lazy view of the subsets with ranks in [start, end).

    Parameters
    ----------
    ksub: KSubset
        The subset space.
    start: int
        Rank of the first subset of the chunk.
    end: int
        Rank one past the last subset of the chunk.
    """
    if not 0 <= start < end <= ksub.size():
        raise InvalidArgumentError(f"Invalid chunk [{start}, {end}) of {ksub}")
    return ksub.range(ksub.unrank(start), ksub.unrank(end - 1))


def iter_chunks_full(ksub: KSubset, max_size: int) -> Iterator[SubsetSequence]:
    """Generator of lazy chunk views over all subsets, in rank order."""
    chunk_ranges = get_chunks_info(ksub.size(), max_size)
    logger.info(f"{len(chunk_ranges)} chunks of <= {max_size} subsets")
    for start, end in chunk_ranges:
        yield get_subsets_from_chunk(ksub, start, end)


def sample_ranks(total: int, size: int, rng: np.random.Generator | int | None = None) -> list[int]:
    """Return size distinct ranks drawn uniformly from [0, total).

    Robert Floyd's sampling algorithm: size draws, no matter how large
    the population is.
    """
    if not 0 <= size <= total:
        raise InvalidArgumentError(f"Cannot sample {size} distinct ranks from {total}")
    if not isinstance(rng, np.random.Generator):
        rng = default_rng(rng)

    selected = set()
    ranks = []
    for j in range(total - size, total):
        rank = int(rng.integers(0, j + 1))
        if rank in selected:
            rank = j
        selected.add(rank)
        ranks.append(rank)
    return ranks


def random_sample_via_rank(ksub: KSubset, size: int, rng: np.random.Generator | int | None = None) -> list[Subset]:
    """Return size distinct subsets drawn uniformly at random."""
    return [ksub.unrank(rank) for rank in sample_ranks(ksub.size(), size, rng)]


def iter_chunks_random(
    ksub: KSubset,
    size: int,
    max_size: int,
    rng: np.random.Generator | int | None = None,
) -> Iterator[list[Subset]]:
    """Generator of chunks of distinct random subsets over the sampled number."""
    if max_size < 1:
        raise InvalidArgumentError(f"max_size must be positive: {max_size}")
    subs = random_sample_via_rank(ksub, size, rng)
    for i in range(0, len(subs), max_size):
        yield subs[i: i + max_size]


if __name__ == "__main__":

    # iterate over ordered chunks of 100 subsets
    KSUB = KSubset(100, 4)
    for SUB in next(iter_chunks_full(KSUB, 100)).limit(5):
        print(SUB)

    # iterate over random chunks of 100 from 5000 sampled subsets
    for SUB in next(iter_chunks_random(KSubset(200, 4), 5000, 100, 123))[:5]:
        print(SUB)
