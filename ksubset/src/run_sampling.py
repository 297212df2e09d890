#!/usr/bin/env python

"""Draw random subsets for a project and checkpoint the RNG.

The samples file is a tab-delimited format, one subset per line, with
columns:
0. rank of the subset
1..k. the subset elements in ascending order

Sampling appends to the file, and the Project JSON stores the number of
samples drawn and the generator state so that a later run continues
the same random stream.
"""

from loguru import logger
import numpy as np
from ksubset.src.combinations import random_sample_via_rank
from ksubset.src.schema import Project, RNGStateModel
from ksubset.src.subset import Subset


def draw_samples(proj: Project, nsamples: int, distinct: bool = False) -> list[Subset]:
    """Return nsamples random subsets and advance the project's RNG state.

    With distinct=True the subsets of this batch are all different,
    otherwise each one is drawn independently and may repeat.
    """
    ksub = proj.ksubset()
    rng = proj.get_rng()

    if distinct:
        subs = random_sample_via_rank(ksub, nsamples, rng)
    else:
        cursor = ksub.random_cursor(rng)
        buf = np.zeros(ksub.k, dtype=np.int64)
        subs = []
        for _ in range(nsamples):
            cursor.next(buf)
            subs.append(Subset(ksub.n, ksub.k, buf))

    proj.rng_state = RNGStateModel.from_rng(rng)
    proj.nsampled += len(subs)
    return subs


def run_sampling(proj: Project, nsamples: int, distinct: bool = False) -> list[Subset]:
    """Draw samples, append them to the samples file and save the JSON."""
    subs = draw_samples(proj, nsamples, distinct)
    ksub = proj.ksubset()
    with open(proj.samples_file, 'a') as out:
        for sub in subs:
            row = [ksub.rank(sub), *sub]
            out.write("\t".join(str(i) for i in row) + "\n")
    proj.save_json()
    logger.info(f"wrote {len(subs)} samples to {proj.samples_file} ({proj.nsampled} total)")
    return subs
