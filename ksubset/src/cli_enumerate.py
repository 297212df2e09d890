#!/usr/bin/env python

"""CLI tool to enumerate subsets in lexicographic order.

Writes one subset per line, tab-delimited, optionally prefixed by its
rank.
"""

import sys
import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from itertools import islice
from loguru import logger
from ksubset.src.utils import make_wide, parse_elements, KSubsetError
from ksubset.src.ksubset import KSubset
from ksubset.src.sequence import SubsetIterator


KWARGS = dict(
    prog="enumerate",
    usage="ksubset enumerate N K [options]",
    help="enumerate subsets in lexicographic order",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset enumerate
        -------------------------------------------------------------------
        | Write all or a range of the k-subsets of range(n) to stdout
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset enumerate 5 3
    $ ksubset enumerate 5 3 --start 0,3,4
    $ ksubset enumerate 5 3 --start 0,3,4 --end 1,2,4 --ranks
    $ ksubset enumerate 100 4 --limit 1000 > qrts.tsv
    """)
)


def get_parser_enumerate(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for enumerate.
    """
    kwargs = dict(KWARGS)
    if parser:
        kwargs['name'] = kwargs.pop("prog")
        parser = parser.add_parser(**kwargs)
    else:
        kwargs.pop("help")
        parser = ArgumentParser(**kwargs)

    parser.add_argument("n", type=int, help="size of the superset")
    parser.add_argument("k", type=int, help="size of the subsets")
    parser.add_argument("-s", "--start", type=parse_elements, metavar="a,b,..", help="first subset (default: the first).")
    parser.add_argument("-e", "--end", type=parse_elements, metavar="a,b,..", help="last subset (default: the last).")
    parser.add_argument("-l", "--limit", type=int, metavar="int", help="write at most this many subsets.")
    parser.add_argument("-r", "--ranks", action="store_true", help="prefix each line with the subset rank.")
    return parser


def run_enumerate(args) -> int:
    """..."""
    if args.limit is not None and args.limit < 0:
        logger.error(f"--limit must be >= 0, got {args.limit}")
        return 1
    try:
        ksub = KSubset(args.n, args.k)
        start = args.start if args.start is not None else ksub.start()
        if args.end is not None:
            subs = ksub.range(start, args.end)
        else:
            subs = SubsetIterator(ksub.cursor(start), ksub.n)
        rank = ksub.rank(start)
        for sub in islice(subs, args.limit):
            row = [rank, *sub] if args.ranks else list(sub)
            sys.stdout.write("\t".join(str(i) for i in row) + "\n")
            rank += 1
    except KSubsetError as exc:
        logger.error(exc)
        return 1
    return 0


def main():
    parser = get_parser_enumerate()
    args = parser.parse_args()
    raise SystemExit(run_enumerate(args))


if __name__ == "__main__":
    main()
