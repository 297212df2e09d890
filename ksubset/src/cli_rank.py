#!/usr/bin/env python

"""CLI tool to print the rank of a subset.

"""

import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from loguru import logger
from ksubset.src.utils import make_wide, KSubsetError
from ksubset.src.ksubset import KSubset


KWARGS = dict(
    prog="rank",
    usage="ksubset rank N K [ELEMENT ...]",
    help="print the lexicographic rank of a subset",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset rank
        -------------------------------------------------------------------
        | Print the rank of an ascending k-subset of range(n)
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset rank 5 3 0 1 2
    $ ksubset rank 5 3 2 3 4
    """)
)


def get_parser_rank(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for rank.
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
    parser.add_argument("elements", type=int, nargs="*", help="subset elements in ascending order")
    return parser


def run_rank(args) -> int:
    """..."""
    try:
        ksub = KSubset(args.n, args.k)
        if not ksub.contains(args.elements):
            logger.error(f"{args.elements} is not a member of {ksub}")
            return 1
        print(ksub.rank(args.elements))
    except KSubsetError as exc:
        logger.error(exc)
        return 1
    return 0


def main():
    parser = get_parser_rank()
    args = parser.parse_args()
    raise SystemExit(run_rank(args))


if __name__ == "__main__":
    main()
