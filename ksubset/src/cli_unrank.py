#!/usr/bin/env python

"""CLI tool to print the subset at a rank.

"""

import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from loguru import logger
from ksubset.src.utils import make_wide, KSubsetError
from ksubset.src.ksubset import KSubset


KWARGS = dict(
    prog="unrank",
    usage="ksubset unrank N K RANK [RANK ...]",
    help="print the subset at a lexicographic rank",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset unrank
        -------------------------------------------------------------------
        | Print the k-subsets of range(n) at the given ranks
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset unrank 5 3 9
    $ ksubset unrank 100 4 0 1 2 3921224
    """)
)


def get_parser_unrank(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for unrank.
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
    parser.add_argument("ranks", type=int, nargs="+", help="ranks in [0, C(n, k))")
    return parser


def run_unrank(args) -> int:
    """..."""
    try:
        ksub = KSubset(args.n, args.k)
        for rank in args.ranks:
            print("\t".join(str(i) for i in ksub.unrank(rank)))
    except KSubsetError as exc:
        logger.error(exc)
        return 1
    return 0


def main():
    parser = get_parser_unrank()
    args = parser.parse_args()
    raise SystemExit(run_unrank(args))


if __name__ == "__main__":
    main()
