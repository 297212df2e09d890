#!/usr/bin/env python

"""CLI tool to print info about a subset space or project JSON file.

"""

import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from pathlib import Path
from loguru import logger
from ksubset.src.utils import make_wide, KSubsetError
from ksubset.src.ksubset import KSubset
from ksubset.src.schema import Project


KWARGS = dict(
    prog="info",
    usage="ksubset info N K [options]",
    help="print size, first and last subset of a space",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset info
        -------------------------------------------------------------------
        | Print the number of k-subsets of range(n) and the extremes
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset info 5 3
    $ ksubset info --json test.json
    """)
)


def get_parser_info(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for info.
    """
    kwargs = dict(KWARGS)
    # create parser or connect as subparser to cli parser
    if parser:
        kwargs['name'] = kwargs.pop("prog")
        parser = parser.add_parser(**kwargs)
    else:
        kwargs.pop("help")
        parser = ArgumentParser(**kwargs)

    # add arguments
    parser.add_argument("n", type=int, nargs="?", help="size of the superset")
    parser.add_argument("k", type=int, nargs="?", help="size of the subsets")
    parser.add_argument("-j", "--json", type=Path, metavar="path", help="print a project JSON file instead.")
    return parser


def run_info(args) -> int:
    """..."""
    try:
        if args.json:
            proj = Project.load_json(args.json)
            print(proj)
            ksub = proj.ksubset()
        elif args.n is None or args.k is None:
            logger.error("info requires N K or --json")
            return 1
        else:
            ksub = KSubset(args.n, args.k)
        print(f"n\t{ksub.n}")
        print(f"k\t{ksub.k}")
        print(f"size\t{ksub.size()}")
        print(f"start\t{ksub.start()}")
        print(f"end\t{ksub.end()}")
    except KSubsetError as exc:
        logger.error(exc)
        return 1
    except Exception:
        logger.exception("Error during info.")
        return 1
    return 0


def main():
    parser = get_parser_info()
    args = parser.parse_args()
    raise SystemExit(run_info(args))


if __name__ == "__main__":
    main()
