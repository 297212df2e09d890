#!/usr/bin/env python

"""Write JSON file to init a sampling project

"""

import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from pathlib import Path
from loguru import logger
from pydantic import ValidationError
from ksubset import __version__ as VERSION
from ksubset.src.utils import make_wide
from ksubset.src.schema import Project


KWARGS = dict(
    prog="init",
    usage="ksubset init N K [options]",
    help="create a project JSON file for random subset sampling",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset init
        -------------------------------------------------------------------
        | Create a project JSON file
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset init 100 4 -n TEST -w /tmp
    $ ksubset init 1000 10 -n TEST -w /tmp -r 123
    """)
)


def get_parser_init(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for init.
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
    parser.add_argument("-n", "--name", type=str, metavar="str", default="ksubset", help="name prefix for output files.")
    parser.add_argument("-w", "--workdir", type=Path, metavar="path", default=".", help="working directory path.")
    parser.add_argument("-r", "--random-seed", type=int, metavar="int", help="optional: random number generator seed.")
    return parser


def run_init(args) -> int:
    """..."""
    try:
        proj = Project(
            version=VERSION,
            name=args.name,
            workdir=args.workdir,
            n=args.n,
            k=args.k,
            random_seed=args.random_seed,
        )
        proj.save_json()
        logger.info(f"wrote project {proj.json_file}")
        logger.debug(proj)
    except ValidationError as exc:
        logger.error(exc)
        return 1
    return 0


def main():
    parser = get_parser_init()
    args = parser.parse_args()
    raise SystemExit(run_init(args))


if __name__ == "__main__":
    main()
