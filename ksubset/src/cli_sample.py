#!/usr/bin/env python

"""Load JSON file to draw (more) random subsets.

"""

import sys
import textwrap
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from pathlib import Path
from loguru import logger
from pydantic import ValidationError
from ksubset.src.utils import make_wide, KSubsetError
from ksubset.src.schema import Project
from ksubset.src.run_sampling import run_sampling


KWARGS = dict(
    prog="sample",
    usage="ksubset sample JSON [options]",
    help="draw random subsets and checkpoint the project",
    formatter_class=make_wide(RawDescriptionHelpFormatter),
    description=textwrap.dedent("""
        -------------------------------------------------------------------
        | ksubset sample
        -------------------------------------------------------------------
        | Draw random subsets, append them to the samples file
        -------------------------------------------------------------------
    """),
    epilog=textwrap.dedent(r"""
    Examples
    --------
    $ ksubset sample TEST.json -s 1000
    $ ksubset sample TEST.json -s 1000 --distinct --print
    """)
)


def get_parser_sample(parser: ArgumentParser | None = None) -> ArgumentParser:
    """Return a parser for sample.
    """
    kwargs = dict(KWARGS)
    if parser:
        kwargs['name'] = kwargs.pop("prog")
        parser = parser.add_parser(**kwargs)
    else:
        kwargs.pop("help")
        parser = ArgumentParser(**kwargs)

    parser.add_argument("json", type=Path, help="A project JSON file")
    parser.add_argument("-s", "--nsamples", type=int, metavar="int", default=1, help="number of subsets to draw.")
    parser.add_argument("-d", "--distinct", action="store_true", help="draw distinct subsets within this batch.")
    parser.add_argument("-p", "--print", action="store_true", help="also write the drawn subsets to stdout.")
    return parser


def run_sample(args) -> int:
    """..."""
    try:
        proj = Project.load_json(args.json)
        subs = run_sampling(proj, args.nsamples, args.distinct)
        if args.print:
            for sub in subs:
                sys.stdout.write("\t".join(str(i) for i in sub) + "\n")
    except (KSubsetError, ValidationError, OSError) as exc:
        logger.error(exc)
        return 1
    return 0


def main():
    parser = get_parser_sample()
    args = parser.parse_args()
    raise SystemExit(run_sample(args))


if __name__ == "__main__":
    main()
