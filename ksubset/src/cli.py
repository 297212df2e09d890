#!/usr/bin/env python

"""Command line tool of ksubset

Examples
--------
>>> # size, first and last subset of the 3-subsets of range(5)
>>> ksubset info 5 3
>>>
>>> # rank of a subset, and subset of a rank
>>> ksubset rank 5 3 2 3 4
>>> ksubset unrank 5 3 9
>>>
>>> # init a sampling project and draw 100 random subsets
>>> ksubset init 100 4 -n TEST -w /tmp -r 123
>>> ksubset sample /tmp/TEST.json -s 100
"""

from textwrap import dedent
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from ksubset import __version__ as VERSION
from ksubset.src.utils import make_wide
from ksubset.src.logger_setup import set_log_level
from ksubset.src.cli_info import get_parser_info, run_info
from ksubset.src.cli_rank import get_parser_rank, run_rank
from ksubset.src.cli_unrank import get_parser_unrank, run_unrank
from ksubset.src.cli_enumerate import get_parser_enumerate, run_enumerate
from ksubset.src.cli_init import get_parser_init, run_init
from ksubset.src.cli_sample import get_parser_sample, run_sample


def setup_parsers() -> ArgumentParser:
    """Parse command and subcommand args"""
    parser = ArgumentParser(
        "ksubset",
        usage="ksubset [subcommand] --help",
        formatter_class=make_wide(RawDescriptionHelpFormatter),
        description=dedent("""
            -----------------------------------------------------
            | %(prog)s: k-subset ranking and enumeration       |
            -----------------------------------------------------

            Examples
            --------
            * rank, unrank and enumerate the 3-subsets of range(5)
            $ ksubset rank 5 3 2 3 4
            $ ksubset unrank 5 3 9
            $ ksubset enumerate 5 3 --start 0,3,4 --end 2,3,4

            * sample random subsets in a checkpointed project
            $ ksubset init 100 4 -n test -w /tmp -r 123
            $ ksubset sample /tmp/test.json -s 1000
            """),
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], metavar="STR", default="INFO", help="stderr logging level (DEBUG, INFO, WARNING, ERROR; default=INFO)")
    subparsers = parser.add_subparsers(
        prog="%(prog)s", required=True,
        title="subcommands", dest="subcommand",
        metavar="--------------",
        help="-----------------------------------------------------",
    )
    get_parser_info(subparsers)
    get_parser_rank(subparsers)
    get_parser_unrank(subparsers)
    get_parser_enumerate(subparsers)
    get_parser_init(subparsers)
    get_parser_sample(subparsers)
    return parser


COMMANDS = {
    "info": run_info,
    "rank": run_rank,
    "unrank": run_unrank,
    "enumerate": run_enumerate,
    "init": run_init,
    "sample": run_sample,
}


def main(cmd: str = None) -> int:
    """Command line tool."""
    parser = setup_parsers()
    args = parser.parse_args(cmd.split() if cmd is not None else None)

    # set the logging
    set_log_level(args.log_level)

    # require a subcommand
    if not args.subcommand:
        parser.print_help()
        return 1
    return COMMANDS[args.subcommand](args)


if __name__ == "__main__":
    raise SystemExit(main())
