#!/usr/bin/env python

""" the main CLI for calling ksubset """

from ksubset.src.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
