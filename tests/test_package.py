"""Tests for the package metadata."""

import re
from pathlib import Path

import ksubset


def test_version_matches_setup():
    setup = (Path(__file__).parent.parent / "setup.py").read_text()
    assert 'INITFILE = "ksubset/__init__.py"' in setup
    assert re.match(r"^\d+\.\d+\.\d+$", ksubset.__version__)


def test_author_is_project():
    assert ksubset.__author__ == "ksubset developers"
    setup = (Path(__file__).parent.parent / "setup.py").read_text()
    assert 'author="ksubset developers"' in setup
    assert "github.com" not in setup
