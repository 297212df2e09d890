"""Tests for the ksubset command line tool."""

import pytest

from ksubset.src.cli import main
from ksubset.src.schema import Project


class TestCommands:

    def test_info(self, capsys):
        assert main("info 5 3") == 0
        out = capsys.readouterr().out
        assert "size\t10" in out
        assert "start\t[0, 1, 2]" in out
        assert "end\t[2, 3, 4]" in out

    def test_info_requires_space(self):
        assert main("info") == 1

    def test_info_invalid(self):
        assert main("info 3 5") == 1

    def test_rank(self, capsys):
        assert main("rank 5 3 2 3 4") == 0
        assert capsys.readouterr().out == "9\n"

    def test_rank_non_member(self, capsys):
        assert main("rank 5 3 4 3 2") == 1
        assert capsys.readouterr().out == ""

    def test_unrank(self, capsys):
        assert main("unrank 5 3 0 5 9") == 0
        assert capsys.readouterr().out == "0\t1\t2\n0\t3\t4\n2\t3\t4\n"

    def test_unrank_invalid(self):
        assert main("unrank 5 3 10") == 1

    def test_enumerate(self, capsys):
        assert main("enumerate 4 2") == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert lines == ["0\t1", "0\t2", "0\t3", "1\t2", "1\t3", "2\t3"]

    def test_enumerate_range_with_ranks(self, capsys):
        assert main("enumerate 5 3 --start 0,3,4 --end 1,3,4 --ranks") == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert lines == ["5\t0\t3\t4", "6\t1\t2\t3", "7\t1\t2\t4", "8\t1\t3\t4"]

    def test_enumerate_limit(self, capsys):
        assert main("enumerate 100 4 --limit 3") == 0
        assert capsys.readouterr().out.count("\n") == 3

    def test_enumerate_negative_limit(self, capsys):
        assert main("enumerate 5 3 --limit -1") == 1
        assert capsys.readouterr().out == ""

    def test_enumerate_zero_limit(self, capsys):
        assert main("enumerate 5 3 --limit 0") == 0
        assert capsys.readouterr().out == ""

    def test_enumerate_invalid_start(self):
        assert main("enumerate 5 3 --start 3,2,1") == 1

    def test_init_and_sample(self, tmp_path, capsys):
        assert main(f"init 20 4 -n test -w {tmp_path} -r 7") == 0
        json_file = tmp_path / "test.json"
        assert json_file.exists()

        assert main(f"sample {json_file} -s 5 --print") == 0
        out = capsys.readouterr().out.strip().split("\n")
        assert len(out) == 5
        assert Project.load_json(json_file).nsampled == 5
        assert len((tmp_path / "test.samples.tsv").read_text().strip().split("\n")) == 5

    def test_init_invalid(self, tmp_path):
        assert main(f"init 3 4 -n bad -w {tmp_path}") == 1
        assert not (tmp_path / "bad.json").exists()

    def test_sample_missing_json(self, tmp_path):
        assert main(f"sample {tmp_path / 'missing.json'}") == 1

    def test_requires_subcommand(self):
        with pytest.raises(SystemExit):
            main("")
