"""Tests for the command line entry point."""
from cli import main


class TestCli:

    def test_default_scenario(self, capsys):
        exit_code = main([])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "48 months (4y 0m)" in out
        assert "+12 months (longer)" in out

    def test_degree_and_qualification(self, capsys):
        exit_code = main(["--degree", "mr", "--qualification", "familyCare"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Total reduction:       12 months" in out
        assert "qualification reasons were capped" in out

    def test_rejected_scenario(self, capsys):
        exit_code = main(["--weekly-part", "10"])
        out = capsys.readouterr().out

        assert exit_code == 1
        assert "minFactor" in out
