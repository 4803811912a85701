"""Tests for the inspection CLI."""

import json

import pytest

from forwarded.cli import main

from conftest import RFC_EXAMPLE


class TestCLI:
    """Test command-line inspection."""

    def test_default_policy(self, capsys):
        exit_code = main(["-H", f"Forwarded: {RFC_EXAMPLE}", "-H", "X-Forwarded-Host: other.example.com"])

        assert exit_code == 0
        out = capsys.readouterr().out.splitlines()
        assert "for: 192.0.2.43" in out
        assert "by: 203.0.113.60" in out
        assert "host: example.com" in out
        assert "proto: http" in out

    def test_json_output(self, capsys):
        main(["-H", "X-Forwarded-For: 1.1.1.1, 2.2.2.2", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data == {"by": "", "for": "1.1.1.1", "host": "", "proto": ""}

    def test_strategies(self, capsys):
        main(["-H", "Forwarded: for=192.0.2.43", "-H", "X-Forwarded-For: 1.1.1.1", "--strategies", "legacy", "--json"])

        assert json.loads(capsys.readouterr().out)["for"] == "1.1.1.1"

    def test_keep_case(self, capsys):
        main(["-H", "Forwarded: host=Example.COM", "--keep-case", "--json"])

        assert json.loads(capsys.readouterr().out)["host"] == "Example.COM"

    def test_repeated_header_reads_first(self, capsys):
        main(["-H", "X-Forwarded-For: 1.1.1.1", "-H", "X-Forwarded-For: 2.2.2.2", "--json"])

        assert json.loads(capsys.readouterr().out)["for"] == "1.1.1.1"

    def test_invalid_header_line(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["-H", "not a header"])
        assert exc_info.value.code == 2

    def test_unknown_strategy(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--strategies", "bogus"])
        assert exc_info.value.code == 2
