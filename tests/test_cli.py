"""Tests for the command-line driver — output contract and uniform failure."""

from __future__ import annotations

import json
import logging

import pytest

from station_uptime.cli import EXIT_FAILURE, EXIT_OK, main
from station_uptime.config.runtime import ENV_LOG_LEVEL


class TestSuccess:
    def test_prints_results(self, write_input, capsys, sample_report, sample_output):
        status = main([str(write_input(sample_report))])
        assert status == EXIT_OK
        assert capsys.readouterr().out == sample_output

    def test_summary_goes_to_stderr(self, write_input, capsys, sample_report, sample_output):
        status = main([str(write_input(sample_report)), "--summary"])
        captured = capsys.readouterr()
        assert status == EXIT_OK
        assert captured.out == sample_output
        summary = json.loads(captured.err[captured.err.index("{"):])
        assert summary["num_stations"] == 3
        assert summary["stations_fully_up"] == 1

    def test_verbose_keeps_stdout_clean(self, write_input, capsys, sample_report, sample_output):
        status = main([str(write_input(sample_report)), "-vv"])
        assert status == EXIT_OK
        assert capsys.readouterr().out == sample_output


class TestFailure:
    @pytest.mark.parametrize(
        "text",
        [
            "[Stations]\n0 1\n1 1\n[Charger Availability Reports]\n1 0 10 true\n",
            "[Stations]\n0\n[Charger Availability Reports]\n",
            "[Stations]\n0 1\n[Charger Availability Reports]\n2 0 10 true\n",
            "[Stations]\n0 1\n[Charger Availability Reports]\n1 10 0 true\n",
            "[Stations]\n0 1\n[Charger Availability Reports]\n1 0 10 maybe\n",
            "[Stations]\n[Stations]\n0 1\n[Charger Availability Reports]\n1 0 10 true\n",
            "[Charger Availability Reports]\n1 0 10 true\n[Stations]\n0 1\n",
            "[Stations]\n[Charger Availability Reports]\n",
            "[Stations]\n0 1\n1 2\n[Charger Availability Reports]\n1 0 10 true\n",
        ],
    )
    def test_malformed_input(self, text, write_input, capsys):
        status = main([str(write_input(text))])
        assert status == EXIT_FAILURE
        assert capsys.readouterr().out == "ERROR\n"

    def test_missing_file(self, tmp_path, capsys):
        status = main([str(tmp_path / "nope.txt")])
        assert status == EXIT_FAILURE
        assert capsys.readouterr().out == "ERROR\n"

    def test_no_arguments(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert capsys.readouterr().out == "ERROR\n"

    def test_too_many_arguments(self, write_input, capsys, sample_report):
        path = str(write_input(sample_report))
        assert main([path, path]) == EXIT_FAILURE
        assert capsys.readouterr().out == "ERROR\n"

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "bin.txt"
        path.write_bytes(b"[Stations]\n0 1\n\xff\xfe\n")
        assert main([str(path)]) == EXIT_FAILURE
        assert capsys.readouterr().out == "ERROR\n"


class TestEnvironment:
    def test_invalid_log_level_warns(self, write_input, capsys, caplog, monkeypatch, sample_report, sample_output):
        monkeypatch.setenv(ENV_LOG_LEVEL, "LOUD")
        status = main([str(write_input(sample_report))])
        assert status == EXIT_OK
        assert capsys.readouterr().out == sample_output
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any(ENV_LOG_LEVEL in r.getMessage() for r in warnings)

    def test_valid_log_level_no_warning(self, write_input, caplog, monkeypatch, sample_report):
        monkeypatch.setenv(ENV_LOG_LEVEL, "error")
        assert main([str(write_input(sample_report))]) == EXIT_OK
        assert not [r for r in caplog.records if r.levelno == logging.WARNING]
