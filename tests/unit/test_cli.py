"""Tests for the pattern-catalog command line."""

import pytest

from pattern_catalog.cli import build_argument_parser, main


def test_list_prints_numbered_demos(capsys):
    assert main(["list"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert lines[0] == "1. singleton - Ensures only one instance of a class is created."
    assert lines[-1].startswith("8. strategy - ")


def test_run_single_demo_without_headers(capsys):
    assert main(["run", "--no-headers", "decorator"]) == 0

    assert capsys.readouterr().out == "7\n"


def test_run_keeps_requested_order(capsys):
    assert main(["run", "--no-headers", "adapter", "factory"]) == 0

    assert capsys.readouterr().out == "New System Data\nDriving a Tesla\n"


def test_run_all_prints_every_header(capsys):
    assert main(["run"]) == 0

    out = capsys.readouterr().out
    for title in ("Singleton", "Factory", "Builder", "Adapter", "Decorator", "Proxy", "Observer", "Strategy"):
        assert f"=== {title} Pattern ===" in out
    assert out.index("=== Singleton Pattern ===") < out.index("=== Strategy Pattern ===")
    assert "Paid 100 using PayPal" in out


def test_unknown_pattern_exits_with_code_2(capsys):
    assert main(["run", "decorator", "visitor"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown pattern 'visitor'" in captured.err


def test_metrics_written_to_stderr(capsys):
    assert main(["run", "--no-headers", "--metrics", "builder"]) == 0

    captured = capsys.readouterr()
    assert captured.out == "Computer(ram='16GB', storage='1TB')\n"
    assert "pattern_demo_runs_total" in captured.err


def test_json_logs_go_to_stderr(capsys):
    assert main(["--log-level", "debug", "--json-logs", "run", "--no-headers", "proxy"]) == 0

    captured = capsys.readouterr()
    assert "Fetching data from api/data" in captured.out
    assert '"pattern":"proxy"' in captured.err
    assert "{" not in captured.out


def test_invalid_environment_config_returns_1(monkeypatch, capsys):
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "loud")

    assert main(["list"]) == 1
    assert "Configuration is invalid" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_argument_parser().parse_args([])
