"""Integration tests for the complete road trip pipeline."""

from __future__ import annotations

import io

import pytest

import roadtrip.pipeline as pipeline
from roadtrip.container import Container
from roadtrip.pipeline import main, run_csv_pipeline, run_pipeline

EXPECTED_OUTPUT = """\
Shortest distance from Anaheim to Irvine
  Begin at Anaheim
  Continue to Irvine (14.0 miles)
Total distance: 14.0 miles

Shortest driving time from Anaheim to Irvine
  Begin at Anaheim
  Continue to Orange (5.0 miles @ 45.0mph = 6 mins 40.0 secs)
  Continue to Tustin (4.0 miles @ 40.0mph = 6 mins 0.0 secs)
  Continue to Irvine (6.0 miles @ 55.0mph = 6 mins 32.7 secs)
Total time: 19 mins 12.7 secs

Shortest distance from Costa Mesa to Orange
  Begin at Costa Mesa
  Continue to Irvine (7.0 miles)
  Continue to Tustin (6.0 miles)
  Continue to Orange (4.0 miles)
Total distance: 17.0 miles
"""


@pytest.fixture
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(pipeline, "configure_logging", calls.append)
    return calls


def test_pipeline_with_text_input(data_dir):
    output = io.StringIO()
    with (data_dir / "roadmap.txt").open(encoding="utf-8") as f:
        run_pipeline(f, output)

    assert output.getvalue() == EXPECTED_OUTPUT


def test_pipeline_with_csv_input(data_dir, monkeypatch):
    monkeypatch.setenv("RTR_MAP_DATA_DIR", str(data_dir))
    output = io.StringIO()

    run_csv_pipeline(output, Container.create_default())

    assert output.getvalue() == EXPECTED_OUTPUT


def test_pipeline_with_disconnected_map(data_dir):
    output = io.StringIO()
    with (data_dir / "disconnected.txt").open(encoding="utf-8") as f:
        run_pipeline(f, output)

    assert output.getvalue() == "Disconnected Map\n"


def test_pipeline_connectivity_check_can_be_disabled(data_dir, monkeypatch):
    monkeypatch.setenv("RTR_ROUTING_REQUIRE_STRONGLY_CONNECTED", "false")
    output = io.StringIO()
    with (data_dir / "disconnected.txt").open(encoding="utf-8") as f:
        run_pipeline(f, output, Container.create_default())

    assert output.getvalue().startswith("Shortest distance from Anaheim to Tustin")
    assert output.getvalue().endswith("Total distance: 9.0 miles\n")


def test_main_with_file(data_dir, capsys, logging_calls):
    assert main([str(data_dir / "roadmap.txt")]) == 0

    assert capsys.readouterr().out == EXPECTED_OUTPUT
    assert len(logging_calls) == 1


def test_main_reads_stdin(data_dir, capsys, monkeypatch, logging_calls):
    text = (data_dir / "roadmap.txt").read_text(encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(text))

    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_main_with_csv_dir(data_dir, capsys, logging_calls):
    assert main(["--csv", str(data_dir)]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_main_log_level_override(data_dir, logging_calls):
    main(["--log-level", "debug", str(data_dir / "roadmap.txt")])

    assert logging_calls[0].level == "debug"


def test_main_reports_bad_input(tmp_path, capsys, logging_calls):
    path = tmp_path / "bad.txt"
    path.write_text("2\nA\n", encoding="utf-8")

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unexpected end of input" in captured.err


def test_main_reports_missing_file(tmp_path, capsys, logging_calls):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Failed to read road map" in capsys.readouterr().err


def test_main_reports_unknown_log_level(data_dir, capsys):
    assert main([str(data_dir / "roadmap.txt"), "--log-level", "bogus"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Unknown log level: 'bogus'" in captured.err
