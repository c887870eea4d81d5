import re
import subprocess

import pytest

from meetingcost import timing, utils


def test_format_currency():
    assert utils.format_currency(0) == "$0.00"
    assert utils.format_currency(1.5) == "$1.50"
    assert utils.format_currency(1234.567) == "$1,234.57"
    assert utils.format_currency(-2) == "-$2.00"
    assert utils.format_currency(10, symbol="£") == "£10.00"


def test_copy_to_clipboard_pipes_text_to_pbcopy(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs["input"]))
        return subprocess.CompletedProcess(cmd, 0, stdout=None, stderr="")

    monkeypatch.setattr(utils.subprocess, "run", fake_run)
    utils.copy_to_clipboard("Meeting Cost Summary")
    assert calls == [(["pbcopy"], "Meeting Cost Summary")]


def test_copy_to_clipboard_without_pbcopy(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(utils.subprocess, "run", fake_run)
    with pytest.raises(RuntimeError, match="pbcopy not found"):
        utils.copy_to_clipboard("text")


def test_copy_to_clipboard_failure(monkeypatch):
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout=None, stderr="boom\n")

    monkeypatch.setattr(utils.subprocess, "run", fake_run)
    with pytest.raises(RuntimeError, match=r"pbcopy failed \(1\): boom"):
        utils.copy_to_clipboard("text")


def test_status_is_silent_unless_debugging(monkeypatch, capsys):
    monkeypatch.setattr(timing, "DEBUG_TIMING", False)
    timing.status("hidden")
    with timing.step("hidden step"):
        pass
    assert capsys.readouterr().out == ""


def test_step_reports_duration(monkeypatch, capsys):
    monkeypatch.setattr(timing, "DEBUG_TIMING", True)
    with timing.step("Copying summary"):
        pass
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert re.match(r"\[\d\d:\d\d:\d\d up \d+:\d\d:\d\d\] ", out[0])
    assert out[0].endswith(" ms)")
    assert "] Copying summary (" in out[0]


def test_set_debug_toggles_output(monkeypatch, capsys):
    monkeypatch.setattr(timing, "DEBUG_TIMING", False)
    timing.set_debug(True)
    timing.status("visible")
    timing.set_debug(False)
    timing.status("hidden")
    out = capsys.readouterr().out
    assert "visible" in out
    assert "hidden" not in out


def test_transition_lines(monkeypatch, capsys):
    monkeypatch.setattr(timing, "DEBUG_TIMING", True)
    timing.transition("Running", "Paused", "at 00:00:12")
    timing.transition("Summary", "Setup")
    out = capsys.readouterr().out.splitlines()
    assert out[0].endswith("] Running → Paused: at 00:00:12")
    assert out[1].endswith("] Summary → Setup")
