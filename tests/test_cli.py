"""Tests for the termline-demo entry point."""

from __future__ import annotations

import json

import pytest

from termline.cli import build_completion, build_state, main, parse_args, tokenize
from termline.settings import SETTINGS_ENV, WRITE_LOG_ENV
from termline.state import CandidatePart, Token


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
    monkeypatch.delenv(WRITE_LOG_ENV, raising=False)


# --- Tokenizing ---


def test_tokenize_command_and_arguments():
    assert tokenize("ls -l $HOME") == [
        Token("ls", "command"),
        Token(" ", "sep"),
        Token("-l", "bareword"),
        Token(" ", "sep"),
        Token("$HOME", "variable"),
    ]


def test_tokenize_leading_space():
    assert tokenize("  ls") == [Token("  ", "sep"), Token("ls", "command")]


def test_tokenize_empty():
    assert tokenize("") == []


def test_tokens_make_up_the_line():
    line = "echo  héllo\twörld "
    assert "".join(t.text for t in tokenize(line)) == line


# --- Completion ---


def test_build_completion_replaces_last_word():
    comp = build_completion("ls fo", ["foo", "bar"], 0)
    assert (comp.start, comp.end) == (3, 5)
    assert comp.candidates[0].parts == (
        CandidatePart("fo"),
        CandidatePart("o", completed=True),
    )
    assert comp.candidates[1].parts == (CandidatePart("bar", completed=True),)


def test_build_completion_empty_word():
    comp = build_completion("ls ", ["a"], -1)
    assert (comp.start, comp.end) == (3, 3)
    assert comp.current == -1


def test_build_completion_byte_offsets():
    comp = build_completion("cd é", ["école"], 0)
    assert (comp.start, comp.end) == (3, 5)


# --- State ---


def test_build_state_defaults_to_insert():
    state = build_state(parse_args(["echo hi"]))
    assert state.mode == "insert"
    assert state.dot == 7
    assert state.prompt == "> "


def test_build_state_picks_mode_from_context():
    assert build_state(parse_args(["x", "--candidates", "xy"])).mode == "completion"
    assert build_state(parse_args(["x", "--history", "xy"])).mode == "history"
    assert build_state(parse_args(["", "--files", "a"])).mode == "navigation"


def test_build_state_explicit_mode_wins():
    state = build_state(parse_args(["x", "--mode", "command", "--candidates", "xy"]))
    assert state.mode == "command"
    assert state.completion is not None


# --- Main ---


def test_main_renders_input_line(capsys):
    assert main(["echo hi", "--prompt", "$ "]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\r\x1b[J$ ")
    assert "echo" in out
    assert out.endswith("\x1b[10G\n")


def test_main_renders_completion(capsys):
    assert main(["ls fo", "--candidates", "foo", "fob", "--current", "1"]) == 0
    out = capsys.readouterr().out
    assert "Completing fo" in out
    assert "foo" in out


def test_main_uses_settings_file(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"defaultColumns": 10}))
    assert main(["abcdefghijkl", "--settings", str(path)]) == 0
    out = capsys.readouterr().out
    # Two lines at 10 columns, then one newline to leave the frame.
    assert out.count("\n") == 2


def test_main_history_index_past_items(capsys):
    assert main(["ec", "--history", "echo", "--current", "3"]) == 0
    out = capsys.readouterr().out
    assert "History #3" in out
    assert "echo" not in out


def test_main_reports_bad_settings(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{")
    assert main(["x", "--settings", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "termline-demo:" in captured.err


def test_main_writes_log(tmp_path, monkeypatch, capsys):
    log = tmp_path / "writes.log"
    monkeypatch.setenv(WRITE_LOG_ENV, str(log))
    assert main(["hi"]) == 0
    out = capsys.readouterr().out
    assert log.read_bytes().decode("utf-8") + "\n" == out
