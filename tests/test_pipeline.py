import os

import pytest

from shellx.pipeline import (
    count_pipes,
    get_command,
    is_valid_pipe_syntax,
    run_pipeline,
)


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    os.chmod(path, 0o755)
    return path


def _env(extra_dir=None):
    path = os.environ.get("PATH", "/usr/bin:/bin")
    if extra_dir is not None:
        path = f"{extra_dir}:{path}"
    return {"PATH": path}


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ls | wc", True),
        ("ls|wc|cat", True),
        ("| ls", False),
        ("ls |", False),
        ("ls || wc", False),
        ("ls | | wc", False),
        ("ls ; wc", True),
        ("ls ;", False),
        ("; ls", False),
        ("ls | ; wc", False),
        ("", True),
        ("   ", True),
    ],
)
def test_is_valid_pipe_syntax(line, expected):
    assert is_valid_pipe_syntax(line) is expected


def test_count_pipes():
    assert count_pipes("a|b|c") == 2
    assert count_pipes("plain") == 0


def test_get_command_positions():
    line = "  ls -l | wc -l \t"
    assert get_command(line, 0) == "ls -l"
    assert get_command(line, 1) == "wc -l"
    assert get_command(line, 2) is None


def test_get_command_empty_middle_stage():
    assert get_command("ls || wc", 1) == ""
    assert get_command("ls || wc", 2) == "wc"


def test_get_command_trailing_pipe():
    assert get_command("ls |   ", 1) is None


def test_get_command_stage_count_matches_pipes():
    line = "a | b | c | d"
    stages = [get_command(line, i) for i in range(count_pipes(line) + 1)]
    assert stages == ["a", "b", "c", "d"]


def test_run_pipeline_connects_stages(tmp_path, capfd):
    status = run_pipeline("echo hello | tr a-z A-Z", _env())
    assert status == 0
    assert capfd.readouterr().out == "hello\n".upper()


def test_run_pipeline_three_stages(tmp_path, capfd):
    _script(tmp_path, "emit", "printf 'one\\ntwo\\nthree\\n'")
    status = run_pipeline("emit | cat | cat", _env(tmp_path))
    assert status == 0
    assert capfd.readouterr().out.splitlines() == ["one", "two", "three"]


def test_run_pipeline_single_command(tmp_path, capfd):
    _script(tmp_path, "say", 'echo "$1"')
    assert run_pipeline("say word", _env(tmp_path)) == 0
    assert capfd.readouterr().out == "word\n"


def test_run_pipeline_returns_last_status(tmp_path):
    _script(tmp_path, "fail", "cat >/dev/null; exit 5")
    assert run_pipeline("echo x | fail", _env(tmp_path)) == 5
    assert run_pipeline("fail | cat", _env(tmp_path)) == 0


def test_run_pipeline_syntax_error(capfd):
    assert run_pipeline("ls |", _env()) == 2
    assert "Error: Invalid pipe or semicolon syntax" in capfd.readouterr().out


def test_run_pipeline_unknown_command(tmp_path, capfd):
    _script(tmp_path, "say", 'echo "$1"')
    status = run_pipeline("nosuchtool | say hi", _env(tmp_path))
    captured = capfd.readouterr()
    assert status == 0
    assert captured.out == "hi\n"
    assert "nosuchtool: command not found" in captured.err


def test_run_pipeline_unknown_last_command(tmp_path):
    assert run_pipeline("echo x | nosuchtool", _env(tmp_path)) == 127