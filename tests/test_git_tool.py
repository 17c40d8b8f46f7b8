"""Tests for the git tool."""

import logging
import shutil
import subprocess

import pytest

import tools.git_tool as git_tool_module
from tools import GitTool, ToolResult, ToolStatus


class FakeRun:
    """Records git invocations and fails on a chosen sub-command."""

    def __init__(self, fail_on: str | None = None):
        self.fail_on = fail_on
        self.calls = []

    def __call__(self, cmd, cwd=None, **kwargs):
        self.calls.append((cmd, cwd))
        returncode = 1 if cmd[1] == self.fail_on else 0
        stderr = f"fatal: {cmd[1]} failed" if returncode else ""
        return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr=stderr)


def test_initialize_repository_runs_three_commands(tmp_path, monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(git_tool_module.subprocess, "run", fake)

    result = GitTool(tmp_path).initialize_repository("feat: initial demo setup")

    assert result.success
    assert result.metadata["completed"] == ["init", "add", "commit"]
    assert [cmd for cmd, _ in fake.calls] == [
        ["git", "init"],
        ["git", "add", "."],
        ["git", "commit", "-m", "feat: initial demo setup"],
    ]
    assert all(cwd == tmp_path for _, cwd in fake.calls)


def test_failed_commit_is_reported_not_raised(tmp_path, monkeypatch):
    fake = FakeRun(fail_on="commit")
    monkeypatch.setattr(git_tool_module.subprocess, "run", fake)

    result = GitTool(tmp_path).initialize_repository("msg")

    assert not result
    assert result.status == ToolStatus.FAILURE
    assert result.metadata == {"completed": ["init", "add"], "failed_step": "commit"}
    assert "fatal: commit failed" in result.error


def test_missing_git_binary_is_a_failure_result(tmp_path, monkeypatch):
    def missing(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(git_tool_module.subprocess, "run", missing)

    result = GitTool(tmp_path).initialize_repository("msg")

    assert result.status == ToolStatus.FAILURE
    assert "not installed" in result.error
    assert result.metadata["failed_step"] == "init"


def test_failure_reason_is_first_line(tmp_path, monkeypatch):
    monkeypatch.setattr(git_tool_module.subprocess, "run", FakeRun(fail_on="add"))

    result = GitTool(tmp_path).initialize_repository("msg")

    assert result.reason == "Git command failed: git add ."
    assert result.metadata["completed"] == ["init"]


def test_failure_is_logged_below_warning(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(git_tool_module.subprocess, "run", FakeRun(fail_on="init"))

    with caplog.at_level(logging.DEBUG, logger="tools.git_tool"):
        GitTool(tmp_path).initialize_repository("msg")

    assert caplog.records
    assert all(record.levelno < logging.WARNING for record in caplog.records)


def test_skipped_result_is_falsy():
    result = ToolResult.skipped("git disabled")

    assert result.status == ToolStatus.SKIPPED
    assert not result
    assert result.reason == "unknown error"


def test_process_cwd_is_unchanged(tmp_path, monkeypatch, workdir):
    monkeypatch.setattr(git_tool_module.subprocess, "run", FakeRun(fail_on="init"))

    GitTool(tmp_path / "repo").initialize_repository("msg")

    assert workdir.samefile(".")


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_real_git_repository(tmp_path, monkeypatch):
    for key, value in {
        "GIT_AUTHOR_NAME": "kt-cli tests",
        "GIT_AUTHOR_EMAIL": "tests@example.com",
        "GIT_COMMITTER_NAME": "kt-cli tests",
        "GIT_COMMITTER_EMAIL": "tests@example.com",
    }.items():
        monkeypatch.setenv(key, value)
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "README.md").write_text("# repo\n")

    result = GitTool(repo).initialize_repository("feat: initial repo setup")

    assert result.success, result.error
    log = subprocess.run(
        ["git", "log", "--format=%s"], cwd=repo, capture_output=True, text=True, check=True
    )
    assert log.stdout.strip() == "feat: initial repo setup"
