"""Shared fixtures for kt-cli tests."""

from datetime import datetime, timezone

import pytest
from typer.testing import CliRunner

import settings.config as config_module
from scaffolding import TemplateContext


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test from an empty working directory with a private HOME."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in ("KT_CLI_HOME", "KT_PROTOCOLS_DIR", "KT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Git is exercised explicitly in test_git_tool.py
    monkeypatch.setenv("KT_GIT_ENABLED", "false")

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    monkeypatch.setattr(config_module, "_config", None)
    return work


@pytest.fixture
def home(workdir):
    return workdir.parent / "home"


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now():
    return datetime(2025, 9, 9, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def template_context(fixed_now):
    return TemplateContext(project_name="demo-app", generated_at=fixed_now, cwd_name="workspace")
