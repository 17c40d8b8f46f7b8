"""Tests for the kt-cli command-line interface."""

import pytest

import scaffolding.generator as generator_module
from cli.ktcli import __version__
from cli.ktcli.cli import app
from scaffolding import AI_CONTEXT_FILE, FilesystemError


def test_version(cli_runner, workdir, home):
    result = cli_runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"kt-cli v{__version__}" in result.output
    assert __version__ == "1.0.0-alpha"
    assert (home / ".kt-cli" / "templates").is_dir()
    assert (home / ".kt-cli" / "protocols").is_dir()
    assert list(workdir.iterdir()) == []


@pytest.mark.parametrize(
    "args",
    [[], ["help"], ["frobnicate"], ["frobnicate", "--with", "args"]],
)
def test_usage_is_the_default(cli_runner, workdir, args):
    result = cli_runner.invoke(app, args)

    assert result.exit_code == 0
    assert "USAGE:" in result.output
    assert "new <name>" in result.output
    assert list(workdir.iterdir()) == []


def test_new_creates_project(cli_runner, workdir):
    result = cli_runner.invoke(app, ["new", "demo"])

    assert result.exit_code == 0, result.output
    assert "created successfully" in result.output
    assert (workdir / "demo" / "package.json").is_file()
    assert (workdir / "demo" / AI_CONTEXT_FILE).is_file()
    assert not (workdir / "demo" / ".git").exists()


def test_new_without_name(cli_runner, workdir):
    result = cli_runner.invoke(app, ["new"])

    assert result.exit_code == 0
    assert "Project name required" in result.output
    assert list(workdir.iterdir()) == []


def test_new_existing_directory(cli_runner, workdir):
    cli_runner.invoke(app, ["new", "demo"])
    readme = (workdir / "demo" / "README.md").read_bytes()

    result = cli_runner.invoke(app, ["new", "demo"])

    assert result.exit_code == 0
    assert "Directory demo already exists" in result.output
    assert (workdir / "demo" / "README.md").read_bytes() == readme


def test_new_filesystem_error_exits_nonzero(cli_runner, workdir, monkeypatch):
    def failing_write(path, content):
        raise FilesystemError(f"Cannot write {path}: disk full", path)

    monkeypatch.setattr(generator_module, "write_text", failing_write)

    result = cli_runner.invoke(app, ["new", "demo"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_new_no_git_flag(cli_runner, workdir, monkeypatch):
    monkeypatch.setenv("KT_GIT_ENABLED", "true")
    calls = []
    monkeypatch.setattr(
        generator_module.GitTool,
        "initialize_repository",
        lambda self, message: calls.append(message),
    )

    result = cli_runner.invoke(app, ["new", "demo", "--no-git"])

    assert result.exit_code == 0, result.output
    assert calls == []


def test_ai_prepare_outside_project(cli_runner):
    result = cli_runner.invoke(app, ["ai", "prepare"])

    assert result.exit_code == 0
    assert "No AI context found" in result.output


def test_ai_prepare_prints_context(cli_runner, workdir, monkeypatch):
    cli_runner.invoke(app, ["new", "demo"])
    monkeypatch.chdir(workdir / "demo")
    document = (workdir / "demo" / AI_CONTEXT_FILE).read_text(encoding="utf-8")

    result = cli_runner.invoke(app, ["ai", "prepare"])

    assert result.exit_code == 0
    assert "Share this with your AI Assistant" in result.output
    assert document in result.output
    assert result.output.count("━" * 46) == 2
    assert "Copy the above text" in result.output


@pytest.mark.parametrize(
    "args",
    [["ai"], ["ai", "validate"], ["ai", "handoff"], ["ai", "bogus"]],
)
def test_ai_usage(cli_runner, args):
    result = cli_runner.invoke(app, args)

    assert result.exit_code == 0
    assert "AI Commands:" in result.output
    assert "kt-cli ai prepare" in result.output


def test_placeholder_commands(cli_runner):
    learn = cli_runner.invoke(app, ["learn", "capture"])
    sync = cli_runner.invoke(app, ["sync", "protocols"])

    assert learn.exit_code == 0
    assert "'learn capture' is not implemented yet." in learn.output
    assert sync.exit_code == 0
    assert "not implemented yet" in sync.output


def test_config_init(cli_runner, home):
    config_path = home / ".kt-cli" / "config.toml"

    first = cli_runner.invoke(app, ["config", "init"])
    assert first.exit_code == 0
    assert config_path.is_file()
    assert "[git]" in config_path.read_text(encoding="utf-8")

    again = cli_runner.invoke(app, ["config", "init"])
    assert again.exit_code == 1
    assert "already exists" in again.output

    forced = cli_runner.invoke(app, ["config", "init", "--force"])
    assert forced.exit_code == 0


def test_config_show(cli_runner, workdir):
    (workdir / ".kt-cli.toml").write_text('[general]\nlog_level = "INFO"\n', encoding="utf-8")

    result = cli_runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert "Config file:" in result.output
    assert "[general]" in result.output
    assert "log_level" in result.output
    assert "INFO" in result.output


def test_new_ignores_trailing_arguments(cli_runner, workdir):
    result = cli_runner.invoke(app, ["new", "demo", "--template", "x"])

    assert result.exit_code == 0, result.output
    assert (workdir / "demo" / "package.json").is_file()
    assert sorted(path.name for path in workdir.iterdir()) == ["demo"]


def test_version_ignores_trailing_arguments(cli_runner):
    result = cli_runner.invoke(app, ["version", "extra", "--verbose"])

    assert result.exit_code == 0
    assert f"kt-cli v{__version__}" in result.output


@pytest.mark.parametrize("args", [["--frob"], ["--frob", "new", "demo"]])
def test_unknown_leading_option_shows_usage(cli_runner, workdir, args):
    result = cli_runner.invoke(app, args)

    assert result.exit_code == 0
    assert "USAGE:" in result.output
    assert list(workdir.iterdir()) == []


def test_unknown_ai_option_shows_ai_usage(cli_runner):
    result = cli_runner.invoke(app, ["ai", "--frob"])

    assert result.exit_code == 0
    assert "AI Commands:" in result.output
