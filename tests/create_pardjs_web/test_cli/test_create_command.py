from __future__ import annotations

import io
import json
import os
import shutil
from pathlib import Path

import pytest
from rich.console import Console
from typer import Typer
from typer.testing import CliRunner

from create_pardjs_web.cli.commands import create as create_module
from create_pardjs_web.cli.commands.create import register_create_command
from create_pardjs_web.core import GitInitResult, GitInitStatus
from create_pardjs_web.core.config import INSTALLER_ENV_VAR, TEMPLATE_ENV_VAR

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture()
def cli_app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> tuple[Typer, Console, list[str]]:
    console = Console(file=io.StringIO(), force_terminal=False, width=200)
    outputs: list[str] = []
    app = Typer()

    def fake_show_banner():  # noqa: D401
        outputs.append("banner")

    register_create_command(app, console=console, show_banner=fake_show_banner)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv(TEMPLATE_ENV_VAR, raising=False)
    monkeypatch.delenv(INSTALLER_ENV_VAR, raising=False)
    return app, console, outputs


def _invoke(cli: Typer, args: list[str], input: str | None = None):
    runner = CliRunner()
    result = runner.invoke(cli, args, input=input, catch_exceptions=False)
    if result.exit_code != 0:
        raise AssertionError(result.output)
    return result


def _package(project: Path) -> dict:
    return json.loads((project / "package.json").read_text(encoding="utf-8"))


def test_create_without_git_or_install(cli_app, template_dir: Path):
    app, console, outputs = cli_app

    _invoke(
        app,
        ["demo", "--template", str(template_dir), "--description", "Demo app", "--no-git", "--no-install"],
    )

    project = Path.cwd() / "demo"
    assert outputs == ["banner"]
    assert (project / "src" / "index.ts").exists()
    assert _package(project) == {
        "name": "demo",
        "version": "1.0.0",
        "description": "Demo app",
        "scripts": {"test": "jest"},
    }
    readme = (project / "README.md").read_text(encoding="utf-8")
    assert readme.splitlines()[0] == "# demo"
    assert "Demo app" in readme
    assert not (project / ".git").exists()
    text = console.file.getvalue()
    assert "Project ready." in text
    assert "--no-git flag" in text


def test_create_uses_template_from_environment(cli_app, template_dir: Path, monkeypatch):
    app, _, _ = cli_app
    monkeypatch.setenv(TEMPLATE_ENV_VAR, str(template_dir))

    _invoke(app, ["from-env", "--non-interactive", "--no-git", "--no-install"])

    assert _package(Path.cwd() / "from-env")["description"] == ""


def test_create_prompts_for_description(cli_app, template_dir: Path):
    app, _, _ = cli_app

    _invoke(app, ["prompted", "--template", str(template_dir), "--no-git", "--no-install"], input="Typed in\n")

    assert _package(Path.cwd() / "prompted")["description"] == "Typed in"


@requires_git
@pytest.mark.usefixtures("_git_identity")
def test_create_initializes_git(cli_app, template_dir: Path):
    app, console, _ = cli_app

    _invoke(app, ["with-git", "--template", str(template_dir), "-d", "x", "--no-install"])

    assert (Path.cwd() / "with-git" / ".git").is_dir()
    assert "initialized" in console.file.getvalue()


def test_create_reports_rolled_back_git(cli_app, template_dir: Path, monkeypatch):
    app, console, _ = cli_app
    monkeypatch.setattr(create_module, "is_git_repo", lambda path: False)
    monkeypatch.setattr(
        create_module,
        "create_git_repo",
        lambda path, commit_message: GitInitResult(GitInitStatus.ROLLED_BACK, "git commit exited with 1"),
    )

    _invoke(app, ["rolled", "--template", str(template_dir), "-d", "x", "--no-install"])

    text = console.file.getvalue()
    assert "rolled back: git commit exited with 1" in text
    assert "Project ready." in text


def test_create_runs_installer(cli_app, template_dir: Path, fake_yarn: Path):
    app, console, _ = cli_app

    _invoke(app, ["installed", "--template", str(template_dir), "-d", "x", "--no-git"])

    project = Path(os.path.realpath(Path.cwd())) / "installed"
    args = (project / ".yarn-args").read_text(encoding="utf-8").strip()
    assert args == f"install --exact --cwd {project}"
    assert "dependencies installed" in console.file.getvalue()


def test_create_warns_about_custom_registry(cli_app, template_dir: Path, fake_yarn: Path, monkeypatch):
    app, console, _ = cli_app
    monkeypatch.setenv("FAKE_YARN_REGISTRY", "https://registry.npmmirror.com")

    _invoke(app, ["mirrored", "--template", str(template_dir), "-d", "x", "--no-git"])

    assert "not using the default registry" in console.file.getvalue()


def test_create_fails_when_installer_missing(cli_app, template_dir: Path, monkeypatch):
    app, console, _ = cli_app
    monkeypatch.setenv(INSTALLER_ENV_VAR, "yarnpkg-definitely-not-installed")

    result = CliRunner().invoke(app, ["no-yarn", "--template", str(template_dir), "-d", "x", "--no-git"])

    assert result.exit_code == 1
    assert "Installer Missing" in console.file.getvalue()
    assert not (Path.cwd() / "no-yarn").exists()


def test_create_keeps_project_when_install_fails(cli_app, template_dir: Path, fake_yarn: Path, monkeypatch):
    app, console, _ = cli_app
    original = create_module.build_readme_info

    # The fake installer rejects manifests that do not start with "{".
    def break_manifest(target_path, info):
        original(target_path, info)
        (Path(target_path) / "package.json").write_text("broken", encoding="utf-8")

    monkeypatch.setattr(create_module, "build_readme_info", break_manifest)
    result = CliRunner().invoke(app, ["broken", "--template", str(template_dir), "-d", "x", "--no-git"])

    assert result.exit_code == 1
    assert "Install Failed" in console.file.getvalue()
    assert (Path.cwd() / "broken" / "README.md").exists()


def test_create_refuses_existing_directory(cli_app, template_dir: Path):
    app, console, _ = cli_app
    (Path.cwd() / "taken").mkdir()

    result = CliRunner().invoke(app, ["taken", "--template", str(template_dir), "--no-git", "--no-install"])

    assert result.exit_code == 1
    assert "already exists" in console.file.getvalue()


def test_create_requires_template(cli_app):
    app, console, _ = cli_app

    result = CliRunner().invoke(app, ["demo", "--no-git", "--no-install", "--non-interactive"])

    assert result.exit_code == 1
    assert "No template directory configured" in console.file.getvalue()
    assert not (Path.cwd() / "demo").exists()


def test_create_removes_project_when_manifest_is_malformed(cli_app, template_dir: Path):
    app, console, _ = cli_app
    (template_dir / "package.json").write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(app, ["bad", "--template", str(template_dir), "-d", "x", "--no-git", "--no-install"])

    assert result.exit_code == 1
    assert "Project creation failed" in console.file.getvalue()
    assert not (Path.cwd() / "bad").exists()


def test_create_names_missing_template_path(cli_app, tmp_path: Path):
    app, console, _ = cli_app
    missing = tmp_path / "no-such-template"

    result = CliRunner().invoke(app, ["demo", "--template", str(missing), "--no-git", "--no-install", "-d", "x"])

    assert result.exit_code == 1
    text = console.file.getvalue()
    assert f"Template directory not found: {missing.resolve()}" in text
    assert "No template directory configured" not in text
    assert not (Path.cwd() / "demo").exists()
