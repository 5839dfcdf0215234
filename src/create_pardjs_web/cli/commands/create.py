"""The ``create-pardjs-web`` project creation command."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, NoReturn

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel

from create_pardjs_web.cli.ui import StepTracker
from create_pardjs_web.core import (
    CustomizedInfo,
    GitInitStatus,
    InstallerNotFoundError,
    PackageInstallError,
    ScaffoldConfig,
    build_readme_info,
    check_folder_exist,
    check_yarn_exist,
    check_yarn_use_default_registry,
    create_git_repo,
    install_packages_by_yarn,
    is_git_repo,
    sync_folder,
    update_package_info,
)
from create_pardjs_web.core.config import TEMPLATE_ENV_VAR


def _fail(console: Console, message: str, title: str = "Failure") -> NoReturn:
    console.print()
    console.print(Panel(message, title=f"[red]{title}[/red]", border_style="red", padding=(1, 2)))
    raise typer.Exit(1)


def _missing_template_message(template: str | None) -> str:
    configured = template or os.environ.get(TEMPLATE_ENV_VAR)
    if configured:
        return (
            f"Template directory not found: [cyan]{Path(configured).expanduser().resolve()}[/cyan]\n"
            f"Point [cyan]--template[/cyan] or [cyan]{TEMPLATE_ENV_VAR}[/cyan] at an existing directory."
        )
    return f"No template directory configured.\nPass [cyan]--template PATH[/cyan] or set [cyan]{TEMPLATE_ENV_VAR}[/cyan]."


def _preflight_installer(console: Console, config: ScaffoldConfig) -> None:
    try:
        check_yarn_exist(config.installer)
    except InstallerNotFoundError as exc:
        _fail(
            console,
            f"{exc}\nInstall Yarn from [cyan]https://classic.yarnpkg.com/[/cyan] "
            "or re-run with [cyan]--no-install[/cyan].",
            title="Installer Missing",
        )

    try:
        uses_default = check_yarn_use_default_registry(config.installer, config.default_registry)
    except (subprocess.CalledProcessError, OSError) as exc:
        console.print(f"[yellow]Could not read the Yarn registry setting:[/yellow] {exc}")
        return
    if not uses_default:
        console.print(
            f"[yellow]Warning:[/yellow] Yarn is not using the default registry ({config.default_registry}). "
            "Installed versions may differ from the public registry."
        )


def _record_git_result(tracker: StepTracker, project_path: Path, config: ScaffoldConfig) -> None:
    result = create_git_repo(project_path, commit_message=config.commit_message)
    if result.status is GitInitStatus.SUCCEEDED:
        tracker.complete("git", "initialized")
    elif result.status is GitInitStatus.SKIPPED:
        tracker.skip("git", result.detail or "git not available")
    elif result.status is GitInitStatus.ROLLED_BACK:
        tracker.error("git", f"rolled back: {result.detail}")
    else:
        tracker.error("git", f".git left behind: {result.detail}")


def register_create_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
) -> None:
    """Attach the ``create`` command to ``app``."""

    @app.command()
    def create(
        project_name: str = typer.Argument(..., help="Directory name (and package name) of the new project"),
        template: str = typer.Option(
            None,
            "--template",
            help=f"Template directory to copy (or set {TEMPLATE_ENV_VAR})",
        ),
        description: str = typer.Option(None, "--description", "-d", help="Project description for package.json and README"),
        no_git: bool = typer.Option(False, "--no-git", help="Skip git repository initialization"),
        no_install: bool = typer.Option(False, "--no-install", help="Skip installing packages with Yarn"),
        non_interactive: bool = typer.Option(False, "--non-interactive", help="Never prompt; use defaults for missing values"),
        debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
    ) -> None:
        """
        Create a new pardjs web project from a template.

        This command will:
        1. Copy the template into a new project directory
        2. Write the project name and description into package.json and README.md
        3. Initialize a git repository with an initial commit (unless --no-git)
        4. Install dependencies with Yarn (unless --no-install)

        Examples:
            create-pardjs-web my-app --template ./template
            create-pardjs-web my-app -d "Admin dashboard" --no-install
        """
        if debug:
            logging.basicConfig(level=logging.DEBUG)

        show_banner()

        config = ScaffoldConfig.from_env(template, out=console)
        if config.template_root is None:
            _fail(console, _missing_template_message(template), title="Missing Template")

        project_path = config.resolver.resolve(project_name)
        if check_folder_exist(project_path):
            _fail(
                console,
                f"Directory '[cyan]{project_name}[/cyan]' already exists\n"
                "Please choose a different project name or remove the existing directory.",
                title="Directory Conflict",
            )

        if description is None:
            description = "" if non_interactive else typer.prompt("Project description", default="")

        info: CustomizedInfo = {"name": project_path.name, "description": description}

        setup_lines = [
            "[cyan]Project Setup[/cyan]",
            "",
            f"{'Project':<15} [green]{info['name']}[/green]",
            f"{'Template':<15} [dim]{config.template_root}[/dim]",
            f"{'Target Path':<15} [dim]{project_path}[/dim]",
        ]
        console.print(Panel("\n".join(setup_lines), border_style="cyan", padding=(1, 2)))

        if not no_install:
            _preflight_installer(console, config)

        tracker = StepTracker("Create Project")
        tracker.add("template", "Copy template")
        tracker.add("metadata", "Write package.json and README.md")
        tracker.add("git", "Initialize git repository")
        tracker.add("install", "Install packages")

        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            try:
                tracker.start("template")
                sync_folder(config.template_root, project_path)
                tracker.complete("template", str(project_path))

                tracker.start("metadata")
                update_package_info(project_path, info)
                build_readme_info(project_path, info)
                tracker.complete("metadata", "updated")
            except (OSError, ValueError) as exc:
                for key in ("template", "metadata"):
                    if tracker.status_of(key) == "running":
                        tracker.error(key, str(exc))
                if project_path.exists():
                    shutil.rmtree(project_path)
                console.print(tracker.render())
                _fail(console, f"Project creation failed: {exc}")

            if no_git:
                tracker.skip("git", "--no-git flag")
            elif is_git_repo(project_path):
                tracker.skip("git", "existing repo detected")
            else:
                tracker.start("git")
                _record_git_result(tracker, project_path, config)

        tracker.attach_refresh(lambda: None)

        if no_install:
            tracker.skip("install", "--no-install flag")
        else:
            tracker.start("install")
            console.print(f"[cyan]Installing packages with {config.installer}...[/cyan]")
            try:
                asyncio.run(install_packages_by_yarn(project_path, installer=config.installer))
            except PackageInstallError as exc:
                tracker.error("install", str(exc))
                console.print(tracker.render())
                _fail(
                    console,
                    f"{exc}\nThe project files were created; run [cyan]yarn install[/cyan] in {project_path} to retry.",
                    title="Install Failed",
                )
            tracker.complete("install", "dependencies installed")

        console.print(tracker.render())
        console.print("\n[bold green]Project ready.[/bold green]")

        steps_lines = [f"1. Go to the project folder: [cyan]cd {project_name}[/cyan]"]
        if no_install:
            steps_lines.append("2. Install dependencies: [cyan]yarn install[/cyan]")
        steps_lines.append(f"{len(steps_lines) + 1}. Start working: [cyan]yarn test:watch[/cyan]")
        steps_lines.append(f"{len(steps_lines) + 1}. Commit with: [cyan]yarn commit[/cyan]")
        console.print()
        console.print(Panel("\n".join(steps_lines), title="Next Steps", border_style="cyan", padding=(1, 2)))


__all__ = ["register_create_command"]
