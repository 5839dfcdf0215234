"""
create-pardjs-web - scaffold pardjs web projects from a template.

Usage:
    create-pardjs-web <project-name> --template <template-dir>
    create-pardjs-web <project-name> --description "My app" --no-git
"""

import typer
from rich.align import Align
from rich.console import Console
from rich.text import Text

from create_pardjs_web.cli.commands.create import register_create_command

__version__ = "0.1.0"

BANNER = """
                      _  _
 _ __   __ _ _ __ __| |(_)___
| '_ \\ / _` | '__/ _` || / __|
| |_) | (_| | | | (_| || \\__ \\
| .__/ \\__,_|_|  \\__,_|/ |___/
|_|                  |__/
"""

TAGLINE = "Create a pardjs web project in one command"

console = Console()

app = typer.Typer(
    name="create-pardjs-web",
    help="Scaffold a pardjs web project from a template",
    add_completion=False,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        styled_banner.append(line + "\n", style=colors[i % len(colors)])

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


register_create_command(app, console=console, show_banner=show_banner)


def main():
    app()


if __name__ == "__main__":
    main()
