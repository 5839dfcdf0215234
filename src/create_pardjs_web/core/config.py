"""Runtime configuration and shared constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .paths import PathResolver

YARN_EXECUTABLE = "yarnpkg"
DEFAULT_REGISTRY = "https://registry.yarnpkg.com"
DEFAULT_COMMIT_MESSAGE = "init: project with create-pardjs-web"

TEMPLATE_ENV_VAR = "CREATE_PARDJS_WEB_TEMPLATE"
INSTALLER_ENV_VAR = "CREATE_PARDJS_WEB_YARN"

console = Console()


def _template_candidate(raw: str, source: str, out: Console) -> Path | None:
    candidate = Path(raw).expanduser().resolve()
    if candidate.is_dir():
        return candidate
    out.print(f"[yellow]{source} set to {candidate}, but no template directory was found there. Ignoring.[/yellow]")
    return None


def get_template_root(override_path: str | None = None, out: Console | None = None) -> Path | None:
    """Return the template directory to copy from, or None when none is configured.

    Args:
        override_path: Optional override path (e.g., from --template flag)
    """
    out = out or console
    if override_path:
        candidate = _template_candidate(override_path, "--template", out)
        if candidate is not None:
            return candidate

    env_root = os.environ.get(TEMPLATE_ENV_VAR)
    if env_root:
        return _template_candidate(env_root, TEMPLATE_ENV_VAR, out)
    return None


@dataclass(frozen=True)
class ScaffoldConfig:
    """Settings computed once at startup and handed to each step."""

    resolver: PathResolver
    template_root: Path | None = None
    installer: str = YARN_EXECUTABLE
    default_registry: str = DEFAULT_REGISTRY
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @classmethod
    def from_env(cls, template_override: str | None = None, out: Console | None = None) -> "ScaffoldConfig":
        return cls(
            resolver=PathResolver.from_cwd(),
            template_root=get_template_root(template_override, out=out),
            installer=os.environ.get(INSTALLER_ENV_VAR) or YARN_EXECUTABLE,
        )


__all__ = [
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_REGISTRY",
    "INSTALLER_ENV_VAR",
    "ScaffoldConfig",
    "TEMPLATE_ENV_VAR",
    "YARN_EXECUTABLE",
    "get_template_root",
]
