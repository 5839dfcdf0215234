"""Git repository detection and initialization."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import DEFAULT_COMMIT_MESSAGE

logger = logging.getLogger(__name__)


class GitInitStatus(str, Enum):
    """Outcome of :func:`create_git_repo`."""

    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    ROLLED_BACK = "rolled_back"
    INCOMPLETE = "incomplete"


@dataclass
class GitInitResult:
    """Result envelope for repository initialization."""

    status: GitInitStatus
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status is GitInitStatus.SUCCEEDED


def _git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    logger.debug("Running git %s in %s", " ".join(args), cwd)
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        check=True,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )


def _failure_detail(exc: Exception) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        stderr = (exc.stderr or "").strip()
        first = stderr.splitlines()[0] if stderr else ""
        return f"{' '.join(exc.cmd)} exited with {exc.returncode}" + (f": {first}" if first else "")
    return str(exc)


def is_git_repo(target_path: Path) -> bool:
    """Check if the specified path is inside a git work tree."""
    path = Path(target_path)
    if not path.is_dir():
        return False

    try:
        _git(["rev-parse", "--is-inside-work-tree"], path)
        return True
    except (subprocess.CalledProcessError, OSError):
        return False


def create_git_repo(target_path: Path, *, commit_message: str = DEFAULT_COMMIT_MESSAGE) -> GitInitResult:
    """Initialize a repository at ``target_path`` and commit everything in it.

    Failures never propagate. If ``git init`` already ran when a later step
    fails, the new ``.git`` directory is removed and the result reports
    ``ROLLED_BACK`` (or ``INCOMPLETE`` when the removal itself fails).
    """
    path = Path(target_path)
    did_init = False

    try:
        _git(["--version"], path)

        _git(["init"], path)
        did_init = True

        _git(["add", "-A"], path)
        _git(["commit", "-m", commit_message], path)
    except (subprocess.CalledProcessError, OSError) as exc:
        detail = _failure_detail(exc)
        if not did_init:
            logger.debug("Skipping git setup for %s: %s", path, detail)
            return GitInitResult(GitInitStatus.SKIPPED, detail)

        logger.warning("Git setup failed for %s, removing .git: %s", path, detail)
        try:
            shutil.rmtree(path / ".git")
        except OSError as cleanup_exc:
            logger.warning("Could not remove %s: %s", path / ".git", cleanup_exc)
            return GitInitResult(GitInitStatus.INCOMPLETE, detail)
        return GitInitResult(GitInitStatus.ROLLED_BACK, detail)

    return GitInitResult(GitInitStatus.SUCCEEDED, "initial commit created")


__all__ = ["GitInitResult", "GitInitStatus", "create_git_repo", "is_git_repo"]
