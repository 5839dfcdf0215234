from __future__ import annotations

import json
import os
import stat
import sys
from pathlib import Path

import pytest

FAKE_YARN_SCRIPT = """#!/bin/sh
case "$1" in
  --version)
    echo "1.22.19"
    exit "${FAKE_YARN_VERSION_EXIT:-0}"
    ;;
  config)
    echo "${FAKE_YARN_REGISTRY:-https://registry.yarnpkg.com}"
    exit 0
    ;;
  install)
    echo "$@" > "$4/.yarn-args"
    if ! head -c 1 "$4/package.json" 2>/dev/null | grep -q '{'; then
      echo "error Invalid package.json" >&2
      exit 1
    fi
    echo "installing into $4"
    echo "warning no lockfile" >&2
    exit 0
    ;;
esac
exit 1
"""


@pytest.fixture(name="_git_identity")
def git_identity_fixture(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure git commands can commit even if the user has no global config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Pardjs")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "dev@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Pardjs")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "dev@example.com")


@pytest.fixture()
def fake_yarn(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Put a scripted ``yarnpkg`` first on PATH."""
    if sys.platform == "win32":
        pytest.skip("fake installer is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "yarnpkg"
    script.write_text(FAKE_YARN_SCRIPT, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.delenv("CREATE_PARDJS_WEB_YARN", raising=False)
    return script


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A minimal web project template."""
    template = tmp_path / "template"
    (template / "src").mkdir(parents=True)
    (template / "package.json").write_text(
        json.dumps(
            {
                "name": "template",
                "version": "1.0.0",
                "description": "template description",
                "scripts": {"test": "jest"},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    (template / "README.md").write_text("# template\n", encoding="utf-8")
    (template / "src" / "index.ts").write_text("export const answer = 42;\n", encoding="utf-8")
    return template
