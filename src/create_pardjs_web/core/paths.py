"""Working-directory anchored path resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PathResolver:
    """Resolve relative paths against a fixed, canonical working directory.

    The working directory is captured once (see :meth:`from_cwd`) and then
    passed around explicitly, so callers and tests can anchor resolution
    anywhere without touching the process cwd.
    """

    current_path: Path

    @classmethod
    def from_cwd(cls) -> "PathResolver":
        """Capture the real (symlink-free) path of the process working directory."""
        return cls(Path(os.path.realpath(os.getcwd())))

    def resolve(self, *segments: str | os.PathLike[str]) -> Path:
        """Join ``segments`` onto ``current_path`` and normalize the result.

        Absolute segments restart the join. Symlinks are left untouched and
        nothing is checked on disk.
        """
        joined = os.path.join(self.current_path, *segments)
        return Path(os.path.normpath(joined))


__all__ = ["PathResolver"]
