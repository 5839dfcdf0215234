"""Exceptions raised by scaffolding operations."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base exception for scaffolding failures."""

    pass


class InstallerNotFoundError(ScaffoldError):
    """Raised when the package installer executable is missing or broken."""

    pass


class PackageInstallError(ScaffoldError):
    """Raised when the installer exits with a non-zero status."""

    def __init__(self, message: str = "Failed to install packages by Yarn.", returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


__all__ = ["InstallerNotFoundError", "PackageInstallError", "ScaffoldError"]
