"""Yarn installer probes and dependency installation."""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from .config import DEFAULT_REGISTRY, YARN_EXECUTABLE
from .errors import InstallerNotFoundError, PackageInstallError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 4096


class OutputSink(Protocol):
    """Anything that accepts raw installer output, e.g. ``io.BytesIO``."""

    def write(self, data: bytes, /) -> object: ...


def _executable(installer: str) -> str:
    # Resolve through PATH so wrapper scripts (yarnpkg.cmd on Windows) are found.
    return shutil.which(installer) or installer


def check_yarn_exist(installer: str = YARN_EXECUTABLE) -> None:
    """Probe the installer with ``--version``.

    Raises:
        InstallerNotFoundError: the executable is missing or the probe fails.
    """
    try:
        subprocess.run(
            [_executable(installer), "--version"],
            check=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise InstallerNotFoundError(f"Yarn not exist: '{installer}' could not be run") from exc


def check_yarn_use_default_registry(
    installer: str = YARN_EXECUTABLE,
    default_registry: str = DEFAULT_REGISTRY,
) -> bool:
    """Return True when the installer is configured with the public registry.

    Invocation failures (missing executable, non-zero exit) are not handled
    here and propagate to the caller.
    """
    completed = subprocess.run(
        [_executable(installer), "config", "get", "registry"],
        check=True,
        capture_output=True,
        text=True,
    )
    registry = completed.stdout.strip()
    logger.debug("Configured registry: %s", registry)
    return registry == default_registry


async def _pump(stream: asyncio.StreamReader, sink: OutputSink) -> None:
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        sink.write(chunk)


async def install_packages_by_yarn(
    target_path: Path,
    *,
    sink: OutputSink | None = None,
    installer: str = YARN_EXECUTABLE,
) -> None:
    """Run ``<installer> install --exact --cwd <target_path>``.

    Without a ``sink`` the child inherits this process's stdio so the user
    sees installer output live. With a ``sink``, stdout and stderr are merged
    and forwarded to it as they arrive.

    Raises:
        PackageInstallError: the installer could not start or exited non-zero.
    """
    args = ["install", "--exact", "--cwd", str(target_path)]
    logger.debug("Running %s %s", installer, " ".join(args))

    pipe = asyncio.subprocess.PIPE if sink is not None else None
    try:
        process = await asyncio.create_subprocess_exec(
            _executable(installer),
            *args,
            stdout=pipe,
            stderr=asyncio.subprocess.STDOUT if sink is not None else None,
        )
    except OSError as exc:
        raise PackageInstallError() from exc

    if sink is not None and process.stdout is not None:
        await _pump(process.stdout, sink)
    returncode = await process.wait()

    if returncode != 0:
        logger.debug("%s exited with %s", installer, returncode)
        raise PackageInstallError(returncode=returncode)


__all__ = [
    "OutputSink",
    "check_yarn_exist",
    "check_yarn_use_default_registry",
    "install_packages_by_yarn",
]
