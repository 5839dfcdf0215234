"""Filesystem helpers used while laying down a project template."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def check_folder_exist(target_path: str | os.PathLike[str]) -> bool:
    """Return True if a file or directory exists at ``target_path``.

    Access errors are reported as non-existence.
    """
    return os.path.exists(target_path)


def sync_folder(source_path: str | os.PathLike[str], target_path: str | os.PathLike[str]) -> None:
    """Copy ``source_path`` recursively into ``target_path``.

    ``target_path`` and its parents are created when missing and entries
    already present at the destination are overwritten. Symlinks are copied
    as links. A plain file source is copied to ``target_path`` as a file.

    Raises:
        FileNotFoundError: ``source_path`` does not exist.
        OSError: the copy could not be performed (e.g. permissions).
    """
    source = Path(source_path)
    target = Path(target_path)
    logger.debug("Copying %s -> %s", source, target)

    if source.is_file():
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        return

    if target.is_dir():
        _clear_stale_links(source, target)
    shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)


def _clear_stale_links(source: Path, target: Path) -> None:
    """Unlink destination entries copytree cannot replace in place.

    A source symlink is recreated with ``os.symlink``, which refuses an
    existing entry, and a source file would be written through an existing
    destination symlink.
    """
    for root, dirs, files in os.walk(source):
        relative = Path(root).relative_to(source)
        for name in [*dirs, *files]:
            src_entry = Path(root) / name
            if src_entry.is_dir() and not src_entry.is_symlink():
                continue
            dest_entry = target / relative / name
            if dest_entry.is_symlink() or (
                src_entry.is_symlink() and dest_entry.exists() and not dest_entry.is_dir()
            ):
                logger.debug("Replacing %s", dest_entry)
                dest_entry.unlink()


__all__ = ["check_folder_exist", "sync_folder"]
