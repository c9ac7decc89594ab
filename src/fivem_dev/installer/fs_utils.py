"""Filesystem utilities for the installer."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from fivem_dev.infrastructure.logger import logger

from .constants import EXCLUDED_NAMES
from .types import CopyResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def copy_tree(
    source: Path,
    destination: Path,
    excludes: Iterable[str] = EXCLUDED_NAMES,
) -> CopyResult:
    """Recursively copy the source tree into destination.

    Entries named in ``excludes`` are skipped at any depth. Existing files
    are overwritten and files absent from the source are left alone.
    Symlinks to files are dereferenced; symlinks to directories are skipped.

    The first OSError aborts the copy and is returned in the result; files
    already written stay in place.
    """
    result = CopyResult(success=True, source=source, destination=destination)
    excluded = frozenset(excludes)

    try:
        _copy_dir_filtered(source, destination, source, excluded, result)
    except OSError as err:
        result.success = False
        result.error = str(err)
        logger.error(
            "Copy failed",
            source=str(source),
            destination=str(destination),
            error=result.error,
        )
        return result

    logger.info(
        "Copied tree",
        source=str(source),
        destination=str(destination),
        files=result.files_copied,
        skipped=len(result.skipped),
    )
    return result


def _copy_dir_filtered(
    src: Path,
    dest: Path,
    root: Path,
    excludes: frozenset[str],
    result: CopyResult,
) -> None:
    # List before creating dest so a missing source leaves nothing behind
    entries = sorted(src.iterdir(), key=lambda p: p.name)

    if not dest.exists():
        dest.mkdir(parents=True, exist_ok=True)
        result.dirs_created += 1

    for entry in entries:
        if entry.name in excludes:
            result.skipped.append(entry.relative_to(root).as_posix())
            continue

        dest_path = dest / entry.name

        if entry.is_symlink() and entry.is_dir():
            rel = entry.relative_to(root).as_posix()
            result.skipped.append(rel)
            logger.warning("Skipping symlinked directory", path=rel)
            continue

        if entry.is_dir():
            _copy_dir_filtered(entry, dest_path, root, excludes, result)
        else:
            shutil.copy2(entry, dest_path)
            result.files_copied += 1
            logger.debug("Copied file", path=entry.relative_to(root).as_posix())
