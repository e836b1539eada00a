"""Walk a content tree, mirroring its directories into the output tree."""

from __future__ import annotations

import errno
import logging
import typing as typ

from quire._constants import CONTENT_SUFFIXES
from quire.errors import FileError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def scan_content(content_root: Path, dest_root: Path) -> list[Path]:
    """Return every content file below ``content_root``.

    Subdirectories are recreated under ``dest_root`` as they are discovered,
    so the renderer can write pages without creating directories itself.
    Files ending in ``.md`` or ``.html`` are collected; anything else is
    skipped. Entries are visited in name order.

    Parameters
    ----------
    content_root : Path
        Directory holding page sources.
    dest_root : Path
        Directory that mirrors ``content_root`` in the output tree.

    Returns
    -------
    list[Path]
        Flat list of content file paths, regardless of nesting depth.

    Raises
    ------
    FileError
        If ``content_root`` does not exist, or a directory cannot be listed or
        mirrored. No partial result is returned.
    """
    if not content_root.exists():
        raise FileError(errno.errorcode[errno.ENOENT].lower(), content_root)
    logger.info("Scanning `%s` directory...", content_root)
    found: list[Path] = []
    _scan_directory(content_root, content_root, dest_root, found)
    return found


def _scan_directory(
    directory: Path, content_root: Path, dest_root: Path, found: list[Path]
) -> None:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise FileError.from_os_error(exc, directory) from exc

    for entry in entries:
        if entry.is_dir():
            mirror = dest_root / entry.relative_to(content_root)
            try:
                mirror.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FileError.from_os_error(exc, mirror) from exc
            logger.debug("Mirrored %s -> %s", entry, mirror)
            _scan_directory(entry, content_root, dest_root, found)
        elif entry.name.endswith(CONTENT_SUFFIXES):
            found.append(entry)


__all__ = ["scan_content"]
