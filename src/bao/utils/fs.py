# src/bao/utils/fs.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Optional

from bao.utils.logger import get_logger

LOG = get_logger("fs")


def reset_dir(path: Path) -> Path:
    """Remove *path* (if present) and recreate it empty."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_path(src: Path, dest: Path) -> Path:
    """
    Copy a file or a directory tree to *dest*.

    Directories are merged into an existing destination with their structure
    preserved; files overwrite whatever is at *dest*. Missing parents are created.
    """
    LOG.info("Copying from %s to %s", src, dest)
    try:
        if src.is_dir():
            shutil.copytree(src, dest, dirs_exist_ok=True)
        else:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dest)
    except OSError as e:
        LOG.error("Copy failed: %s -> %s (%s)", src, dest, e)
        raise
    return dest


def list_files(folder: Path, base: Path, extension: Optional[str] = None) -> List[str]:
    """
    Every regular file under *folder*, as POSIX paths relative to *base*,
    sorted so repeated walks of an unchanged tree agree.
    """
    if not folder.is_dir():
        raise FileNotFoundError(f"Folder not found: {folder}")
    suffix = f".{extension}" if extension else None
    found: List[str] = []
    for p in folder.rglob("*"):
        if not p.is_file():
            continue
        if suffix and not p.name.endswith(suffix):
            continue
        try:
            rel = p.relative_to(base)
        except ValueError:
            # source given as a path outside the staging area
            rel = p
        found.append(rel.as_posix())
    return sorted(found)
