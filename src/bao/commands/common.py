# src/bao/commands/common.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from bao.config.schema import BuildSettings
from bao.flows import FileFlow, FolderFlow, VoidFlow
from bao.manifest import Registry
from bao.runners import CopyRunner

DEFAULT_CONFIG_NAMES = ("bao.yaml", "bao.yml", "bao.json")


def default_registry() -> Registry:
    """Every flow and runner that ships with bao."""
    return Registry.of(
        runners=[CopyRunner],
        flows=[FolderFlow, FileFlow, VoidFlow],
    )


def settings_from_args(args) -> BuildSettings:
    settings = BuildSettings(root=Path(args.root))
    tmp_path = getattr(args, "tmp_path", None)
    if tmp_path:
        settings = settings.with_tmp_path(tmp_path)
    return settings


def find_config(root: Path, explicit: Optional[Path]) -> Optional[Path]:
    if explicit is not None:
        return explicit
    for name in DEFAULT_CONFIG_NAMES:
        p = root / name
        if p.is_file():
            return p
    return None
