# src/bao/config/io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from bao.config.schema import BuildSettings, ProjectFile
from bao.errors import ConfigurationError
from bao.utils.logger import get_logger

LOG = get_logger("config")


def read_mapping(path: Path) -> Dict[str, Any]:
    """Load a YAML (.yaml/.yml) or JSON (.json) file whose top level is a mapping."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level.")
    return data


def load_project_file(path: Path) -> ProjectFile:
    try:
        return ProjectFile.model_validate(read_mapping(path))
    except ValidationError as e:
        raise ConfigurationError(f"invalid project file {path}: {e}") from e


def load_project_config(path: Path, registry, *, settings: Optional[BuildSettings] = None):
    """
    Build a Project from a hand-written project file (same step layout as the manifest).

    Settings default to the file's folder as project root.
    """
    from bao.manifest import decode_steps  # avoids a hard cycle at import time
    from bao.project import Project, ProjectConfig

    pf = load_project_file(path)
    settings = settings or BuildSettings(root=path.parent)
    config = ProjectConfig(
        steps=decode_steps(pf.steps, registry),
        tmp_path=pf.tmp_path,
        dependencies=pf.dependencies,
    )
    LOG.info("Loaded project %s from %s (%d steps)", pf.name, path, len(config.steps))
    return Project(pf.name, config=config, settings=settings)


def write_project_file(path: Path, pf: ProjectFile) -> Path:
    payload = pf.model_dump(by_alias=True, exclude_none=True, mode="json")
    if path.suffix.lower() == ".json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = yaml.safe_dump(payload, sort_keys=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
