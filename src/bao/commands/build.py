# src/bao/commands/build.py
from __future__ import annotations

import sys
from pathlib import Path

from bao.commands.common import default_registry, find_config, settings_from_args
from bao.config.io import load_project_config
from bao.errors import ManifestNotFoundError
from bao.project import Project
from bao.utils.logger import get_logger

LOG = get_logger("build.cmd")


def setup_parser(subparsers, parent) -> None:
    p = subparsers.add_parser(
        "build", parents=[parent],
        help="Stage assets, run every step, and publish build/.",
        description=(
            "Loads bao.manifest.json from the project root. Without a manifest, "
            "falls back to the project file (--config, or bao.yaml in the root)."
        ),
    )
    p.add_argument("--config", type=Path, default=None,
                   help="Project file (YAML/JSON) used when no manifest exists.")
    p.add_argument("--tmp-path", type=str, default=None,
                   help="Staging folder, relative to the root (default .bao_tmp).")
    p.add_argument("--no-save", dest="save", action="store_false",
                   help="Do not write bao.manifest.json after building.")
    p.set_defaults(func=run, save=True)


def _load(args) -> Project:
    settings = settings_from_args(args)
    registry = default_registry()
    try:
        project = Project.load_from_manifest(registry, settings=settings)
        if args.tmp_path:
            project.settings = settings
        return project
    except ManifestNotFoundError:
        LOG.warning("No manifest found at %s", settings.manifest_path)

    config = find_config(settings.root, args.config)
    if config is None:
        print(
            f"error: no manifest at {settings.manifest_path} and no project file "
            f"(pass --config or add bao.yaml).",
            file=sys.stderr,
        )
        sys.exit(2)
    project = load_project_config(config, registry, settings=settings)
    if args.tmp_path:
        # --tmp-path beats the project file's tmpPath
        project.settings = settings
    return project


def run(args) -> None:
    project = _load(args)
    out = project.build(save=args.save)
    print(f"[ok] {project.name} → {out}")
