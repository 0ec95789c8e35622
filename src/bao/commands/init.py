# src/bao/commands/init.py
from __future__ import annotations

import sys
from pathlib import Path

from bao.config.io import write_project_file
from bao.config.schema import ClassRef, ProjectFile, StepRecord
from bao.utils.logger import get_logger

LOG = get_logger("init")


def setup_parser(subparsers, parent) -> None:
    p = subparsers.add_parser(
        "init", parents=[parent],
        help="Write a starter bao.yaml copying images, fonts and the favicon.",
    )
    p.add_argument("--name", type=str, default=None, help="Project name (default: root folder name).")
    p.add_argument("--output-file", type=Path, default=None, help="Default: <root>/bao.yaml")
    p.add_argument("--force", action="store_true")
    p.set_defaults(func=run)


def _copy(flow: str, **config) -> StepRecord:
    return StepRecord(
        runner=ClassRef(class_name="CopyRunner"),
        flow=ClassRef(class_name=flow, config=config),
    )


def starter_project(name: str) -> ProjectFile:
    return ProjectFile(
        name=name,
        steps=[
            _copy("FolderFlow", source="assets/images", dest="build/images"),
            _copy("FolderFlow", source="assets/fonts", dest="build/fonts", expand=True),
            _copy("FileFlow", source="assets/favicon.ico", dest="build/favicon.ico"),
        ],
    )


def run(args) -> None:
    root = Path(args.root)
    out: Path = args.output_file or root / "bao.yaml"
    if out.exists() and not args.force:
        print(f"error: {out} exists (use --force to overwrite).", file=sys.stderr)
        sys.exit(1)
    name = args.name or root.resolve().name
    write_project_file(out, starter_project(name))
    LOG.info("Project file written → %s", out)
    print(f"[ok] project file → {out}")
