# src/bao/commands/show.py
from __future__ import annotations

import sys

from bao.commands.common import settings_from_args
from bao.errors import ManifestNotFoundError
from bao.manifest import read_manifest


def setup_parser(subparsers, parent) -> None:
    p = subparsers.add_parser(
        "show", parents=[parent],
        help="Print the project manifest: steps, dependencies, tracked files.",
    )
    p.set_defaults(func=run)


def run(args) -> None:
    settings = settings_from_args(args)
    try:
        doc = read_manifest(settings.manifest_path)
    except ManifestNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    print(f"project: {doc.name}")
    print(f"staging: {doc.tmp_path}")
    if doc.dependencies:
        print("dependencies:")
        for name, version in sorted(doc.dependencies.items()):
            print(f"  {name} {version}")
    print(f"steps ({len(doc.steps)}):")
    for i, step in enumerate(doc.steps, start=1):
        cfg = step.flow.config or {}
        print(f"  {i}. {step.runner.class_name} <- {step.flow.class_name} {cfg}")
    if doc.flows:
        print("tracked files:")
        for fid, files in sorted(doc.flows.items()):
            print(f"  {fid}: {len(files)}")
