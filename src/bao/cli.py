# src/bao/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bao.errors import BaoError
from bao.utils.logger import setup_logger

from bao.commands import build as cmd_build
from bao.commands import init as cmd_init
from bao.commands import show as cmd_show


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="bao",
        description="Asset-copy pipeline (init, build, show).",
    )

    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--root", type=Path, default=Path("."),
                        help="Project root holding assets/ and bao.manifest.json.")
    parent.add_argument("--log-file", type=Path, default=None,
                        help="Also write DEBUG logs to this file.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    cmd_init.setup_parser(subparsers, parent)
    cmd_build.setup_parser(subparsers, parent)
    cmd_show.setup_parser(subparsers, parent)

    args = parser.parse_args(argv)
    logger = setup_logger(args.log_file)
    logger.debug("Parsed args: %r", args)
    try:
        args.func(args)
    except BaoError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
