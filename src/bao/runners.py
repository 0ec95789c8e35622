# src/bao/runners.py
from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from bao.config.schema import CopyRunnerConfig
from bao.errors import SelectorMismatchError
from bao.flows import Empty, Many, Selector, Single
from bao.utils.fs import copy_path
from bao.utils.logger import get_logger
from bao.variant import Variant

LOG = get_logger("runners")


class Runner(Variant, ABC):
    """An action applied to the paths a flow resolves to."""

    type_tag = "Runner"

    @abstractmethod
    def run(self, source: Selector, dest: Selector, root: Path) -> None: ...


class CopyRunner(Runner):
    """
    Copy files and folders from the flow's source(s) to its destination(s).

    Shapes handled:
      - many -> many: element-wise, lengths must match
      - many -> single: single is a directory, each item lands at dest/<basename>
        (or at dest itself in file mode)
      - single -> many: only the first destination is used
      - single -> single: direct copy, recursive for folders
    An empty source or destination is a no-op.
    """

    type_tag = "CopyRunner"
    config_model = CopyRunnerConfig

    def __init__(self, config: Union[CopyRunnerConfig, Mapping[str, Any], None] = None, *,
                 file_mode: bool = False) -> None:
        super().__init__(config if config is not None else {"isFileMode": file_mode})

    @property
    def file_mode(self) -> bool:
        return self.config.file_mode

    def to_config(self) -> Optional[Dict[str, Any]]:
        # the default runner carries no arguments
        return {"isFileMode": True} if self.file_mode else None

    def run(self, source: Selector, dest: Selector, root: Path) -> None:
        if isinstance(source, Empty) or isinstance(dest, Empty):
            LOG.info("No source or destination provided to CopyRunner.")
            return

        if isinstance(source, Many) and isinstance(dest, Many):
            if len(source.paths) != len(dest.paths):
                raise SelectorMismatchError(
                    f"CopyRunner got {len(source.paths)} source(s) "
                    f"but {len(dest.paths)} destination(s)"
                )
            for src, dst in zip(source.paths, dest.paths):
                copy_path(root / src, root / dst)
            return

        if isinstance(source, Many) and isinstance(dest, Single):
            if self.file_mode and len(source.paths) > 1:
                LOG.warning("File mode with %d sources: each overwrites %s", len(source.paths), dest.path)
            for src in source.paths:
                target = dest.path if self.file_mode else posixpath.join(dest.path, posixpath.basename(src))
                copy_path(root / src, root / target)
            return

        if isinstance(source, Single) and isinstance(dest, Many):
            if not dest.paths:
                raise SelectorMismatchError(f"CopyRunner got no destination for {source.path}")
            LOG.warning(
                "Source is a single path but destination is a list. "
                "Using the first element of destination."
            )
            copy_path(root / source.path, root / dest.paths[0])
            return

        if isinstance(source, Single) and isinstance(dest, Single):
            copy_path(root / source.path, root / dest.path)
            return

        raise TypeError(f"unsupported selectors: {source!r} -> {dest!r}")
