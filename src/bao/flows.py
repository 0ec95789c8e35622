# src/bao/flows.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from bao.config.schema import FileFlowConfig, FolderFlowConfig, VoidFlowConfig
from bao.utils.fs import list_files
from bao.utils.logger import get_logger
from bao.variant import Variant

LOG = get_logger("flows")


# -------- Selectors -----------------------------------------------------------

@dataclass(frozen=True)
class Empty:
    """No path at all (e.g. the destination of a side-effect-only flow)."""


@dataclass(frozen=True)
class Single:
    path: str


@dataclass(frozen=True)
class Many:
    paths: List[str] = field(default_factory=list)


Selector = Union[Empty, Single, Many]


@dataclass(frozen=True)
class Resolution:
    source: Selector
    dest: Selector


# -------- Flows ---------------------------------------------------------------

class Flow(Variant, ABC):
    """A selection of source paths, resolved relative to a root directory."""

    type_tag = "Flow"

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable key for tracking this flow's files across builds."""

    @abstractmethod
    def resolve(self, root: Path) -> Resolution: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"


class FileFlow(Flow):
    """One file copied to one destination path."""

    type_tag = "FileFlow"
    config_model = FileFlowConfig

    def __init__(self, config: Union[FileFlowConfig, Mapping[str, Any], None] = None, *,
                 source: Optional[str] = None, dest: Optional[str] = None) -> None:
        super().__init__(config if config is not None else {"source": source, "dest": dest})

    @property
    def id(self) -> str:
        return f"FileFlow:{self.config.source}"

    def resolve(self, root: Path) -> Resolution:
        return Resolution(Single(self.config.source), Single(self.config.dest))


class FolderFlow(Flow):
    """
    A folder, either copied as a whole or expanded into the files it contains.

    When expanding, the files are listed recursively (optionally only those
    ending in ``.<extension>``) in sorted order, relative to the root.
    """

    type_tag = "FolderFlow"
    config_model = FolderFlowConfig

    def __init__(self, config: Union[FolderFlowConfig, Mapping[str, Any], None] = None, *,
                 source: Optional[str] = None, dest: Optional[str] = None,
                 expand: bool = False, extension: Optional[str] = None) -> None:
        if config is None:
            config = {"source": source, "dest": dest, "expand": expand, "extension": extension}
        super().__init__(config)

    @property
    def id(self) -> str:
        if self.config.extension:
            return f"FolderFlow:{self.config.source}#{self.config.extension}"
        return f"FolderFlow:{self.config.source}"

    def resolve(self, root: Path) -> Resolution:
        (root / self.config.dest).mkdir(parents=True, exist_ok=True)

        if not self.config.expand:
            return Resolution(Single(self.config.source), Single(self.config.dest))

        files = list_files(root / self.config.source, root, self.config.extension)
        for f in files:
            LOG.debug("Found file: %s", f)
        LOG.info("%s: %d file(s)", self.id, len(files))
        return Resolution(Many(files), Single(self.config.dest))


class VoidFlow(Flow):
    """A single path with no destination, for runners acting by side effect."""

    type_tag = "VoidFlow"
    config_model = VoidFlowConfig

    def __init__(self, config: Union[VoidFlowConfig, Mapping[str, Any], None] = None, *,
                 path: Optional[str] = None) -> None:
        super().__init__(config if config is not None else {"path": path})

    @property
    def id(self) -> str:
        return f"VoidFlow:{self.config.path}"

    def resolve(self, root: Path) -> Resolution:
        return Resolution(Single(self.config.path), Empty())
