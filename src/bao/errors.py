# src/bao/errors.py
from __future__ import annotations

from pathlib import Path


class BaoError(Exception):
    """Base class for every error raised by bao itself."""


class ConfigurationError(BaoError):
    """A project, manifest or runner was configured in a way that cannot run."""


class ClassNotFoundError(ConfigurationError):
    def __init__(self, class_name: str, kind: str) -> None:
        self.class_name = class_name
        self.kind = kind
        super().__init__(f"{kind} class not found in registry: {class_name!r}")


class SelectorMismatchError(ConfigurationError):
    """Source and destination selectors cannot be paired by a runner."""


class ManifestNotFoundError(BaoError):
    """
    No manifest file at the expected location.

    Callers are expected to catch this and fall back to a project built in code.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"manifest file not found: {self.path}")
