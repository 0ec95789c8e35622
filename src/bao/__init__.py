"""bao: copy selected assets into a build folder, driven by a JSON manifest."""
from bao.config.schema import BuildSettings
from bao.errors import (
    BaoError,
    ClassNotFoundError,
    ConfigurationError,
    ManifestNotFoundError,
    SelectorMismatchError,
)
from bao.flows import Empty, FileFlow, Flow, FolderFlow, Many, Resolution, Single, VoidFlow
from bao.manifest import Registry
from bao.project import Project, ProjectConfig, Step
from bao.runners import CopyRunner, Runner

__all__ = [
    "BaoError",
    "BuildSettings",
    "ClassNotFoundError",
    "ConfigurationError",
    "CopyRunner",
    "Empty",
    "FileFlow",
    "Flow",
    "FolderFlow",
    "ManifestNotFoundError",
    "Many",
    "Project",
    "ProjectConfig",
    "Registry",
    "Resolution",
    "Runner",
    "SelectorMismatchError",
    "Single",
    "Step",
    "VoidFlow",
]
