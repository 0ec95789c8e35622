# src/bao/config/schema.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from bao.errors import ConfigurationError

DEFAULT_TMP_PATH = ".bao_tmp"
DEFAULT_MANIFEST_NAME = "bao.manifest.json"


class BuildSettings(BaseModel):
    """Where a project reads assets from, stages them, and publishes output."""

    root: Path = Field(default_factory=Path)
    assets_dir: str = "assets"
    build_dir: str = "build"
    tmp_path: str = DEFAULT_TMP_PATH
    manifest_name: str = DEFAULT_MANIFEST_NAME

    @field_validator("tmp_path")
    @classmethod
    def _check_tmp(cls, v: str) -> str:
        # the staging area is wiped on every build
        if Path(v) in (Path("."), Path("..")) or not v.strip():
            raise ValueError("tmp_path must name a dedicated folder, not the project root")
        return v

    @model_validator(mode="after")
    def _check_staging_location(self) -> "BuildSettings":
        # staging is wiped on every build and build/ on every publish
        staging = self.staging_path.resolve()
        for label, p in (("project root", self.root), ("assets folder", self.assets_path),
                         ("build folder", self.build_path)):
            p = p.resolve()
            if staging == p or staging in p.parents:
                raise ValueError(f"tmp_path {self.tmp_path!r} would contain the {label} ({p})")
            if label != "project root" and p in staging.parents:
                raise ValueError(f"tmp_path {self.tmp_path!r} lies inside the {label} ({p})")
        return self

    def with_tmp_path(self, tmp_path: str) -> "BuildSettings":
        """Copy with another staging folder, validated like a fresh instance."""
        try:
            return BuildSettings.model_validate({**self.model_dump(), "tmp_path": tmp_path})
        except ValidationError as e:
            raise ConfigurationError(f"invalid tmpPath {tmp_path!r}: {e}") from e

    @property
    def assets_path(self) -> Path:
        return self.root / self.assets_dir

    @property
    def build_path(self) -> Path:
        return self.root / self.build_dir

    @property
    def staging_path(self) -> Path:
        return self.root / self.tmp_path

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_name


# -------- Variant configs -----------------------------------------------------

class _VariantConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


class FileFlowConfig(_VariantConfig):
    source: str
    dest: str


class FolderFlowConfig(_VariantConfig):
    source: str
    dest: str
    expand: bool = False
    extension: Optional[str] = None

    @field_validator("extension")
    @classmethod
    def _strip_dot(cls, v: Optional[str]) -> Optional[str]:
        # "ttf" and ".ttf" select the same files
        if v is None:
            return None
        v = v.strip().lstrip(".")
        return v or None


class VoidFlowConfig(_VariantConfig):
    path: str


class CopyRunnerConfig(_VariantConfig):
    file_mode: bool = Field(False, alias="isFileMode")


# -------- Manifest / project file documents -----------------------------------

class ClassRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(alias="className")
    config: Optional[Dict[str, Any]] = None


class StepRecord(BaseModel):
    runner: ClassRef
    flow: ClassRef


class ProjectFile(BaseModel):
    """Hand-written project configuration (bao.yaml / bao.json)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    dependencies: Dict[str, str] = Field(default_factory=dict)
    steps: List[StepRecord] = Field(default_factory=list)
    tmp_path: str = Field(DEFAULT_TMP_PATH, alias="tmpPath")


class ManifestDocument(BaseModel):
    """The persisted bao.manifest.json document."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    dependencies: Dict[str, str] = Field(default_factory=dict)
    flows: Dict[str, List[str]] = Field(default_factory=dict)
    steps: List[StepRecord] = Field(default_factory=list)
    tmp_path: str = Field(DEFAULT_TMP_PATH, alias="tmpPath")

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
