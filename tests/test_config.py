"""
Tests for project files (bao.yaml / bao.json) and build settings.
"""

import json
from pathlib import Path

import pytest
import yaml

from bao.config.io import load_project_config, load_project_file, read_mapping, write_project_file
from bao.config.schema import BuildSettings
from bao.commands.init import starter_project
from bao.errors import ClassNotFoundError, ConfigurationError
from bao.flows import FileFlow, FolderFlow
from bao.runners import CopyRunner

PROJECT_YAML = """\
name: site
tmpPath: .stage
dependencies:
  normalize.css: 8.0.1
steps:
  - runner: {className: CopyRunner}
    flow:
      className: FolderFlow
      config: {source: assets/fonts, dest: build/fonts, expand: true}
  - runner: {className: CopyRunner}
    flow:
      className: FileFlow
      config: {source: assets/favicon.ico, dest: build/favicon.ico}
"""


class TestReadMapping:

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "bao.yaml"
        path.write_text("name: x\n", encoding="utf-8")
        assert read_mapping(path) == {"name": "x"}

    def test_json(self, tmp_path: Path):
        path = tmp_path / "bao.json"
        path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
        assert read_mapping(path) == {"name": "x"}

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "bao.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            read_mapping(path)


class TestProjectFile:

    def test_load_project_config(self, project_root: Path, registry):
        path = project_root / "bao.yaml"
        path.write_text(PROJECT_YAML, encoding="utf-8")
        project = load_project_config(path, registry)
        assert project.name == "site"
        assert project.settings.root == project_root
        assert project.settings.tmp_path == ".stage"
        assert project.dependencies == {"normalize.css": "8.0.1"}
        assert [s.flow for s in project.steps] == [
            FolderFlow(source="assets/fonts", dest="build/fonts", expand=True),
            FileFlow(source="assets/favicon.ico", dest="build/favicon.ico"),
        ]
        assert all(s.runner == CopyRunner() for s in project.steps)

    def test_project_from_file_builds(self, project_root: Path, registry):
        path = project_root / "bao.yaml"
        path.write_text(PROJECT_YAML, encoding="utf-8")
        load_project_config(path, registry).build()
        assert (project_root / "build/fonts/b.ttf").read_bytes() == b"font-b"
        assert (project_root / ".stage").is_dir()

    def test_unknown_class(self, tmp_path: Path, registry):
        path = tmp_path / "bao.yaml"
        path.write_text(PROJECT_YAML.replace("FileFlow", "ZipFlow"), encoding="utf-8")
        with pytest.raises(ClassNotFoundError, match="ZipFlow"):
            load_project_config(path, registry)

    def test_missing_name(self, tmp_path: Path):
        path = tmp_path / "bao.yaml"
        path.write_text("steps: []\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_project_file(path)

    def test_starter_round_trips_through_yaml(self, tmp_path: Path, registry):
        path = write_project_file(tmp_path / "bao.yaml", starter_project("demo"))
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["name"] == "demo"
        assert data["steps"][0]["runner"] == {"className": "CopyRunner"}
        project = load_project_config(path, registry)
        assert [s.flow.id for s in project.steps] == [
            "FolderFlow:assets/images",
            "FolderFlow:assets/fonts",
            "FileFlow:assets/favicon.ico",
        ]


class TestBuildSettings:

    def test_paths(self, tmp_path: Path):
        s = BuildSettings(root=tmp_path)
        assert s.assets_path == tmp_path / "assets"
        assert s.build_path == tmp_path / "build"
        assert s.staging_path == tmp_path / ".bao_tmp"
        assert s.manifest_path == tmp_path / "bao.manifest.json"

    @pytest.mark.parametrize("bad", ["", ".", ".."])
    def test_rejects_root_as_staging(self, bad):
        with pytest.raises(ValueError):
            BuildSettings(tmp_path=bad)

    @pytest.mark.parametrize("bad", ["x/..", "assets", "build", "assets/stage", "build/tmp", "../.."])
    def test_rejects_staging_over_project_folders(self, tmp_path: Path, bad):
        with pytest.raises(ValueError, match="tmp_path"):
            BuildSettings(root=tmp_path / "site", tmp_path=bad)

    def test_accepts_nested_dedicated_folder(self, tmp_path: Path):
        s = BuildSettings(root=tmp_path, tmp_path="work/stage")
        assert s.staging_path == tmp_path / "work" / "stage"

    def test_with_tmp_path_validates(self, tmp_path: Path):
        s = BuildSettings(root=tmp_path)
        assert s.with_tmp_path(".stage").tmp_path == ".stage"
        with pytest.raises(ConfigurationError, match="tmpPath"):
            s.with_tmp_path(".")
