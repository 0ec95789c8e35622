"""
Tests for the bao command line.
"""

import json
from pathlib import Path

import pytest

from bao.cli import main


class TestInit:

    def test_writes_project_file(self, project_root: Path):
        main(["init", "--root", str(project_root), "--name", "demo"])
        assert (project_root / "bao.yaml").is_file()

    def test_refuses_to_overwrite(self, project_root: Path):
        (project_root / "bao.yaml").write_text("name: keep\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["init", "--root", str(project_root)])
        assert exc.value.code == 1
        assert (project_root / "bao.yaml").read_text(encoding="utf-8") == "name: keep\n"


class TestBuild:

    def test_falls_back_to_project_file(self, project_root: Path, capsys):
        main(["init", "--root", str(project_root), "--name", "demo"])
        main(["build", "--root", str(project_root)])
        assert (project_root / "build" / "favicon.ico").read_bytes() == b"ico"
        assert (project_root / "build" / "fonts" / "b.ttf").is_file()
        manifest = json.loads((project_root / "bao.manifest.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "demo"
        assert "[ok] demo" in capsys.readouterr().out

    def test_uses_manifest_when_present(self, project_root: Path):
        main(["init", "--root", str(project_root), "--name", "demo"])
        main(["build", "--root", str(project_root)])
        (project_root / "bao.yaml").unlink()
        main(["build", "--root", str(project_root)])
        assert (project_root / "build" / "images" / "logo.png").is_file()

    def test_no_save(self, project_root: Path):
        main(["init", "--root", str(project_root)])
        main(["build", "--root", str(project_root), "--no-save"])
        assert not (project_root / "bao.manifest.json").exists()

    def test_tmp_path_override(self, project_root: Path):
        main(["init", "--root", str(project_root)])
        main(["build", "--root", str(project_root), "--tmp-path", ".other", "--no-save"])
        assert (project_root / ".other" / "assets").is_dir()

    def test_nothing_to_build(self, project_root: Path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["build", "--root", str(project_root)])
        assert exc.value.code == 2
        assert "no manifest" in capsys.readouterr().err

    def test_unknown_class_exits_2(self, project_root: Path, capsys):
        doc = {"name": "x", "steps": [{"runner": {"className": "Nope"}, "flow": {"className": "FileFlow"}}]}
        (project_root / "bao.manifest.json").write_text(json.dumps(doc), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["build", "--root", str(project_root)])
        assert exc.value.code == 2
        assert "Nope" in capsys.readouterr().err


class TestShow:

    def test_prints_manifest(self, project_root: Path, capsys):
        main(["init", "--root", str(project_root), "--name", "demo"])
        main(["build", "--root", str(project_root)])
        capsys.readouterr()
        main(["show", "--root", str(project_root)])
        out = capsys.readouterr().out
        assert "project: demo" in out
        assert "steps (3):" in out
        assert "FolderFlow:assets/fonts: 3" in out

    def test_missing_manifest(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["show", "--root", str(tmp_path)])
        assert exc.value.code == 2


class TestTmpPathOption:

    def test_unsafe_tmp_path_exits_2(self, project_root: Path, capsys):
        main(["init", "--root", str(project_root)])
        with pytest.raises(SystemExit) as exc:
            main(["build", "--root", str(project_root), "--tmp-path", "assets"])
        assert exc.value.code == 2
        assert "tmpPath" in capsys.readouterr().err
        assert (project_root / "assets" / "favicon.ico").is_file()
