# src/bao/project.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set, Tuple, Union

from bao.config.schema import DEFAULT_TMP_PATH, BuildSettings
from bao.flows import Flow, Many
from bao.runners import Runner
from bao.utils.fs import copy_path, reset_dir
from bao.utils.logger import get_logger, log_success

if TYPE_CHECKING:
    from bao.manifest import Registry

LOG = get_logger("project")


@dataclass(frozen=True)
class Step:
    runner: Runner
    flow: Flow


@dataclass
class ProjectConfig:
    steps: List[Step] = field(default_factory=list)
    tmp_path: str = DEFAULT_TMP_PATH
    dependencies: Dict[str, str] = field(default_factory=dict)


StepLike = Union[Step, Tuple[Runner, Flow]]


def _as_step(s: StepLike) -> Step:
    if isinstance(s, Step):
        return s
    runner, flow = s
    return Step(runner=runner, flow=flow)


class Project:
    """
    An ordered list of (runner, flow) steps plus the files each flow resolved to.

    build() stages <root>/assets into the staging area, runs every step there in
    order, then replaces <root>/build with the staged build output.
    """

    def __init__(
        self,
        name: str,
        steps: Optional[Iterable[StepLike]] = None,
        *,
        config: Optional[ProjectConfig] = None,
        dependencies: Optional[Dict[str, str]] = None,
        flow_files: Optional[Dict[str, Set[str]]] = None,
        settings: Optional[BuildSettings] = None,
    ) -> None:
        if steps is not None and config is not None:
            raise TypeError("pass either steps or config, not both")
        self.name = name
        self.settings = settings or BuildSettings()
        self.dependencies: Dict[str, str] = dict(dependencies or {})
        self.flow_files: Dict[str, Set[str]] = {k: set(v) for k, v in (flow_files or {}).items()}
        if config is not None:
            steps = config.steps
            self.settings = self.settings.with_tmp_path(config.tmp_path)
            self.dependencies = {**config.dependencies, **self.dependencies}
        self.steps: List[Step] = [_as_step(s) for s in (steps or [])]

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, steps={len(self.steps)}, root={str(self.settings.root)!r})"

    # -------- build stages ----------------------------------------------------

    def build(self, *, save: bool = False) -> Path:
        """Stage, execute every step in order, publish. Returns the output folder."""
        LOG.info("Building project: %s", self.name)
        staging = self.stage()
        for i, step in enumerate(self.steps, start=1):
            LOG.debug("Step %d/%d", i, len(self.steps))
            self.execute_step(step.runner, step.flow, staging)
        out = self.publish(staging)
        log_success(f"Built {self.name} → {out}", LOG)
        if save:
            self.save_to_manifest()
        return out

    def stage(self) -> Path:
        s = self.settings
        if not s.assets_path.is_dir():
            LOG.error("Assets folder not found: %s", s.assets_path)
            raise FileNotFoundError(f"Assets folder not found: {s.assets_path}")
        staging = reset_dir(s.staging_path)
        copy_path(s.assets_path, staging / s.assets_dir)
        LOG.info("Staged %s → %s", s.assets_path, staging)
        return staging

    def execute_step(self, runner: Runner, flow: Flow, root: Path) -> None:
        LOG.info("Executing flow: %s", flow.id)
        res = flow.resolve(root)
        source = res.source
        if isinstance(source, Many):
            source = Many(self._track(flow.id, source.paths))
        LOG.info("Running runner: %s", type(runner).__name__)
        runner.run(source, res.dest, root)

    def publish(self, staging: Path) -> Path:
        s = self.settings
        out = reset_dir(s.build_path)
        produced = staging / s.build_dir
        if produced.is_dir():
            copy_path(produced, out)
        else:
            LOG.warning("No build output in %s; %s left empty", produced, out)
        return out

    def _track(self, flow_id: str, paths: List[str]) -> List[str]:
        """Record *paths* as the flow's file set; returns them de-duplicated, in order."""
        resolved = list(dict.fromkeys(paths))
        current = set(resolved)
        previous = self.flow_files.get(flow_id, set())
        stale = previous - current
        if stale:
            LOG.debug("%s: dropping %d file(s) no longer present: %s", flow_id, len(stale), sorted(stale))
        # files gone from the source since the last build are not carried over
        self.flow_files[flow_id] = (previous & current) | current
        return resolved

    # -------- manifest --------------------------------------------------------

    @classmethod
    def load_from_manifest(
        cls,
        registry: "Registry",
        root: Union[str, Path, None] = None,
        *,
        settings: Optional[BuildSettings] = None,
    ) -> "Project":
        """
        Rebuild a project from <root>/bao.manifest.json.

        Raises ManifestNotFoundError when the file does not exist, and
        ClassNotFoundError when a step names a class missing from *registry*.
        """
        from bao.manifest import decode_project, read_manifest  # avoids a hard cycle at import time

        if settings is None:
            settings = BuildSettings(root=Path(root)) if root is not None else BuildSettings()
        doc = read_manifest(settings.manifest_path)
        project = decode_project(doc, registry, settings)
        LOG.info("Loaded %s from %s (%d steps)", project.name, settings.manifest_path, len(project.steps))
        return project

    def to_manifest(self) -> dict:
        from bao.manifest import encode_project

        return encode_project(self).to_json_dict()

    def save_to_manifest(self, path: Optional[Path] = None) -> Path:
        from bao.manifest import encode_project, write_manifest

        return write_manifest(encode_project(self), path or self.settings.manifest_path)
