# src/bao/manifest.py
"""
Manifest codec: Project <-> bao.manifest.json.

Steps are stored as ``{"runner": {"className", "config"}, "flow": {...}}``
and rebuilt by looking each className up in a caller-supplied Registry.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type

from pydantic import ValidationError

from bao.config.schema import BuildSettings, ClassRef, ManifestDocument, StepRecord
from bao.errors import ClassNotFoundError, ConfigurationError, ManifestNotFoundError
from bao.flows import Flow
from bao.project import Project, Step
from bao.runners import Runner
from bao.utils.logger import get_logger

LOG = get_logger("manifest")

Factory = Callable[[Optional[Dict[str, Any]]], Any]


class Registry:
    """Maps manifest class names to flow and runner factories."""

    def __init__(
        self,
        *,
        flows: Optional[Mapping[str, Factory]] = None,
        runners: Optional[Mapping[str, Factory]] = None,
    ) -> None:
        self.flows: Dict[str, Factory] = dict(flows or {})
        self.runners: Dict[str, Factory] = dict(runners or {})

    @classmethod
    def of(
        cls,
        *,
        flows: Iterable[Type[Flow]] = (),
        runners: Iterable[Type[Runner]] = (),
    ) -> "Registry":
        """Registry keyed by each class's type tag, using its from_config factory."""
        return cls(
            flows={c.type_tag: c.from_config for c in flows},
            runners={c.type_tag: c.from_config for c in runners},
        )

    def make_flow(self, ref: ClassRef) -> Flow:
        return self._make(self.flows, "Flow", ref)

    def make_runner(self, ref: ClassRef) -> Runner:
        return self._make(self.runners, "Runner", ref)

    @staticmethod
    def _make(table: Dict[str, Factory], kind: str, ref: ClassRef) -> Any:
        factory = table.get(ref.class_name)
        if factory is None:
            LOG.error("%s class not found: %s (known: %s)", kind, ref.class_name, ", ".join(sorted(table)) or "none")
            raise ClassNotFoundError(ref.class_name, kind)
        try:
            return factory(ref.config)
        except ConfigurationError:
            raise
        except (TypeError, ValueError, KeyError) as e:
            LOG.error("%s %s rejected its config: %s", kind, ref.class_name, e)
            raise ConfigurationError(f"invalid config for {kind} {ref.class_name!r}: {e}") from e


# -------- Encode --------------------------------------------------------------

def _class_ref(obj: Any) -> ClassRef:
    return ClassRef(class_name=obj.type_tag, config=obj.to_config())


def encode_step(step: Step) -> StepRecord:
    return StepRecord(runner=_class_ref(step.runner), flow=_class_ref(step.flow))


def encode_project(project: Project) -> ManifestDocument:
    return ManifestDocument(
        name=project.name,
        dependencies=dict(project.dependencies),
        flows={fid: sorted(files) for fid, files in project.flow_files.items()},
        steps=[encode_step(s) for s in project.steps],
        tmp_path=project.settings.tmp_path,
    )


# -------- Decode --------------------------------------------------------------

def decode_steps(records: Iterable[StepRecord], registry: Registry) -> List[Step]:
    return [Step(runner=registry.make_runner(r.runner), flow=registry.make_flow(r.flow)) for r in records]


def decode_project(
    doc: ManifestDocument,
    registry: Registry,
    settings: Optional[BuildSettings] = None,
) -> Project:
    settings = (settings or BuildSettings()).with_tmp_path(doc.tmp_path)
    return Project(
        doc.name,
        decode_steps(doc.steps, registry),
        dependencies=doc.dependencies,
        flow_files={fid: set(files) for fid, files in doc.flows.items()},
        settings=settings,
    )


# -------- Files ---------------------------------------------------------------

def read_manifest(path: Path) -> ManifestDocument:
    if not path.is_file():
        raise ManifestNotFoundError(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    try:
        return ManifestDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"malformed manifest {path}: {e}") from e


def write_manifest(doc: ManifestDocument, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc.to_json_dict(), indent=2) + "\n", encoding="utf-8")
    LOG.info("Manifest written → %s (%d steps)", path, len(doc.steps))
    return path
