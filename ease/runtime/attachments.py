"""Ordered registry of the artifacts attached to the current module.

Each goal receives the registry explicitly, clears and repopulates it,
and the CLI persists it as JSON in the build directory so later goal
invocations on the same module (and install/deploy tooling) can read it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ease.errors import DuplicateAttachmentError, GoalExecutionError
from ease.maven.coordinates import Artifact

logger = logging.getLogger("ease.runtime.attachments")

REGISTRY_FILENAME = "ease-attachments.json"
_FORMAT_VERSION = 1


class AttachedArtifacts:
    """Attached artifacts in attachment order, unique by artifact id."""

    def __init__(self, artifacts: Optional[Iterable[Artifact]] = None) -> None:
        self._artifacts: Dict[str, Artifact] = {}
        for artifact in artifacts or ():
            self.attach(artifact)

    def attach(self, artifact: Artifact) -> Artifact:
        """Attach an artifact.

        Raises:
            DuplicateAttachmentError: If an artifact with the same id is
                already attached.
        """
        if artifact.id in self._artifacts:
            raise DuplicateAttachmentError(
                f"Artifact {artifact.id} is already attached to the project"
            )
        self._artifacts[artifact.id] = artifact
        return artifact

    def contains(self, artifact_id: str) -> bool:
        return artifact_id in self._artifacts

    def get(self, artifact_id: str) -> Optional[Artifact]:
        return self._artifacts.get(artifact_id)

    def remove(self, artifact_id: str) -> Optional[Artifact]:
        return self._artifacts.pop(artifact_id, None)

    def clear(self) -> None:
        self._artifacts.clear()

    def snapshot(self) -> List[Artifact]:
        return list(self._artifacts.values())

    def __iter__(self) -> Iterator[Artifact]:
        return iter(list(self._artifacts.values()))

    def __len__(self) -> int:
        return len(self._artifacts)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Artifact):
            return item.id in self._artifacts
        return item in self._artifacts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": _FORMAT_VERSION,
            "attached": [
                {
                    "groupId": a.group_id,
                    "artifactId": a.artifact_id,
                    "type": a.type,
                    "classifier": a.classifier,
                    "version": a.version,
                    "file": str(a.file) if a.file is not None else None,
                }
                for a in self._artifacts.values()
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttachedArtifacts":
        registry = cls()
        for entry in data.get("attached", []):
            registry.attach(
                Artifact.of(
                    group_id=entry["groupId"],
                    artifact_id=entry["artifactId"],
                    version=entry["version"],
                    type=entry["type"],
                    classifier=entry.get("classifier"),
                    file=Path(entry["file"]) if entry.get("file") else None,
                )
            )
        return registry


def registry_path(build_directory: Path) -> Path:
    return build_directory / REGISTRY_FILENAME


def load_attachments(build_directory: Path) -> AttachedArtifacts:
    """Load the persisted registry; a missing file means nothing is attached."""
    path = registry_path(build_directory)
    if not path.is_file():
        logger.debug("No attachment registry at %s", path)
        return AttachedArtifacts()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise GoalExecutionError(f"Could not read attachment registry: {path}") from exc
    if not isinstance(data, dict):
        raise GoalExecutionError(f"Malformed attachment registry: {path}")
    try:
        return AttachedArtifacts.from_dict(data)
    except KeyError as exc:
        raise GoalExecutionError(f"Malformed attachment registry: {path}") from exc


def save_attachments(build_directory: Path, registry: AttachedArtifacts) -> Path:
    path = registry_path(build_directory)
    try:
        build_directory.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(registry.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        raise GoalExecutionError(f"Could not write attachment registry: {path}") from exc
    return path


__all__ = [
    "AttachedArtifacts",
    "REGISTRY_FILENAME",
    "registry_path",
    "load_attachments",
    "save_attachments",
]
