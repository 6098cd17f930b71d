"""
Base goal class implementing the template method pattern.

Every goal is a single linear pass: load, filter/resolve, transform,
write/attach. ``BaseGoal.run`` wraps the goal-specific ``execute`` with
logging and error reporting; any ``GoalExecutionError`` aborts the goal
and propagates to the caller. There is no partial-success mode.

Helpers shared by several goals live here as well:
- writing and attaching an artifact list
- resolving an artifact in a repository and attaching it
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from ease.errors import ArtifactFileMissingError, GoalExecutionError
from ease.maven.coordinates import Artifact, Coordinate
from ease.maven.manifest import (
    MANIFEST_CLASSIFIER,
    MANIFEST_TYPE,
    manifest_filename,
    read_manifest,
    write_manifest,
)
from ease.maven.project import MavenProject
from ease.maven.repository import ArtifactRepository
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.base")


class BaseGoal(ABC):
    """Abstract base class for all goals.

    Attributes:
        NAME: Goal name as used on the command line.
    """

    NAME: str = ""

    def run(self, context: GoalContext) -> None:
        """Execute the goal with standardized logging.

        Raises:
            GoalExecutionError: If the goal fails for any reason.
        """
        logger.info("=== Goal: %s (%s) ===", self.NAME, context.project.id)
        try:
            self.execute(context)
        except GoalExecutionError as error:
            logger.debug("Goal %s failed: %s", self.NAME, error, exc_info=True)
            raise
        logger.info(
            "Goal %s finished with %d attached artifact(s)",
            self.NAME,
            len(context.attachments),
        )

    @abstractmethod
    def execute(self, context: GoalContext) -> None:
        """Goal-specific work; subclasses implement this."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")


def write_and_attach_artifact_list(context: GoalContext, text: str) -> Artifact:
    """Write ``<artifactId>-<version>-artifacts.txt`` and attach it."""
    project = context.project
    path = write_manifest(
        project.build_directory,
        manifest_filename(project.artifact_id, project.version),
        text,
    )
    artifact = Artifact(
        project.coordinate.with_type(MANIFEST_TYPE, MANIFEST_CLASSIFIER),
        path,
    )
    if context.attachments.remove(artifact.id) is not None:
        logger.debug("Replacing previously attached artifact list %s", artifact.id)
    context.attachments.attach(artifact)
    logger.info("Successfully attached artifact list to the project.")
    return artifact


def fetch_dependency_manifest(
    repository: ArtifactRepository, dependency: Coordinate
) -> Path:
    """Locate the artifact list a dependency attached when it was frozen.

    The file is not checked here; reading it raises ManifestNotFoundError.
    """
    found = repository.find(dependency.artifact_list())
    assert found.file is not None
    return found.file


def read_dependency_manifest(
    repository: ArtifactRepository, dependency: Coordinate
) -> List[Coordinate]:
    path = fetch_dependency_manifest(repository, dependency)
    return read_manifest(path, owner=dependency.id)


def copy_if_modified(source: Path, destination: Path) -> bool:
    """Copy ``source`` over ``destination`` unless the destination is up to date.

    Returns:
        True if a copy happened.
    """
    if destination.exists() and destination.stat().st_mtime >= source.stat().st_mtime:
        return False
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, destination)
    return True


def resolve_artifact(
    repository: ArtifactRepository, coordinate: Coordinate
) -> Artifact:
    """Find an artifact file in a repository.

    Raises:
        ArtifactFileMissingError: If the repository has no file for it.
    """
    found = repository.find(coordinate)
    if found.file is None or not found.file.is_file():
        raise ArtifactFileMissingError(f"Missing artifact file: {found.file}")
    return found


def localize(
    project: MavenProject,
    artifact: Artifact,
    copied: Optional[Dict[Path, Artifact]] = None,
) -> Artifact:
    """Copy an artifact into the build directory and point it at the copy.

    Install and deploy then operate on build-local files instead of
    files shared through the local repository.

    Args:
        project: Project whose build directory receives the copy.
        artifact: Artifact with its source file set.
        copied: Destinations already produced in this run, mapped to the
            artifact they came from. Updated in place.

    Raises:
        GoalExecutionError: If another artifact of this run was already
            copied to the same destination, or the copy fails.
    """
    assert artifact.file is not None
    destination = project.build_directory / artifact.file.name
    if copied is not None:
        previous = copied.get(destination)
        if previous is not None and previous.file != artifact.file:
            raise GoalExecutionError(
                f"Artifacts {previous.id} and {artifact.id} would both be "
                f"copied to {destination}"
            )
        copied[destination] = artifact
    try:
        changed = copy_if_modified(artifact.file, destination)
    except OSError as exc:
        raise GoalExecutionError(f"Could not copy file: {artifact.file.name}") from exc
    if changed:
        logger.debug("Copied %s to %s", artifact.file, destination)
    return artifact.with_file(destination)


__all__ = [
    "BaseGoal",
    "write_and_attach_artifact_list",
    "fetch_dependency_manifest",
    "read_dependency_manifest",
    "copy_if_modified",
    "resolve_artifact",
    "localize",
]
