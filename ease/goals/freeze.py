"""Freeze: record the artifacts this module produced into an artifact list."""

from __future__ import annotations

import logging
from typing import List, Optional

from ease.errors import ArtifactFileMissingError
from ease.goals.base import BaseGoal, write_and_attach_artifact_list
from ease.maven.coordinates import Artifact, Coordinate
from ease.maven.manifest import render_manifest
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.freeze")


class FreezeGoal(BaseGoal):
    """Write ``<artifactId>-<version>-artifacts.txt`` and attach it.

    The list holds the primary artifact followed by every attached
    artifact in attachment order. A ``pom`` line for the project is
    appended when none of them has type ``pom``: every module is assumed
    to publish its pom.
    """

    NAME = "freeze"

    def execute(self, context: GoalContext) -> None:
        project = context.project
        ignore_empty = context.config.freeze.ignore_empty_artifacts

        own_list = project.coordinate.artifact_list().id
        # The primary artifact is never optional.
        primary = self.coordinate_of(project.artifact)
        coordinates: List[Coordinate] = [primary] if primary is not None else []
        for artifact in context.attachments:
            if artifact.id == own_list:
                continue
            coordinate = self.coordinate_of(artifact, ignore_empty)
            if coordinate is not None:
                coordinates.append(coordinate)

        if not any(c.type == "pom" for c in coordinates):
            logger.debug("No pom among frozen artifacts; adding %s", project.coordinate.pom())
            coordinates.append(project.coordinate.pom())

        write_and_attach_artifact_list(context, render_manifest(coordinates))
        logger.info("Froze %d artifact(s) for %s", len(coordinates), project.id)

    @staticmethod
    def coordinate_of(artifact: Artifact, ignore_empty: bool = False) -> Optional[Coordinate]:
        """Coordinate to record for an artifact.

        The type comes from the file extension, except for ``pom``
        artifacts, which may have no file at all.

        Raises:
            ArtifactFileMissingError: If a non-pom artifact has no file and
                ``ignore_empty`` is False.
        """
        if artifact.type == "pom":
            return artifact.coordinate
        if artifact.file is None or not artifact.file.is_file():
            if ignore_empty:
                logger.debug("Skipping %s: no artifact file", artifact.id)
                return None
            raise ArtifactFileMissingError(f"Missing artifact file for: {artifact.id}")
        extension = artifact.file.suffix.lstrip(".") or artifact.type
        return artifact.coordinate.with_type(extension, artifact.classifier)


__all__ = ["FreezeGoal"]
