"""Attach: re-attach the artifacts named in an artifact list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from ease.errors import GoalExecutionError, RepositoryConfigurationError
from ease.goals.base import BaseGoal, localize, resolve_artifact
from ease.maven.coordinates import Artifact
from ease.maven.manifest import read_manifest
from ease.maven.repository import ArtifactRepository, FileSystemRepository, same_basedir
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.attach")


class AttachGoal(BaseGoal):
    """Attach every artifact listed in ``artifact_list_location``.

    Artifacts come from the local repository unless
    ``artifact_repository_location`` names another directory. Files taken
    from the local repository are copied into the build directory first,
    so install/deploy never operate on the local repository's own files.
    """

    NAME = "attach"

    def execute(self, context: GoalContext) -> None:
        cfg = context.config.attach
        if not cfg.artifact_list_location:
            raise GoalExecutionError("artifactListLocation is required for the attach goal")

        context.attachments.clear()
        repository = self.select_repository(context)
        logger.info("Loading artifacts from repository at: %s", repository.basedir)

        coordinates = read_manifest(
            Path(cfg.artifact_list_location), owner=cfg.artifact_list_location
        )
        from_local = repository is context.local_repository
        copied: Dict[Path, Artifact] = {}

        for coordinate in coordinates:
            if context.attachments.contains(coordinate.id):
                logger.debug("Already attached: %s", coordinate.id)
                continue
            artifact = resolve_artifact(repository, coordinate)
            if from_local:
                artifact = localize(context.project, artifact, copied)
            context.attachments.attach(artifact)
            logger.info("Attached: %s", artifact.id)

    @staticmethod
    def select_repository(context: GoalContext) -> ArtifactRepository:
        """Local repository, or the configured alternate one.

        Raises:
            RepositoryConfigurationError: If the alternate location does not
                exist or is the local repository itself.
        """
        location = context.config.attach.artifact_repository_location
        if location is None:
            return context.local_repository

        repository = FileSystemRepository.from_location(location)
        if same_basedir(repository, context.local_repository):
            raise RepositoryConfigurationError(
                "It is not allowed to point artifactRepositoryLocation to the "
                "location of the local repository."
            )
        return repository


__all__ = ["AttachGoal"]
