"""Thaw: attach the artifacts frozen by selected dependencies."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from ease.errors import GoalExecutionError
from ease.goals.aggregate import filtered_transitive_dependencies
from ease.goals.base import BaseGoal, localize, read_dependency_manifest, resolve_artifact
from ease.maven.coordinates import Artifact, Coordinate
from ease.maven.filters import AndFilter
from ease.maven.repository import ArtifactRepository, ThawRepository
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.thaw")


class GroupArtifactFilter:
    """Include by groupId whitelist, exclude by artifactId blacklist."""

    def __init__(self, include_group_ids: List[str], exclude_artifact_ids: List[str]) -> None:
        self.include_group_ids = set(include_group_ids)
        self.exclude_artifact_ids = set(exclude_artifact_ids)

    def include(self, artifact: Artifact) -> bool:
        return (
            artifact.group_id in self.include_group_ids
            and artifact.artifact_id not in self.exclude_artifact_ids
        )


class ThawGoal(BaseGoal):
    """Attach everything listed in the artifact lists of selected dependencies.

    A pom is attached for every ``groupId:artifactId:version`` in a list
    even when the list itself does not name one, since consumers of a
    thawed dependency expect its pom next to its binaries.
    """

    NAME = "thaw"

    def execute(self, context: GoalContext) -> None:
        cfg = context.config.thaw
        if not cfg.include_group_ids:
            raise GoalExecutionError("includeGroupIds is required for the thaw goal")

        context.attachments.clear()
        repository = self.select_repository(context)
        from_local = repository is context.local_repository
        copied: Dict[Path, Artifact] = {}

        for dependency in self.select_dependencies(context):
            coordinates = read_dependency_manifest(repository, dependency.coordinate)
            logger.info(
                "Thawing %d artifact(s) listed by %s", len(coordinates), dependency.id
            )
            for coordinate in with_poms(coordinates):
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
        location = context.config.thaw.thaw_dependency_repository_location
        if location is None:
            return context.local_repository
        logger.info("Thawing dependencies from %s", location)
        return ThawRepository(location)

    @staticmethod
    def select_dependencies(context: GoalContext) -> List[Artifact]:
        cfg = context.config.thaw
        group_filter = GroupArtifactFilter(cfg.include_group_ids, cfg.exclude_artifact_ids)
        if cfg.transitive:
            return filtered_transitive_dependencies(context, AndFilter([group_filter]))
        return [
            artifact
            for artifact in context.project.dependency_artifacts()
            if group_filter.include(artifact)
        ]


def with_poms(coordinates: List[Coordinate]) -> List[Coordinate]:
    """Listed coordinates followed by a synthesized pom per ``g:a:v`` lacking one."""
    has_pom: Dict[Tuple[str, str, str], bool] = {}
    for coordinate in coordinates:
        key = (coordinate.group_id, coordinate.artifact_id, coordinate.version)
        has_pom[key] = has_pom.get(key, False) or coordinate.type == "pom"

    result = list(coordinates)
    for (group_id, artifact_id, version), present in has_pom.items():
        if not present:
            result.append(Coordinate(group_id, artifact_id, "pom", version))
    return result


__all__ = ["ThawGoal", "GroupArtifactFilter", "with_poms"]
