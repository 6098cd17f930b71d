"""Attach signatures: add detached ``.asc`` signatures next to attached artifacts."""

from __future__ import annotations

import logging
from pathlib import Path

from ease.errors import ArtifactFileMissingError, SignatureMissingError
from ease.goals.base import BaseGoal
from ease.maven.coordinates import SIGNATURE_SUFFIX, Artifact
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.signatures")


class AttachSignaturesGoal(BaseGoal):
    """Re-attach artifacts together with their detached signatures.

    The project's own artifacts are reduced to the configured types
    (``pom`` and ``pom.asc`` by default). Every other artifact is
    re-attached and, unless it is a signature itself, its
    ``<file>.asc`` sibling is attached as type ``<type>.asc``. A missing
    signature fails the goal.
    """

    NAME = "attachsignatures"

    def execute(self, context: GoalContext) -> None:
        keep_types = set(context.config.attachsignatures.keep_project_types)
        artifacts = context.attachments.snapshot()
        context.attachments.clear()

        for artifact in artifacts:
            if context.project.owns(artifact):
                if artifact.type in keep_types:
                    self.attach(context, artifact)
                else:
                    logger.debug("Dropping project artifact %s", artifact.id)
                continue

            self.attach(context, artifact)
            if not artifact.coordinate.is_signature:
                self.attach(context, signature_of(artifact))

    @staticmethod
    def attach(context: GoalContext, artifact: Artifact) -> None:
        if context.attachments.contains(artifact.id):
            return
        context.attachments.attach(artifact)
        logger.info("Attached: %s", artifact.id)


def signature_of(artifact: Artifact) -> Artifact:
    """The signature artifact for ``artifact``.

    Raises:
        ArtifactFileMissingError: If the artifact has no file.
        SignatureMissingError: If ``<file>.asc`` does not exist.
    """
    if artifact.file is None:
        raise ArtifactFileMissingError(f"Missing artifact file: {artifact.id}")
    signature_file = Path(str(artifact.file.absolute()) + SIGNATURE_SUFFIX)
    if not signature_file.is_file():
        raise SignatureMissingError(f"Missing signature for artifact: {artifact.id}")
    coordinate = artifact.coordinate.with_type(
        artifact.type + SIGNATURE_SUFFIX, artifact.classifier
    )
    return Artifact(coordinate, signature_file)


__all__ = ["AttachSignaturesGoal", "signature_of"]
