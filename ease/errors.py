"""Error hierarchy shared by all goals.

Every condition listed here is fatal: the goal that raises it stops
immediately and the CLI reports a non-zero exit status. Nothing is
retried and there is no partial-output mode.
"""

from __future__ import annotations


class GoalExecutionError(Exception):
    """Base class for failures that abort a goal.

    I/O failures are re-raised as this type with the offending file or
    dependency named in the message and the original exception chained.
    """

    pass


class ManifestNotFoundError(GoalExecutionError):
    """A required upstream artifact list does not exist."""

    pass


class CoordinateParseError(GoalExecutionError, ValueError):
    """A coordinate line does not have 4 or 5 colon-separated fields."""

    pass


class ArtifactFileMissingError(GoalExecutionError):
    """A resolved artifact has no backing file."""

    pass


class SignatureMissingError(GoalExecutionError):
    """The detached ``.asc`` signature for an attached artifact is absent."""

    pass


class RepositoryConfigurationError(GoalExecutionError):
    """Alternate repository location is missing or equals the local repository."""

    pass


class DuplicateAttachmentError(GoalExecutionError):
    """An artifact with the same id is already attached to the project."""

    pass


class ProjectModelError(GoalExecutionError):
    """The pom.xml describing the current module cannot be loaded."""

    pass


__all__ = [
    "GoalExecutionError",
    "ManifestNotFoundError",
    "CoordinateParseError",
    "ArtifactFileMissingError",
    "SignatureMissingError",
    "RepositoryConfigurationError",
    "DuplicateAttachmentError",
    "ProjectModelError",
]
