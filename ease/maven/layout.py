"""Default (Maven 2) repository layout."""

from __future__ import annotations

from pathlib import PurePosixPath

from ease.maven.coordinates import Coordinate


def path_of(coordinate: Coordinate) -> str:
    """Return the repository-relative path of an artifact.

    ``org.example:lib:jar:tests:1.0`` maps to
    ``org/example/lib/1.0/lib-1.0-tests.jar``.
    """
    file_name = f"{coordinate.artifact_id}-{coordinate.version}"
    classifier = coordinate.effective_classifier
    if classifier:
        file_name = f"{file_name}-{classifier}"
    file_name = f"{file_name}.{coordinate.extension}"

    directory = PurePosixPath(
        *coordinate.group_id.split("."),
        coordinate.artifact_id,
        coordinate.version,
    )
    return str(directory / file_name)


__all__ = ["path_of"]
