"""Artifact list ("manifest") files.

An artifact list is UTF-8 text with one coordinate per line, no header
and no escaping. It is written to
``<build-dir>/<artifactId>-<version>-artifacts.txt`` and attached to the
module with classifier ``artifacts`` and type ``txt``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ease.errors import GoalExecutionError, ManifestNotFoundError
from ease.maven.coordinates import Coordinate, format_coordinate, parse_coordinate

logger = logging.getLogger("ease.maven.manifest")

MANIFEST_TYPE = "txt"
MANIFEST_CLASSIFIER = "artifacts"


def manifest_filename(artifact_id: str, version: str) -> str:
    return f"{artifact_id}-{version}-{MANIFEST_CLASSIFIER}.{MANIFEST_TYPE}"


def render_manifest(coordinates: Iterable[Coordinate]) -> str:
    return "".join(format_coordinate(c) for c in coordinates)


def split_lines(text: str) -> List[str]:
    """Split list text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_manifest_text(path: Path, owner: str = "") -> str:
    """Read an artifact list verbatim.

    Args:
        path: List file location.
        owner: Dependency or option the list belongs to, for messages.

    Raises:
        ManifestNotFoundError: If the file does not exist.
        GoalExecutionError: If the file cannot be read.
    """
    subject = owner or str(path)
    if not path.is_file():
        raise ManifestNotFoundError(f"Could not find an artifact list for: {subject}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GoalExecutionError(f"Could not read artifact list for: {subject}") from exc


def read_manifest(path: Path, owner: str = "") -> List[Coordinate]:
    """Read and parse an artifact list into coordinates, in file order."""
    return [parse_coordinate(line) for line in split_lines(read_manifest_text(path, owner))]


def write_manifest(build_directory: Path, file_name: str, text: str) -> Path:
    """Write an artifact list, replacing any previous one.

    Raises:
        GoalExecutionError: If the build directory or file cannot be written.
    """
    destination = build_directory / file_name
    try:
        build_directory.mkdir(parents=True, exist_ok=True)
        if destination.exists():
            destination.unlink()
        destination.write_text(text, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise GoalExecutionError(f"Could not write artifact list: {destination}") from exc
    logger.debug("Wrote artifact list %s (%d bytes)", destination, len(text))
    return destination


__all__ = [
    "MANIFEST_TYPE",
    "MANIFEST_CLASSIFIER",
    "manifest_filename",
    "render_manifest",
    "split_lines",
    "read_manifest_text",
    "read_manifest",
    "write_manifest",
]
