"""Artifact coordinates and the line codec used by artifact lists.

A coordinate is serialized as ``groupId:artifactId:type[:classifier]:version``.
Colons inside fields cannot be escaped; a line with anything other than
4 or 5 fields is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from ease.errors import CoordinateParseError

SIGNATURE_SUFFIX = ".asc"

# Maven default artifact handlers whose extension differs from the type.
_TYPE_EXTENSIONS = {
    "test-jar": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
}

# Types whose handler implies a fixed classifier when none is given.
_TYPE_CLASSIFIERS = {
    "test-jar": "tests",
    "ejb-client": "client",
    "java-source": "sources",
    "javadoc": "javadoc",
}


@dataclass(frozen=True)
class Coordinate:
    """The ``(groupId, artifactId, type, classifier, version)`` identity of an artifact."""

    group_id: str
    artifact_id: str
    type: str
    version: str
    classifier: Optional[str] = None

    @property
    def id(self) -> str:
        """Coordinate line without terminator, used as attachment identity."""
        parts = [self.group_id, self.artifact_id, self.type]
        if self.has_classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)

    @property
    def has_classifier(self) -> bool:
        return bool(self.classifier)

    @property
    def extension(self) -> str:
        return _TYPE_EXTENSIONS.get(self.type, self.type)

    @property
    def effective_classifier(self) -> Optional[str]:
        """Classifier used for the file name, including handler defaults."""
        if self.classifier:
            return self.classifier
        return _TYPE_CLASSIFIERS.get(self.type)

    @property
    def is_signature(self) -> bool:
        return self.type.endswith(SIGNATURE_SUFFIX)

    def with_type(self, type_: str, classifier: Optional[str] = None) -> "Coordinate":
        """Return a sibling coordinate of the same group/artifact/version."""
        return Coordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            type=type_,
            version=self.version,
            classifier=classifier,
        )

    def pom(self) -> "Coordinate":
        return self.with_type("pom")

    def artifact_list(self) -> "Coordinate":
        """Coordinate of the artifact list attached by freeze/aggregate."""
        return self.with_type("txt", "artifacts")

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Artifact:
    """A coordinate plus the file backing it, if resolved.

    Equality and hashing only consider the coordinate.
    """

    coordinate: Coordinate
    file: Optional[Path] = field(default=None, compare=False, hash=False)

    @classmethod
    def of(
        cls,
        group_id: str,
        artifact_id: str,
        version: str,
        type: str,
        classifier: Optional[str] = None,
        file: Optional[Path] = None,
    ) -> "Artifact":
        coordinate = Coordinate(
            group_id=group_id,
            artifact_id=artifact_id,
            type=type,
            version=version,
            classifier=classifier or None,
        )
        return cls(coordinate, Path(file) if file is not None else None)

    @property
    def id(self) -> str:
        return self.coordinate.id

    @property
    def group_id(self) -> str:
        return self.coordinate.group_id

    @property
    def artifact_id(self) -> str:
        return self.coordinate.artifact_id

    @property
    def version(self) -> str:
        return self.coordinate.version

    @property
    def type(self) -> str:
        return self.coordinate.type

    @property
    def classifier(self) -> Optional[str]:
        return self.coordinate.classifier

    def with_file(self, file: Optional[Path]) -> "Artifact":
        return replace(self, file=Path(file) if file is not None else None)

    def __str__(self) -> str:
        return self.coordinate.id


def parse_coordinate(line: str) -> Coordinate:
    """Parse ``g:a:t:v`` or ``g:a:t:c:v`` into a Coordinate.

    Raises:
        CoordinateParseError: If the trimmed line does not split into
            exactly 4 or 5 fields.
    """
    text = line.strip()
    fields = text.split(":")
    if len(fields) < 4 or len(fields) > 5:
        raise CoordinateParseError(f"Can not parse coordinates: {text}")

    group_id, artifact_id, type_ = fields[0], fields[1], fields[2]
    classifier: Optional[str] = None
    if len(fields) == 5:
        classifier = fields[3] or None
        version = fields[4]
    else:
        version = fields[3]

    return Coordinate(
        group_id=group_id,
        artifact_id=artifact_id,
        type=type_,
        version=version,
        classifier=classifier,
    )


def format_coordinate(coordinate: Coordinate) -> str:
    """Serialize a coordinate as a newline-terminated artifact list line."""
    return coordinate.id + "\n"


__all__ = [
    "SIGNATURE_SUFFIX",
    "Coordinate",
    "Artifact",
    "parse_coordinate",
    "format_coordinate",
]
