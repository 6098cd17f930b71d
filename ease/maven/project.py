"""Project model loaded from a module's pom.xml."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ease.errors import ProjectModelError
from ease.maven.coordinates import Artifact, Coordinate

logger = logging.getLogger("ease.maven.project")

_PROPERTY_REF = re.compile(r"\$\{([^}]+)\}")


@dataclass(frozen=True)
class Dependency:
    """A ``<dependency>`` entry as declared in a POM."""

    group_id: str
    artifact_id: str
    version: str
    type: str = "jar"
    classifier: Optional[str] = None
    scope: str = "compile"
    optional: bool = False

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            type=self.type,
            version=self.version,
            classifier=self.classifier,
        )

    def to_artifact(self) -> Artifact:
        return Artifact(self.coordinate)

    def __str__(self) -> str:
        return self.coordinate.id


@dataclass
class MavenProject:
    """The subset of a Maven project model the goals need."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str
    basedir: Path
    build_directory: Path
    dependencies: List[Dependency] = field(default_factory=list)
    pom_file: Optional[Path] = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            type=self.packaging,
            version=self.version,
        )

    @property
    def artifact(self) -> Artifact:
        """Primary artifact; the file is set only if it exists."""
        if self.packaging == "pom":
            return Artifact(self.coordinate, self.pom_file)
        candidate = self.build_directory / (
            f"{self.artifact_id}-{self.version}.{self.coordinate.extension}"
        )
        return Artifact(self.coordinate, candidate if candidate.is_file() else None)

    @property
    def id(self) -> str:
        return self.coordinate.id

    def owns(self, artifact: Artifact) -> bool:
        """True when the artifact belongs to this project's group/artifact."""
        return (
            artifact.group_id == self.group_id
            and artifact.artifact_id == self.artifact_id
        )

    def dependency_artifacts(self) -> List[Artifact]:
        return [dep.to_artifact() for dep in self.dependencies]


def load_project(pom_path: Path, build_directory: Optional[Path] = None) -> MavenProject:
    """Load a MavenProject from a pom.xml file.

    Raises:
        ProjectModelError: If the POM is unreadable or lacks coordinates.
    """
    pom_path = Path(pom_path).resolve()
    root, ns = _read_pom(pom_path)

    group_id, artifact_id, version = _extract_gav(root, ns)
    if not group_id or not artifact_id or not version:
        raise ProjectModelError(
            f"Incomplete project coordinates in {pom_path}: "
            f"{group_id}:{artifact_id}:{version}"
        )

    packaging = _find_text(root, "packaging", ns) or "jar"
    properties = _collect_properties(root, ns, group_id, artifact_id, version)
    basedir = pom_path.parent

    if build_directory is None:
        declared = _find_text(root, "build/directory", ns)
        if declared:
            declared_path = Path(_interpolate(declared, properties, basedir))
            build_directory = (
                declared_path if declared_path.is_absolute() else basedir / declared_path
            )
        else:
            build_directory = basedir / "target"

    project = MavenProject(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        packaging=packaging,
        basedir=basedir,
        build_directory=Path(build_directory).resolve(),
        dependencies=parse_dependencies(root, ns, properties, basedir),
        pom_file=pom_path,
    )
    logger.debug(
        "Loaded project %s with %d declared dependencies",
        project.id,
        len(project.dependencies),
    )
    return project


def parse_dependencies(
    root: ET.Element,
    ns: str,
    properties: Dict[str, str],
    basedir: Optional[Path] = None,
) -> List[Dependency]:
    """Read the direct ``<dependencies>`` of a project element.

    Entries under ``<dependencyManagement>`` are not dependencies and are
    only consulted for missing versions.
    """
    managed = _managed_versions(root, ns, properties, basedir)
    container = root.find(_child_tag("dependencies", ns))
    if container is None:
        return []

    dependencies: List[Dependency] = []
    for dep in container.findall(_child_tag("dependency", ns)):
        group_id = _interpolate(_find_text(dep, "groupId", ns) or "", properties, basedir)
        artifact_id = _interpolate(_find_text(dep, "artifactId", ns) or "", properties, basedir)
        if not artifact_id:
            continue
        dep_type = _find_text(dep, "type", ns) or "jar"
        classifier = _find_text(dep, "classifier", ns)
        version = _interpolate(_find_text(dep, "version", ns) or "", properties, basedir)
        if not version:
            version = managed.get((group_id, artifact_id), "")
        dependencies.append(
            Dependency(
                group_id=group_id,
                artifact_id=artifact_id,
                version=version,
                type=dep_type,
                classifier=classifier or None,
                scope=(_find_text(dep, "scope", ns) or "compile").lower(),
                optional=(_find_text(dep, "optional", ns) or "false").lower() == "true",
            )
        )
    return dependencies


def read_pom_model(
    pom_path: Path,
) -> Tuple[Tuple[str, str, str], List[Dependency]]:
    """Read coordinates and declared dependencies from any POM file."""
    root, ns = _read_pom(pom_path)
    group_id, artifact_id, version = _extract_gav(root, ns)
    properties = _collect_properties(root, ns, group_id, artifact_id, version)
    return (group_id, artifact_id, version), parse_dependencies(root, ns, properties)


def _read_pom(pom_path: Path) -> Tuple[ET.Element, str]:
    try:
        tree = ET.parse(pom_path)
    except (OSError, ET.ParseError) as exc:
        raise ProjectModelError(f"Could not read project model {pom_path}: {exc}") from exc
    root = tree.getroot()
    return root, _detect_namespace(root)


def _managed_versions(
    root: ET.Element, ns: str, properties: Dict[str, str], basedir: Optional[Path]
) -> Dict[Tuple[str, str], str]:
    managed: Dict[Tuple[str, str], str] = {}
    section = root.find(_child_tag("dependencyManagement", ns))
    if section is None:
        return managed
    container = section.find(_child_tag("dependencies", ns))
    if container is None:
        return managed
    for dep in container.findall(_child_tag("dependency", ns)):
        key = (
            _interpolate(_find_text(dep, "groupId", ns) or "", properties, basedir),
            _interpolate(_find_text(dep, "artifactId", ns) or "", properties, basedir),
        )
        version = _find_text(dep, "version", ns)
        if version:
            managed[key] = _interpolate(version, properties, basedir)
    return managed


def _collect_properties(
    root: ET.Element, ns: str, group_id: str, artifact_id: str, version: str
) -> Dict[str, str]:
    properties = {
        "project.groupId": group_id,
        "project.artifactId": artifact_id,
        "project.version": version,
        "pom.groupId": group_id,
        "pom.artifactId": artifact_id,
        "pom.version": version,
    }
    section = root.find(_child_tag("properties", ns))
    if section is not None:
        for prop in section:
            name = prop.tag.split("}")[-1]
            properties[name] = (prop.text or "").strip()
    return properties


def _interpolate(value: str, properties: Dict[str, str], basedir: Optional[Path] = None) -> str:
    def _lookup(match: re.Match) -> str:
        key = match.group(1)
        if key in ("basedir", "project.basedir") and basedir is not None:
            return str(basedir)
        return properties.get(key, match.group(0))

    return _PROPERTY_REF.sub(_lookup, value)


def _child_tag(tag: str, ns: str) -> str:
    if not ns:
        return tag
    return "/".join(f"{{{ns}}}{part}" for part in tag.split("/"))


def _find_text(elem: ET.Element, tag: str, ns: str) -> Optional[str]:
    target = elem.find(_child_tag(tag, ns))
    if target is not None and target.text:
        return target.text.strip()
    return None


def _detect_namespace(root: ET.Element) -> str:
    if root.tag.startswith("{"):
        return root.tag.split("}")[0][1:]
    return ""


def _extract_gav(root: ET.Element, ns: str) -> Tuple[str, str, str]:
    group_id = _find_text(root, "groupId", ns)
    artifact_id = _find_text(root, "artifactId", ns) or ""
    version = _find_text(root, "version", ns)

    parent = root.find(_child_tag("parent", ns))
    if parent is not None:
        group_id = group_id or _find_text(parent, "groupId", ns)
        version = version or _find_text(parent, "version", ns)

    return (group_id or "", artifact_id, version or "")


__all__ = ["Dependency", "MavenProject", "load_project", "parse_dependencies", "read_pom_model"]
