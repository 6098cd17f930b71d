"""Builders for temporary projects, repositories and dependency trees."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ease.maven.coordinates import Artifact, Coordinate, parse_coordinate
from ease.maven.layout import path_of
from ease.maven.project import MavenProject
from ease.maven.tree import DependencyTree, NodeState


def publish(repo_dir: Path, coordinate: Coordinate | str, content: str = "payload") -> Path:
    """Place a file for ``coordinate`` at its layout path under ``repo_dir``."""
    if isinstance(coordinate, str):
        coordinate = parse_coordinate(coordinate)
    path = repo_dir / path_of(coordinate)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def publish_list(repo_dir: Path, owner: str, lines: Iterable[str]) -> Path:
    """Publish the artifact list of ``owner`` (a g:a:t:v coordinate)."""
    coordinate = parse_coordinate(owner).artifact_list()
    return publish(repo_dir, coordinate, "".join(f"{line}\n" for line in lines))


def write_pom(
    directory: Path,
    group_id: str,
    artifact_id: str,
    version: str,
    packaging: str = "jar",
    dependencies: Sequence[str] = (),
    file_name: str = "pom.xml",
) -> Path:
    """Write a minimal namespaced POM.

    Dependencies are ``g:a:v[:scope[:optional]]`` strings.
    """
    dep_xml = []
    for spec in dependencies:
        parts = spec.split(":")
        scope = parts[3] if len(parts) > 3 else "compile"
        optional = parts[4] if len(parts) > 4 else "false"
        dep_xml.append(
            "    <dependency>\n"
            f"      <groupId>{parts[0]}</groupId>\n"
            f"      <artifactId>{parts[1]}</artifactId>\n"
            f"      <version>{parts[2]}</version>\n"
            f"      <scope>{scope}</scope>\n"
            f"      <optional>{optional}</optional>\n"
            "    </dependency>\n"
        )
    text = (
        '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
        "  <modelVersion>4.0.0</modelVersion>\n"
        f"  <groupId>{group_id}</groupId>\n"
        f"  <artifactId>{artifact_id}</artifactId>\n"
        f"  <version>{version}</version>\n"
        f"  <packaging>{packaging}</packaging>\n"
        "  <dependencies>\n"
        f"{''.join(dep_xml)}"
        "  </dependencies>\n"
        "</project>\n"
    )
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    path.write_text(text, encoding="utf-8")
    return path


class FakeTreeBuilder:
    """Tree builder returning a flat tree of the given children."""

    def __init__(self, children: Sequence[Artifact], omitted: Sequence[Artifact] = ()) -> None:
        self.children = list(children)
        self.omitted = list(omitted)
        self.calls: List[MavenProject] = []

    def build(self, project: MavenProject) -> DependencyTree:
        self.calls.append(project)
        tree = DependencyTree(project.artifact)
        for child in self.children:
            tree.add_child(0, child)
        for child in self.omitted:
            tree.add_child(0, child, NodeState.OMITTED_FOR_CONFLICT)
        return tree


def artifact(coordinate: str, file: Optional[Path] = None) -> Artifact:
    return Artifact(parse_coordinate(coordinate), file)
