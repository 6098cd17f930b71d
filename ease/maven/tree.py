"""Dependency tree representation and a POM-walking tree builder.

The tree is a ``networkx.DiGraph`` whose node keys are integers assigned
in discovery order; node data holds the ``artifact``, its ``state`` and
``depth``. The same artifact can appear several times (once included,
other times omitted), which is why artifacts are not used as keys.

``PomDependencyTreeBuilder`` is a minimal adapter that reads dependency
POMs from a repository. It is not a resolution engine: no remote
fetching, no exclusions, no version ranges, nearest definition wins.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Deque, Dict, FrozenSet, Iterator, List, Optional, Protocol, Tuple

import networkx as nx

from ease.errors import ProjectModelError
from ease.maven.coordinates import Artifact
from ease.maven.project import Dependency, MavenProject, read_pom_model
from ease.maven.repository import ArtifactRepository

logger = logging.getLogger("ease.maven.tree")

ROOT = 0

# Scopes that do not propagate past the first level.
_NON_TRANSITIVE_SCOPES = {"test", "provided", "system"}

_Pending = Tuple[int, Dependency, FrozenSet[Tuple[str, str]]]


class NodeState(str, Enum):
    """Inclusion state of a dependency tree node."""

    INCLUDED = "included"
    OMITTED_FOR_DUPLICATE = "omitted_for_duplicate"
    OMITTED_FOR_CONFLICT = "omitted_for_conflict"
    OMITTED_FOR_CYCLE = "omitted_for_cycle"


class DependencyTree:
    """Rooted dependency tree backed by a directed graph."""

    def __init__(self, root: Artifact) -> None:
        self.graph = nx.DiGraph()
        self.graph.add_node(ROOT, artifact=root, state=NodeState.INCLUDED, depth=0)
        self._next_key = ROOT + 1

    @property
    def root(self) -> Artifact:
        return self.graph.nodes[ROOT]["artifact"]

    def add_child(
        self,
        parent: int,
        artifact: Artifact,
        state: NodeState = NodeState.INCLUDED,
        scope: str = "compile",
    ) -> int:
        key = self._next_key
        self._next_key += 1
        depth = self.graph.nodes[parent]["depth"] + 1
        self.graph.add_node(key, artifact=artifact, state=state, depth=depth, scope=scope)
        self.graph.add_edge(parent, key)
        return key

    def nodes(self) -> Iterator[Tuple[Artifact, NodeState]]:
        """Yield ``(artifact, state)`` in pre-order from the root."""
        for key in nx.dfs_preorder_nodes(self.graph, ROOT):
            data = self.graph.nodes[key]
            yield data["artifact"], data["state"]

    def included_artifacts(self) -> List[Artifact]:
        """Included artifacts in pre-order, de-duplicated, root included."""
        seen: Dict[Artifact, None] = {}
        for artifact, state in self.nodes():
            if state is NodeState.INCLUDED:
                seen.setdefault(artifact, None)
        return list(seen)

    def __len__(self) -> int:
        return self.graph.number_of_nodes()


class DependencyTreeBuilder(Protocol):
    """Builds the dependency tree of a project."""

    def build(self, project: MavenProject) -> DependencyTree: ...


class PomDependencyTreeBuilder:
    """Breadth-first tree builder reading POMs from a repository."""

    def __init__(self, repository: ArtifactRepository, max_depth: int = 64) -> None:
        self.repository = repository
        self.max_depth = max_depth

    def build(self, project: MavenProject) -> DependencyTree:
        tree = DependencyTree(project.artifact)
        resolved: Dict[Tuple[str, str, str, Optional[str]], str] = {}
        root_key = (project.group_id, project.artifact_id)

        queue: Deque[_Pending] = deque(
            (ROOT, dep, frozenset({root_key})) for dep in project.dependencies
        )

        while queue:
            parent, dep, ancestors = queue.popleft()
            artifact = dep.to_artifact()
            ga = (dep.group_id, dep.artifact_id)
            conflict_key = (dep.group_id, dep.artifact_id, dep.type, dep.classifier)

            if ga in ancestors:
                tree.add_child(parent, artifact, NodeState.OMITTED_FOR_CYCLE, dep.scope)
                continue

            if conflict_key in resolved:
                state = (
                    NodeState.OMITTED_FOR_DUPLICATE
                    if resolved[conflict_key] == dep.version
                    else NodeState.OMITTED_FOR_CONFLICT
                )
                tree.add_child(parent, artifact, state, dep.scope)
                continue

            resolved[conflict_key] = dep.version
            key = tree.add_child(parent, artifact, NodeState.INCLUDED, dep.scope)
            if tree.graph.nodes[key]["depth"] >= self.max_depth:
                continue

            for child in self._transitive_dependencies(dep):
                queue.append((key, child, ancestors | {ga}))

        logger.debug("Built dependency tree for %s with %d nodes", project.id, len(tree))
        return tree

    def _transitive_dependencies(self, dep: Dependency) -> List[Dependency]:
        if dep.scope in _NON_TRANSITIVE_SCOPES:
            return []
        pom = self.repository.find_artifact_file(dep.coordinate.pom())
        if pom is None:
            logger.debug("No POM for %s; treating as leaf", dep)
            return []
        try:
            _gav, children = read_pom_model(pom)
        except ProjectModelError as exc:
            logger.debug("Unreadable POM for %s; treating as leaf: %s", dep, exc)
            return []
        return [
            child
            for child in children
            if child.scope not in _NON_TRANSITIVE_SCOPES and not child.optional
        ]


__all__ = [
    "NodeState",
    "DependencyTree",
    "DependencyTreeBuilder",
    "PomDependencyTreeBuilder",
]
