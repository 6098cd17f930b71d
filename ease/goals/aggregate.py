"""Aggregate: merge the artifact lists of the module's dependencies."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from ease.errors import GoalExecutionError
from ease.goals.base import BaseGoal, fetch_dependency_manifest, write_and_attach_artifact_list
from ease.maven.coordinates import Artifact
from ease.maven.filters import AndFilter, build_filter
from ease.maven.manifest import read_manifest_text, split_lines
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.goals.aggregate")


class AggregateGoal(BaseGoal):
    """Combine the artifact lists of selected dependencies into one list.

    Every selected dependency must have frozen its own artifact list;
    a single missing list fails the goal.
    """

    NAME = "aggregate"

    def execute(self, context: GoalContext) -> None:
        cfg = context.config.aggregate
        dependencies = self.select_dependencies(context)
        logger.info("Aggregating artifact lists of %d dependencies", len(dependencies))

        bodies: Dict[str, str] = {}
        for dependency in dependencies:
            path = fetch_dependency_manifest(context.local_repository, dependency.coordinate)
            bodies[dependency.id] = read_manifest_text(path, owner=dependency.id)
            logger.debug("Read artifact list of %s from %s", dependency.id, path)

        if cfg.merge == "concatenate":
            text = concatenate_lists(bodies)
        else:
            text = union_lists(bodies.values())
        write_and_attach_artifact_list(context, text)

    def select_dependencies(self, context: GoalContext) -> List[Artifact]:
        """Dependencies passing the include/exclude patterns, root excluded."""
        cfg = context.config.aggregate
        filters = build_filter(cfg.includes, cfg.excludes)
        if cfg.exclude_transitive:
            return filtered_direct_dependencies(context, filters)
        return filtered_transitive_dependencies(context, filters)


def filtered_direct_dependencies(context: GoalContext, filters: AndFilter) -> List[Artifact]:
    selected: Dict[Artifact, None] = {}
    for artifact in context.project.dependency_artifacts():
        if filters.include(artifact):
            selected.setdefault(artifact, None)
    return list(selected)


def filtered_transitive_dependencies(
    context: GoalContext, filters: AndFilter
) -> List[Artifact]:
    """Included tree nodes passing the filters, without the project itself."""
    assert context.tree_builder is not None
    try:
        tree = context.tree_builder.build(context.project)
    except GoalExecutionError:
        raise
    except (OSError, ValueError) as exc:
        raise GoalExecutionError("Failed to traverse dependencies.") from exc

    root = context.project.artifact
    return [
        artifact
        for artifact in tree.included_artifacts()
        if artifact != root and filters.include(artifact)
    ]


def union_lists(bodies: Iterable[str]) -> str:
    """Distinct lines across all lists, sorted lexicographically."""
    lines = set()
    for body in bodies:
        lines.update(split_lines(body))
    return "".join(f"{line}\n" for line in sorted(lines))


def concatenate_lists(bodies: Dict[str, str]) -> str:
    """Each dependency's list verbatim, in dependency-id order."""
    parts = []
    for key in sorted(bodies):
        body = bodies[key]
        if body and not body.endswith("\n"):
            body += "\n"
        parts.append(body)
    return "".join(parts)


__all__ = [
    "AggregateGoal",
    "filtered_direct_dependencies",
    "filtered_transitive_dependencies",
    "union_lists",
    "concatenate_lists",
]
