"""Goal execution context.

A ``GoalContext`` carries everything a goal needs for one invocation.
It owns the attached-artifacts registry for that invocation; goals read
and repopulate it and never reach for ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ease.config.schema import EaseConfig
from ease.maven.project import MavenProject
from ease.maven.repository import ArtifactRepository
from ease.maven.tree import DependencyTreeBuilder, PomDependencyTreeBuilder
from ease.runtime.attachments import AttachedArtifacts


@dataclass
class GoalContext:
    """Per-invocation state shared with a goal.

    Args:
        project: The module being built.
        local_repository: The local repository.
        attachments: Artifacts attached to the module, in attachment order.
        config: Goal configuration.
        tree_builder: Dependency tree builder; defaults to walking POMs in
            the local repository.
    """

    project: MavenProject
    local_repository: ArtifactRepository
    attachments: AttachedArtifacts = field(default_factory=AttachedArtifacts)
    config: EaseConfig = field(default_factory=EaseConfig)
    tree_builder: Optional[DependencyTreeBuilder] = None

    def __post_init__(self) -> None:
        if self.tree_builder is None:
            self.tree_builder = PomDependencyTreeBuilder(self.local_repository)
