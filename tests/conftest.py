"""Shared fixtures: a temporary project, local repository and goal context."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import pytest

from ease.config.schema import EaseConfig
from ease.maven.coordinates import Artifact
from ease.maven.project import Dependency, MavenProject
from ease.maven.repository import LocalRepository
from ease.runtime.attachments import AttachedArtifacts
from ease.runtime.context import GoalContext


@pytest.fixture
def local_repo_dir(tmp_path: Path) -> Path:
    path = tmp_path / "m2" / "repository"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def local_repo(local_repo_dir: Path) -> LocalRepository:
    return LocalRepository(local_repo_dir)


@pytest.fixture
def project(tmp_path: Path) -> MavenProject:
    basedir = tmp_path / "app"
    basedir.mkdir()
    return MavenProject(
        group_id="org.example",
        artifact_id="app",
        version="1.0",
        packaging="jar",
        basedir=basedir,
        build_directory=basedir / "target",
        dependencies=[
            Dependency("org.example", "lib1", "1.0"),
            Dependency("org.example", "lib2", "1.0"),
            Dependency("com.other", "ext", "2.0"),
        ],
        pom_file=basedir / "pom.xml",
    )


@pytest.fixture
def make_context(project: MavenProject, local_repo: LocalRepository):
    """Factory for a GoalContext over ``project`` and ``local_repo``."""

    def _make(
        config: Optional[EaseConfig] = None,
        attached: Sequence[Artifact] = (),
        tree_builder=None,
    ) -> GoalContext:
        return GoalContext(
            project=project,
            local_repository=local_repo,
            attachments=AttachedArtifacts(attached),
            config=config or EaseConfig(),
            tree_builder=tree_builder,
        )

    return _make
