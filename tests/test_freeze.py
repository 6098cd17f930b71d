"""Tests for the freeze goal."""

from __future__ import annotations

from pathlib import Path

import pytest

from ease.config.schema import EaseConfig
from ease.errors import ArtifactFileMissingError
from ease.goals.freeze import FreezeGoal
from tests.helpers import artifact


def _build_file(project, name: str) -> Path:
    project.build_directory.mkdir(parents=True, exist_ok=True)
    path = project.build_directory / name
    path.write_text("built", encoding="utf-8")
    return path


def _manifest(project) -> str:
    path = project.build_directory / "app-1.0-artifacts.txt"
    return path.read_text(encoding="utf-8")


def test_freeze_lists_primary_then_attachments_and_adds_pom(project, make_context) -> None:
    _build_file(project, "app-1.0.jar")
    sources = _build_file(project, "app-1.0-sources.jar")
    context = make_context(attached=[artifact("org.example:app:jar:sources:1.0", sources)])

    FreezeGoal().run(context)

    assert _manifest(project) == (
        "org.example:app:jar:1.0\n"
        "org.example:app:jar:sources:1.0\n"
        "org.example:app:pom:1.0\n"
    )
    attached = context.attachments.get("org.example:app:txt:artifacts:1.0")
    assert attached is not None
    assert attached.file == project.build_directory / "app-1.0-artifacts.txt"


def test_type_comes_from_file_extension(project, make_context) -> None:
    _build_file(project, "app-1.0.jar")
    tests_jar = _build_file(project, "app-1.0-tests.jar")
    context = make_context(attached=[artifact("org.example:app:test-jar:tests:1.0", tests_jar)])

    FreezeGoal().run(context)

    assert "org.example:app:jar:tests:1.0\n" in _manifest(project)
    assert "test-jar" not in _manifest(project)


def test_existing_pom_is_not_duplicated(project, make_context) -> None:
    _build_file(project, "app-1.0.jar")
    context = make_context(attached=[artifact("org.example:app:pom:1.0")])

    FreezeGoal().run(context)

    assert _manifest(project).count("org.example:app:pom:1.0") == 1


def test_pom_packaging_lists_only_the_pom(project, make_context) -> None:
    project.packaging = "pom"
    project.pom_file.write_text("<project/>", encoding="utf-8")

    FreezeGoal().run(make_context())

    assert _manifest(project) == "org.example:app:pom:1.0\n"


def test_missing_artifact_file_fails(project, make_context) -> None:
    context = make_context()

    with pytest.raises(ArtifactFileMissingError):
        FreezeGoal().run(context)

    assert not (project.build_directory / "app-1.0-artifacts.txt").exists()


def test_ignore_empty_artifacts_skips_attachments_without_files(project, make_context) -> None:
    _build_file(project, "app-1.0.jar")
    config = EaseConfig.from_dict({"freeze": {"ignoreEmptyArtifacts": True}})
    context = make_context(
        config=config, attached=[artifact("org.example:app:jar:javadoc:1.0")]
    )

    FreezeGoal().run(context)

    assert _manifest(project) == "org.example:app:jar:1.0\norg.example:app:pom:1.0\n"


def test_ignore_empty_artifacts_still_requires_the_primary_artifact(
    project, make_context
) -> None:
    config = EaseConfig.from_dict({"freeze": {"ignoreEmptyArtifacts": True}})

    with pytest.raises(ArtifactFileMissingError, match="org.example:app:jar:1.0"):
        FreezeGoal().run(make_context(config=config))

    assert not (project.build_directory / "app-1.0-artifacts.txt").exists()


def test_refreeze_replaces_the_previous_list(project, make_context) -> None:
    _build_file(project, "app-1.0.jar")
    context = make_context()

    FreezeGoal().run(context)
    FreezeGoal().run(context)

    assert "txt:artifacts" not in _manifest(project)
    assert [a.id for a in context.attachments] == ["org.example:app:txt:artifacts:1.0"]
