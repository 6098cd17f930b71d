"""Tests for the attachsignatures goal."""

from __future__ import annotations

from pathlib import Path

import pytest

from ease.config.schema import EaseConfig
from ease.errors import ArtifactFileMissingError, SignatureMissingError
from ease.goals.signatures import AttachSignaturesGoal, signature_of
from tests.helpers import artifact


def _signed(tmp_path: Path, name: str, sign: bool = True) -> Path:
    path = tmp_path / "files" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("content", encoding="utf-8")
    if sign:
        Path(str(path) + ".asc").write_text("signature", encoding="utf-8")
    return path


def test_signatures_follow_their_artifacts(tmp_path, make_context) -> None:
    jar = _signed(tmp_path, "lib-1.0.jar")
    sources = _signed(tmp_path, "lib-1.0-sources.jar")
    context = make_context(
        attached=[
            artifact("org.example:lib:jar:1.0", jar),
            artifact("org.example:lib:jar:sources:1.0", sources),
        ]
    )

    AttachSignaturesGoal().run(context)

    assert [a.id for a in context.attachments] == [
        "org.example:lib:jar:1.0",
        "org.example:lib:jar.asc:1.0",
        "org.example:lib:jar:sources:1.0",
        "org.example:lib:jar.asc:sources:1.0",
    ]
    signature = context.attachments.get("org.example:lib:jar.asc:1.0")
    assert signature.file == Path(str(jar.absolute()) + ".asc")


def test_project_artifacts_reduce_to_pom_and_pom_signature(tmp_path, make_context) -> None:
    app_jar = _signed(tmp_path, "app-1.0.jar")
    app_pom = _signed(tmp_path, "app-1.0.pom")
    context = make_context(
        attached=[
            artifact("org.example:app:jar:1.0", app_jar),
            artifact("org.example:app:pom:1.0", app_pom),
            artifact("org.example:app:pom.asc:1.0", Path(str(app_pom) + ".asc")),
            artifact("org.example:app:txt:artifacts:1.0"),
        ]
    )

    AttachSignaturesGoal().run(context)

    assert [a.id for a in context.attachments] == [
        "org.example:app:pom:1.0",
        "org.example:app:pom.asc:1.0",
    ]


def test_keep_project_types_is_configurable(tmp_path, make_context) -> None:
    config = EaseConfig.from_dict({"attachsignatures": {"keepProjectTypes": ["jar"]}})
    context = make_context(
        config=config,
        attached=[
            artifact("org.example:app:jar:1.0", _signed(tmp_path, "app-1.0.jar")),
            artifact("org.example:app:pom:1.0", _signed(tmp_path, "app-1.0.pom")),
        ],
    )

    AttachSignaturesGoal().run(context)

    assert [a.id for a in context.attachments] == ["org.example:app:jar:1.0"]


def test_existing_signatures_are_not_attached_twice(tmp_path, make_context) -> None:
    jar = _signed(tmp_path, "lib-1.0.jar")
    context = make_context(
        attached=[
            artifact("org.example:lib:jar:1.0", jar),
            artifact("org.example:lib:jar.asc:1.0", Path(str(jar) + ".asc")),
        ]
    )

    AttachSignaturesGoal().run(context)

    assert [a.id for a in context.attachments] == [
        "org.example:lib:jar:1.0",
        "org.example:lib:jar.asc:1.0",
    ]


def test_missing_signature_fails(tmp_path, make_context) -> None:
    jar = _signed(tmp_path, "lib-1.0.jar", sign=False)
    context = make_context(attached=[artifact("org.example:lib:jar:1.0", jar)])

    with pytest.raises(SignatureMissingError, match="org.example:lib:jar:1.0"):
        AttachSignaturesGoal().run(context)


def test_signature_of_requires_a_file() -> None:
    with pytest.raises(ArtifactFileMissingError):
        signature_of(artifact("org.example:lib:jar:1.0"))
