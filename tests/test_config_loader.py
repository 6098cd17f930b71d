"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ease.config.schema import EaseConfig
from ease.runtime.config_loader import find_default_config, load_ease_config


def test_defaults() -> None:
    config = load_ease_config(None)
    assert config.aggregate.merge == "union"
    assert config.aggregate.includes is None
    assert config.attachsignatures.keep_project_types == ["pom", "pom.asc"]
    assert config.thaw.include_group_ids == []


def test_camel_case_and_snake_case_are_both_accepted() -> None:
    camel = EaseConfig.from_dict(
        {
            "attach": {"artifactListLocation": "list.txt"},
            "aggregate": {"excludeTransitive": True},
        }
    )
    snake = EaseConfig.from_dict(
        {
            "attach": {"artifact_list_location": "list.txt"},
            "aggregate": {"exclude_transitive": True},
        }
    )
    assert camel == snake
    assert camel.attach.artifact_list_location == "list.txt"


@pytest.mark.parametrize(
    "key", ["include_group_ids", "includeGroupIds", "group_ids", "groupIds"]
)
def test_thaw_group_ids_aliases(key: str) -> None:
    config = EaseConfig.from_dict({"thaw": {key: ["org.example"]}})
    assert config.thaw.include_group_ids == ["org.example"]


def test_inline_toml_and_json() -> None:
    toml_config = load_ease_config('[thaw]\ngroupIds = ["org.example"]\ntransitive = true\n')
    assert toml_config.thaw.include_group_ids == ["org.example"]
    assert toml_config.thaw.transitive is True

    json_config = load_ease_config('{"aggregate": {"merge": "concatenate"}}')
    assert json_config.aggregate.merge == "concatenate"


def test_config_file(tmp_path: Path) -> None:
    path = tmp_path / "ease.toml"
    path.write_text('localRepository = "/opt/m2"\n[freeze]\nignoreEmptyArtifacts = true\n')

    config = load_ease_config(path)

    assert config.local_repository == "/opt/m2"
    assert config.freeze.ignore_empty_artifacts is True
    assert find_default_config(tmp_path) == path
    assert find_default_config(tmp_path / "elsewhere") is None


@pytest.mark.parametrize(
    "data",
    [
        {"attach": {"artifactListLocaton": "typo"}},
        {"aggregate": {"merge": "interleave"}},
        {"attachsignatures": {"keepProjectTypes": ["pom", " "]}},
    ],
)
def test_invalid_configuration_is_rejected(data) -> None:
    with pytest.raises(ValidationError):
        EaseConfig.from_dict(data)


def test_non_mapping_document_is_rejected() -> None:
    with pytest.raises(ValueError):
        load_ease_config("[1, 2]")


@pytest.mark.parametrize("name", ["missing.toml", "missing.json"])
def test_missing_config_file_is_reported(tmp_path: Path, name: str) -> None:
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        load_ease_config(tmp_path / name)

    with pytest.raises(FileNotFoundError):
        load_ease_config(str(tmp_path / name))
