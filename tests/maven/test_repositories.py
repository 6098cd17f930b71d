"""Tests for repository lookup and local repository discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from ease.errors import RepositoryConfigurationError
from ease.maven.coordinates import parse_coordinate
from ease.maven.repository import (
    FileSystemRepository,
    LocalRepository,
    ThawRepository,
    same_basedir,
)
from ease.maven.settings import read_settings_local_repository, resolve_local_repository
from tests.helpers import publish


def test_find_returns_expected_path_even_when_missing(tmp_path: Path) -> None:
    repo = LocalRepository(tmp_path)
    coordinate = parse_coordinate("org.example:lib:jar:1.0")

    found = repo.find(coordinate)

    assert found.coordinate == coordinate
    assert found.file == tmp_path.resolve() / "org/example/lib/1.0/lib-1.0.jar"
    assert repo.find_artifact_file(coordinate) is None

    publish(tmp_path, coordinate)
    assert repo.find_artifact_file(coordinate) == found.file


def test_file_system_repository_from_location(tmp_path: Path) -> None:
    repo = FileSystemRepository.from_location(tmp_path)
    assert repo.basedir == tmp_path.resolve()
    assert repo.url.startswith("file://")
    assert repo.id == "ease-source-repo"


def test_file_system_repository_rejects_missing_directory_and_other_schemes(
    tmp_path: Path,
) -> None:
    with pytest.raises(RepositoryConfigurationError, match="does not exist"):
        FileSystemRepository.from_location(tmp_path / "missing")
    with pytest.raises(RepositoryConfigurationError):
        FileSystemRepository("https://repo.example.org/maven2")


def test_same_basedir_follows_symlinks(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    assert same_basedir(LocalRepository(real), FileSystemRepository.from_location(link))
    assert not same_basedir(LocalRepository(real), ThawRepository(tmp_path))


def test_thaw_repository_uses_plain_layout(tmp_path: Path) -> None:
    repo = ThawRepository(tmp_path)
    snapshot = parse_coordinate("org.example:lib:jar:1.0-SNAPSHOT")

    assert repo.has_local_metadata is False
    assert repo.find(snapshot).file == (
        tmp_path.resolve() / "org/example/lib/1.0-SNAPSHOT/lib-1.0-SNAPSHOT.jar"
    )


def test_local_repository_resolution_order(tmp_path: Path) -> None:
    settings = tmp_path / "settings.xml"
    settings.write_text(
        '<settings xmlns="http://maven.apache.org/SETTINGS/1.0.0">'
        f"<localRepository>{tmp_path / 'from-settings'}</localRepository>"
        "</settings>",
        encoding="utf-8",
    )

    assert read_settings_local_repository(settings) == tmp_path / "from-settings"
    assert resolve_local_repository(tmp_path / "explicit", settings) == (
        tmp_path / "explicit"
    ).resolve()
    assert resolve_local_repository(None, settings) == (tmp_path / "from-settings").resolve()
    assert resolve_local_repository(None, tmp_path / "absent.xml") == (
        Path.home() / ".m2" / "repository"
    ).resolve()


def test_unreadable_settings_are_ignored(tmp_path: Path) -> None:
    settings = tmp_path / "settings.xml"
    settings.write_text("<settings>", encoding="utf-8")
    assert read_settings_local_repository(settings) is None
