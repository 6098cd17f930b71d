"""Artifact repositories addressed by coordinate.

Three flavours are supported:

* ``LocalRepository`` - the user's local repository (``~/.m2/repository``).
* ``FileSystemRepository`` - an alternate repository rooted at a directory,
  addressed through a ``file://`` URL.
* ``ThawRepository`` - a fixed directory where every artifact is found at
  its computed layout path, without consulting repository metadata.

All of them resolve a coordinate to a file path without checking that
the file exists; callers decide whether a missing file is fatal.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union
from urllib.parse import unquote, urlparse

from ease.errors import RepositoryConfigurationError
from ease.maven.coordinates import Artifact, Coordinate
from ease.maven.layout import path_of

logger = logging.getLogger("ease.maven.repository")

PathLike = Union[str, Path]


class ArtifactRepository(Protocol):
    """Narrow lookup interface consumed by the goals."""

    id: str

    @property
    def basedir(self) -> Path: ...

    @property
    def url(self) -> str: ...

    def path_of(self, coordinate: Coordinate) -> str: ...

    def find(self, coordinate: Coordinate) -> Artifact: ...

    def find_artifact_file(self, coordinate: Coordinate) -> Optional[Path]: ...


class _LayoutRepository:
    """Repository whose files live under ``basedir`` in the default layout."""

    id = "repository"

    def __init__(self, basedir: PathLike) -> None:
        self._basedir = Path(basedir).expanduser().resolve()

    @property
    def basedir(self) -> Path:
        return self._basedir

    @property
    def url(self) -> str:
        return self._basedir.as_uri()

    def path_of(self, coordinate: Coordinate) -> str:
        return path_of(coordinate)

    def find(self, coordinate: Coordinate) -> Artifact:
        """Return the artifact with its expected file set (existing or not)."""
        return Artifact(coordinate, self._basedir / self.path_of(coordinate))

    def find_artifact_file(self, coordinate: Coordinate) -> Optional[Path]:
        """Return the artifact file if it exists on disk, else None."""
        candidate = self.find(coordinate).file
        if candidate is not None and candidate.is_file():
            return candidate
        logger.debug("Artifact %s not found in %s", coordinate, self._basedir)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._basedir)!r})"


class LocalRepository(_LayoutRepository):
    """The local repository shared by every build on this machine."""

    id = "local"


class FileSystemRepository(_LayoutRepository):
    """Alternate repository rooted at a directory given by URL."""

    id = "ease-source-repo"

    def __init__(self, url: str) -> None:
        parsed = urlparse(url)
        if parsed.scheme != "file":
            raise RepositoryConfigurationError(
                f"Could not parse repository location: {url}"
            )
        super().__init__(unquote(parsed.path))
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    @classmethod
    def from_location(cls, location: PathLike) -> "FileSystemRepository":
        """Build a repository from a directory path.

        Raises:
            RepositoryConfigurationError: If the directory does not exist.
        """
        directory = Path(location).expanduser()
        if not directory.is_dir():
            raise RepositoryConfigurationError(
                f"The repository location does not exist: {location}"
            )
        return cls(directory.resolve().as_uri())


class ThawRepository(_LayoutRepository):
    """Fixed-path lookup for thawed dependencies.

    Every artifact is expected at ``<location>/<layout path>``; no
    repository metadata is read, so snapshot versions are never remapped.
    """

    id = "ease-thaw-repo"

    @property
    def has_local_metadata(self) -> bool:
        return False


def same_basedir(first: ArtifactRepository, second: ArtifactRepository) -> bool:
    """Return True when both repositories share the same base directory."""
    try:
        return os.path.samefile(first.basedir, second.basedir)
    except OSError:
        return first.basedir == second.basedir


__all__ = [
    "ArtifactRepository",
    "LocalRepository",
    "FileSystemRepository",
    "ThawRepository",
    "same_basedir",
]
