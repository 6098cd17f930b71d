"""Local repository discovery."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger("ease.maven.settings")

DEFAULT_SETTINGS = Path("~/.m2/settings.xml")
DEFAULT_LOCAL_REPOSITORY = Path("~/.m2/repository")


def read_settings_local_repository(settings_path: Path) -> Optional[Path]:
    """Return ``<localRepository>`` from a settings.xml, if declared."""
    path = Path(settings_path).expanduser()
    if not path.is_file():
        return None
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return None

    ns = root.tag.split("}")[0][1:] if root.tag.startswith("{") else ""
    tag = f"{{{ns}}}localRepository" if ns else "localRepository"
    element = root.find(tag)
    if element is None or not element.text or not element.text.strip():
        return None
    return Path(element.text.strip()).expanduser()


def resolve_local_repository(
    explicit: Optional[Union[str, Path]] = None,
    settings_path: Path = DEFAULT_SETTINGS,
) -> Path:
    """Pick the local repository directory.

    Precedence: explicit value, settings.xml ``<localRepository>``, then
    ``~/.m2/repository``.
    """
    if explicit:
        return Path(explicit).expanduser().resolve()

    from_settings = read_settings_local_repository(settings_path)
    if from_settings is not None:
        logger.debug("Using local repository from %s: %s", settings_path, from_settings)
        return from_settings.resolve()

    return DEFAULT_LOCAL_REPOSITORY.expanduser().resolve()


__all__ = ["resolve_local_repository", "read_settings_local_repository"]
