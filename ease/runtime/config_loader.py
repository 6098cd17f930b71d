"""Helpers for loading ease configuration from TOML/JSON sources.

This module provides a single entry point `load_ease_config`
that accepts various configuration sources:

* None -> default EaseConfig
* dict -> EaseConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ease.config.schema import EaseConfig

logger = logging.getLogger("ease.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

DEFAULT_CONFIG_NAME = "ease.toml"
_CONFIG_SUFFIXES = {".toml", ".tml", ".json"}

# A first line like [thaw] or [[x]] opens a TOML table, not a JSON array.
_TOML_TABLE = re.compile(r"^\[\[?[\w.\-\"' ]+\]\]?\s*(#.*)?$")


def _guess_format(text: str) -> str:
    first_line = text.lstrip().split("\n", 1)[0].strip()
    if first_line.startswith("{"):
        return "json"
    if first_line.startswith("[") and not _TOML_TABLE.match(first_line):
        return "json"
    return "toml"


def load_ease_config(source: ConfigSource) -> EaseConfig:
    """Load EaseConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default EaseConfig
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        EaseConfig instance.

    Raises:
        FileNotFoundError: If a .toml/.json path is given that does not exist.
    """
    if source is None:
        logger.debug("No config source provided; using default EaseConfig")
        return EaseConfig()

    if isinstance(source, dict):
        logger.debug("Loading EaseConfig from provided dict")
        return EaseConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        single_line = "\n" not in str(source)
        if single_line and path.suffix.lower() in _CONFIG_SUFFIXES and not path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        # Inline documents span lines; only single-line sources can be paths.
        if single_line and path.is_file():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return EaseConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


def find_default_config(basedir: Path) -> Optional[Path]:
    """Return ``<basedir>/ease.toml`` when it exists."""
    candidate = basedir / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


__all__ = ["load_ease_config", "find_default_config", "DEFAULT_CONFIG_NAME"]
