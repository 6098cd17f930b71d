"""Strict include/exclude pattern filters for artifacts.

Pattern format: ``[groupId]:[artifactId]:[type]:[version]``. Each token
supports:

* ``*`` or an empty token - matches anything
* ``*text*`` - contains
* ``*text`` - suffix
* ``text*`` - prefix
* ``[1.0,2.0)`` style version ranges
* anything else - exact match

A pattern with more tokens than there are artifact fields never matches.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Protocol, Sequence

from packaging.version import InvalidVersion, Version

from ease.maven.coordinates import Artifact

logger = logging.getLogger("ease.maven.filters")

_RESTRICTION = re.compile(r"([\[(])([^\[\]()]*)([\])])")


class ArtifactFilter(Protocol):
    def include(self, artifact: Artifact) -> bool: ...


def _tokens(artifact: Artifact) -> List[str]:
    return [
        artifact.group_id,
        artifact.artifact_id,
        artifact.type,
        artifact.version,
    ]


def _parse_version(text: str) -> Optional[Version]:
    try:
        return Version(text.strip())
    except InvalidVersion:
        return None


def _in_restriction(version: Version, lower_incl: bool, bounds: str, upper_incl: bool) -> bool:
    if "," not in bounds:
        # [1.0] pins an exact version
        pinned = _parse_version(bounds)
        return pinned is not None and version == pinned

    low_text, high_text = (part.strip() for part in bounds.split(",", 1))
    if low_text:
        low = _parse_version(low_text)
        if low is None:
            return False
        if version < low or (version == low and not lower_incl):
            return False
    if high_text:
        high = _parse_version(high_text)
        if high is None:
            return False
        if version > high or (version == high and not upper_incl):
            return False
    return True


def version_in_range(token: str, pattern: str) -> bool:
    """Check a version string against a Maven version range such as ``[1.0,2.0)``.

    Versions that do not parse never match.
    """
    version = _parse_version(token)
    if version is None:
        logger.debug("Version %r is not comparable; range %s skipped", token, pattern)
        return False

    restrictions = _RESTRICTION.findall(pattern)
    if not restrictions:
        return False
    return any(
        _in_restriction(version, opening == "[", bounds, closing == "]")
        for opening, bounds, closing in restrictions
    )


def token_matches(token: str, pattern: str) -> bool:
    if pattern in ("", "*"):
        return True
    if len(pattern) > 1 and pattern.startswith("*") and pattern.endswith("*"):
        return pattern[1:-1] in token
    if pattern.startswith("*"):
        return token.endswith(pattern[1:])
    if pattern.endswith("*"):
        return token.startswith(pattern[:-1])
    if pattern.startswith(("[", "(")):
        return version_in_range(token, pattern)
    return token == pattern


def pattern_matches(artifact: Artifact, pattern: str) -> bool:
    tokens = _tokens(artifact)
    pattern_tokens = pattern.split(":")
    if len(pattern_tokens) > len(tokens):
        return False
    return all(
        token_matches(token, token_pattern)
        for token, token_pattern in zip(tokens, pattern_tokens)
    )


class PatternIncludesFilter:
    """Include an artifact when any pattern matches it."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = [p.strip() for p in patterns]

    def include(self, artifact: Artifact) -> bool:
        return any(pattern_matches(artifact, p) for p in self.patterns)


class PatternExcludesFilter(PatternIncludesFilter):
    """Include an artifact only when no pattern matches it."""

    def include(self, artifact: Artifact) -> bool:
        return not super().include(artifact)


class AndFilter:
    """Conjunction of filters; an empty filter includes everything."""

    def __init__(self, filters: Optional[Sequence[ArtifactFilter]] = None) -> None:
        self.filters: List[ArtifactFilter] = list(filters or [])

    def add(self, artifact_filter: ArtifactFilter) -> None:
        self.filters.append(artifact_filter)

    def include(self, artifact: Artifact) -> bool:
        return all(f.include(artifact) for f in self.filters)


def build_filter(
    includes: Optional[Sequence[str]], excludes: Optional[Sequence[str]]
) -> AndFilter:
    """Combine optional include and exclude pattern lists."""
    filters = AndFilter()
    if includes is not None:
        filters.add(PatternIncludesFilter(includes))
    if excludes is not None:
        filters.add(PatternExcludesFilter(excludes))
    return filters


__all__ = [
    "ArtifactFilter",
    "PatternIncludesFilter",
    "PatternExcludesFilter",
    "AndFilter",
    "build_filter",
    "pattern_matches",
    "token_matches",
    "version_in_range",
]
