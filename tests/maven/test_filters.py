"""Strict pattern filter tests."""

from __future__ import annotations

import pytest

from ease.maven.filters import (
    AndFilter,
    PatternExcludesFilter,
    PatternIncludesFilter,
    build_filter,
    pattern_matches,
    token_matches,
)
from tests.helpers import artifact


@pytest.mark.parametrize(
    "token, pattern, expected",
    [
        ("org.example", "*", True),
        ("org.example", "", True),
        ("org.example", "org.example", True),
        ("org.example", "org.other", False),
        ("org.example", "org.*", True),
        ("org.example", "*.example", True),
        ("org.example", "*exam*", True),
        ("org.example", "*zzz*", False),
        ("1.5", "[1.0,2.0)", True),
        ("2.0", "[1.0,2.0)", False),
        ("2.0", "[1.0,2.0]", True),
        ("0.9", "[1.0,)", False),
        ("3.0", "(,1.0],[2.0,)", True),
        ("1.0", "[1.0]", True),
        ("1.0-SNAPSHOT-weird", "[1.0,2.0)", False),
    ],
)
def test_token_matching(token: str, pattern: str, expected: bool) -> None:
    assert token_matches(token, pattern) is expected


def test_pattern_tokens_follow_group_artifact_type_version_order() -> None:
    lib = artifact("org.example:lib:jar:1.0")
    assert pattern_matches(lib, "org.example")
    assert pattern_matches(lib, "org.example:lib")
    assert pattern_matches(lib, "org.example:lib:jar:1.0")
    assert pattern_matches(lib, ":lib")
    assert not pattern_matches(lib, "org.example:lib:pom")
    assert not pattern_matches(lib, "org.example:lib:jar:1.0:extra")


def test_includes_and_excludes_combine() -> None:
    lib = artifact("org.example:lib:jar:1.0")
    ext = artifact("com.other:ext:jar:2.0")
    tests = artifact("org.example:lib-tests:jar:1.0")

    includes = PatternIncludesFilter(["org.example"])
    excludes = PatternExcludesFilter(["*:*-tests"])
    combined = AndFilter([includes, excludes])

    assert [a.artifact_id for a in (lib, ext, tests) if combined.include(a)] == ["lib"]


def test_unconfigured_filter_includes_everything() -> None:
    everything = build_filter(None, None)
    assert everything.include(artifact("any:thing:jar:1"))
    assert not build_filter([], None).include(artifact("any:thing:jar:1"))
    assert build_filter(None, []).include(artifact("any:thing:jar:1"))
