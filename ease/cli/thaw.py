"""Thaw command implementation."""

from __future__ import annotations

import logging

from ease.cli.common import run_goal
from ease.goals.thaw import ThawGoal

logger = logging.getLogger("ease.cli.thaw")


def thaw_command(args) -> int:
    """Execute thaw command.

    Args:
        args: Parsed command-line arguments containing:
            - include_group_ids: Dependency groupIds to thaw
            - exclude_artifact_ids: Dependency artifactIds to skip
            - thaw_dependency_repository_location: Optional fixed repository
            - transitive: Select from the whole dependency tree

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    return run_goal(
        ThawGoal,
        args,
        overrides={
            "thaw": {
                "include_group_ids": getattr(args, "include_group_ids", None),
                "exclude_artifact_ids": getattr(args, "exclude_artifact_ids", None),
                "thaw_dependency_repository_location": getattr(
                    args, "thaw_dependency_repository_location", None
                ),
                "transitive": getattr(args, "transitive", False),
            }
        },
    )
