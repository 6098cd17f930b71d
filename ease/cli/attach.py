"""Attach command implementation."""

from __future__ import annotations

import logging

from ease.cli.common import run_goal
from ease.goals.attach import AttachGoal

logger = logging.getLogger("ease.cli.attach")


def attach_command(args) -> int:
    """Execute attach command.

    Args:
        args: Parsed command-line arguments containing:
            - artifact_list_location: Artifact list to attach from
            - artifact_repository_location: Optional alternate repository

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    return run_goal(
        AttachGoal,
        args,
        overrides={
            "attach": {
                "artifact_list_location": getattr(args, "artifact_list_location", None),
                "artifact_repository_location": getattr(
                    args, "artifact_repository_location", None
                ),
            }
        },
    )
