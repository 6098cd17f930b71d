"""Freeze command implementation."""

from __future__ import annotations

import logging

from ease.cli.common import run_goal
from ease.goals.freeze import FreezeGoal

logger = logging.getLogger("ease.cli.freeze")


def freeze_command(args) -> int:
    """Execute freeze command.

    Args:
        args: Parsed command-line arguments containing:
            - pom: Project model file
            - ignore_empty_artifacts: Skip attached artifacts without files

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    return run_goal(
        FreezeGoal,
        args,
        overrides={
            "freeze": {
                "ignore_empty_artifacts": getattr(args, "ignore_empty_artifacts", False),
            }
        },
    )
