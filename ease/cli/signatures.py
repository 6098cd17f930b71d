"""Attach-signatures command implementation."""

from __future__ import annotations

import logging

from ease.cli.common import run_goal
from ease.goals.signatures import AttachSignaturesGoal

logger = logging.getLogger("ease.cli.signatures")


def attachsignatures_command(args) -> int:
    """Execute attachsignatures command.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    return run_goal(
        AttachSignaturesGoal,
        args,
        overrides={
            "attachsignatures": {
                "keep_project_types": getattr(args, "keep_project_types", None),
            }
        },
    )
