"""Aggregate command implementation."""

from __future__ import annotations

import logging

from ease.cli.common import run_goal
from ease.goals.aggregate import AggregateGoal

logger = logging.getLogger("ease.cli.aggregate")


def aggregate_command(args) -> int:
    """Execute aggregate command.

    Args:
        args: Parsed command-line arguments containing:
            - includes / excludes: Coordinate patterns
            - exclude_transitive: Only use declared dependencies
            - merge: Merge policy (union or concatenate)

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    return run_goal(
        AggregateGoal,
        args,
        overrides={
            "aggregate": {
                "includes": getattr(args, "includes", None),
                "excludes": getattr(args, "excludes", None),
                "exclude_transitive": getattr(args, "exclude_transitive", False),
                "merge": getattr(args, "merge", None),
            }
        },
    )
