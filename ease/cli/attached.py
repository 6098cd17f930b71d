"""Show the artifacts currently attached to a module."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from ease.errors import GoalExecutionError
from ease.maven.project import load_project
from ease.runtime.attachments import load_attachments
from ease.runtime.display import print_attachments

logger = logging.getLogger("ease.cli.attached")


def attached_command(args, console: Console | None = None) -> int:
    """Print the attachment registry of the module as a table.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        pom_path = Path(getattr(args, "pom", None) or "pom.xml")
        build_dir = getattr(args, "build_directory", None)
        project = load_project(pom_path, build_directory=Path(build_dir) if build_dir else None)
        registry = load_attachments(project.build_directory)
    except GoalExecutionError as err:
        logger.error("Could not load attached artifacts: %s", err)
        return 1

    print_attachments(registry, console=console, title=f"Attached to {project.id}")
    return 0
