"""Shared plumbing for goal commands.

Loads the project, configuration, local repository and attachment
registry for a command, runs the goal and persists the registry. The
registry is only written back when the goal succeeds.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from ease.config.schema import EaseConfig
from ease.errors import GoalExecutionError
from ease.goals.base import BaseGoal
from ease.maven.project import load_project
from ease.maven.repository import LocalRepository
from ease.maven.settings import resolve_local_repository
from ease.runtime.attachments import load_attachments, save_attachments
from ease.runtime.config_loader import find_default_config, load_ease_config
from ease.runtime.context import GoalContext

logger = logging.getLogger("ease.cli.common")


def load_config(args) -> EaseConfig:
    """Config from ``--config``, else ``ease.toml`` beside the pom, else defaults."""
    source = getattr(args, "config", None)
    if source is None:
        pom = Path(getattr(args, "pom", None) or "pom.xml")
        source = find_default_config(pom.resolve().parent)
    return load_ease_config(source)


def build_context(args, config: EaseConfig) -> GoalContext:
    pom_path = Path(getattr(args, "pom", None) or "pom.xml")
    build_dir_arg = getattr(args, "build_directory", None) or config.build_directory
    project = load_project(
        pom_path, build_directory=Path(build_dir_arg) if build_dir_arg else None
    )

    local_repo_arg = getattr(args, "local_repository", None) or config.local_repository
    local_repository = LocalRepository(resolve_local_repository(local_repo_arg))
    logger.debug("Using local repository %s", local_repository.basedir)

    return GoalContext(
        project=project,
        local_repository=local_repository,
        attachments=load_attachments(project.build_directory),
        config=config,
    )


def apply_overrides(section: Any, overrides: Dict[str, Any]) -> None:
    """Set config attributes for command-line values that were given."""
    for name, value in overrides.items():
        if value is None or value == [] or value is False:
            continue
        setattr(section, name, value)


def run_goal(
    goal_cls: Type[BaseGoal],
    args,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> int:
    """Run one goal for the module described by ``args``.

    Args:
        goal_cls: Goal class to instantiate.
        args: Parsed command-line arguments.
        overrides: ``{section: {option: value}}`` from command-line flags.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        config = load_config(args)
        for section_name, values in (overrides or {}).items():
            apply_overrides(getattr(config, section_name), values)

        context = build_context(args, config)
        goal_cls().run(context)
        save_attachments(context.project.build_directory, context.attachments)
        return 0

    except ValidationError as err:
        logger.error("Invalid configuration: %s", err)
        return 1
    except GoalExecutionError as err:
        logger.error("Goal %s failed: %s", goal_cls.NAME, err)
        if err.__cause__ is not None:
            logger.error("Caused by: %s", err.__cause__)
        return 1
    except (OSError, ValueError) as err:
        logger.error("Goal %s failed: %s", goal_cls.NAME, err, exc_info=True)
        return 1


__all__ = ["load_config", "build_context", "apply_overrides", "run_goal"]
