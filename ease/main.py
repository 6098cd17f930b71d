"""Main CLI entry point for ease.

Provides commands: freeze, aggregate, attach, thaw, attachsignatures, attached
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ease.cli.aggregate import aggregate_command
from ease.cli.attach import attach_command
from ease.cli.attached import attached_command
from ease.cli.freeze import freeze_command
from ease.cli.signatures import attachsignatures_command
from ease.cli.thaw import thaw_command

logger = logging.getLogger("ease.cli")


def setup_logging(
    verbosity: int = 0,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write plain log lines to this file (optional).
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbosity >= 2,
            log_time_format="[%H:%M:%S]",
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-f",
        "--pom",
        default="pom.xml",
        help="Project model of the module (default: ./pom.xml)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. Defaults to ease.toml next to the pom "
            "when present."
        ),
    )
    parser.add_argument(
        "--local-repository",
        help=(
            "Local repository directory. Defaults to <localRepository> from "
            "~/.m2/settings.xml, then ~/.m2/repository."
        ),
    )
    parser.add_argument(
        "--build-directory",
        help="Build output directory (default: <build><directory> or ./target)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ease",
        description="Ease - artifact list management for multi-module Maven builds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    freeze_parser = subparsers.add_parser(
        "freeze",
        help="Write and attach the list of artifacts this module produced",
    )
    _add_project_arguments(freeze_parser)
    freeze_parser.add_argument(
        "--ignore-empty-artifacts",
        action="store_true",
        help="Skip attached artifacts that have no file instead of failing",
    )

    aggregate_parser = subparsers.add_parser(
        "aggregate",
        help="Merge the artifact lists of the module's dependencies",
    )
    _add_project_arguments(aggregate_parser)
    aggregate_parser.add_argument(
        "--include",
        dest="includes",
        action="append",
        help="Pattern groupId:artifactId:type:version to include (repeatable)",
    )
    aggregate_parser.add_argument(
        "--exclude",
        dest="excludes",
        action="append",
        help="Pattern groupId:artifactId:type:version to exclude (repeatable)",
    )
    aggregate_parser.add_argument(
        "--exclude-transitive",
        action="store_true",
        help="Only aggregate directly declared dependencies",
    )
    aggregate_parser.add_argument(
        "--merge",
        choices=["union", "concatenate"],
        help=(
            "union: distinct lines sorted (default); "
            "concatenate: each dependency's list in dependency-id order"
        ),
    )

    attach_parser = subparsers.add_parser(
        "attach",
        help="Attach the artifacts named in an artifact list",
    )
    _add_project_arguments(attach_parser)
    attach_parser.add_argument(
        "-l",
        "--artifact-list-location",
        help="Artifact list file to attach from (required unless configured)",
    )
    attach_parser.add_argument(
        "-r",
        "--artifact-repository-location",
        help=(
            "Repository directory to fetch artifacts from instead of the local "
            "repository. Must not be the local repository."
        ),
    )

    thaw_parser = subparsers.add_parser(
        "thaw",
        help="Attach the artifacts frozen by selected dependencies",
    )
    _add_project_arguments(thaw_parser)
    thaw_parser.add_argument(
        "-g",
        "--include-group-id",
        dest="include_group_ids",
        action="append",
        help="Dependency groupId to thaw (repeatable, required unless configured)",
    )
    thaw_parser.add_argument(
        "-x",
        "--exclude-artifact-id",
        dest="exclude_artifact_ids",
        action="append",
        help="Dependency artifactId to leave out (repeatable)",
    )
    thaw_parser.add_argument(
        "--thaw-dependency-repository-location",
        help="Fixed directory to fetch thawed artifact lists and artifacts from",
    )
    thaw_parser.add_argument(
        "--transitive",
        action="store_true",
        help="Select dependencies from the whole dependency tree",
    )

    signatures_parser = subparsers.add_parser(
        "attachsignatures",
        help="Re-attach artifacts together with their .asc signatures",
    )
    _add_project_arguments(signatures_parser)
    signatures_parser.add_argument(
        "--keep-project-type",
        dest="keep_project_types",
        action="append",
        help="Type of the project's own artifacts to keep (default: pom, pom.asc)",
    )

    attached_parser = subparsers.add_parser(
        "attached",
        help="Show the artifacts attached to the module",
    )
    attached_parser.add_argument("-f", "--pom", default="pom.xml", help="Project model")
    attached_parser.add_argument("--build-directory", help="Build output directory")

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose, log_file=args.log_file)

    # Dispatch to subcommand
    if args.command == "freeze":
        return freeze_command(args)
    elif args.command == "aggregate":
        return aggregate_command(args)
    elif args.command == "attach":
        return attach_command(args)
    elif args.command == "thaw":
        return thaw_command(args)
    elif args.command == "attachsignatures":
        return attachsignatures_command(args)
    elif args.command == "attached":
        return attached_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
