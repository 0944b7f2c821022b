"""Main CLI entry point for gdrive cross-build tooling."""

import logging
import sys
from pathlib import Path
from typing import Any

from gdrive_tooling.cli import docker_cmd, targets_cmd
from gdrive_tooling.cli import (
    build as build_cli,
)
from gdrive_tooling.config import ConfigError, load_layout

COMMANDS = ("build-image", "build", "targets", "generate-dockerfile")


def _usage() -> None:
    print(
        "Usage: gdrive-tooling [--project-root PATH] [--config PATH] [-v|-q] <command> [args...]",
        file=sys.stderr,
    )
    print("Commands:", file=sys.stderr)
    print(
        "  build-image [target]            - Build the toolchain image gdrive-build:<target>",
        file=sys.stderr,
    )
    print(
        "  build [target] [output-dir]     - Compile gdrive in the image and copy it out",
        file=sys.stderr,
    )
    print("  targets                         - List supported targets", file=sys.stderr)
    print(
        "  generate-dockerfile             - Write the toolchain Dockerfile",
        file=sys.stderr,
    )


def parse_global_options(argv: list[str]) -> tuple[dict[str, Any], int | None]:
    """Parse options before the command. Returns (options, index of the command or None).

    --project-root and --config take a value (separate or --flag=value) and are resolved
    against the current directory. Raises ValueError for unknown or incomplete options.
    """
    opts: dict[str, Any] = {
        "project_root": Path.cwd(),
        "config": None,
        "verbose": False,
        "quiet": False,
    }
    i = 0
    while i < len(argv):
        arg = argv[i]
        flag, sep, value = arg.partition("=")
        if flag in ("--project-root", "--config"):
            if not sep:
                if i + 1 >= len(argv):
                    msg = f"{flag} requires a value"
                    raise ValueError(msg)
                i += 1
                value = argv[i]
            opts[flag[2:].replace("-", "_")] = Path(value).resolve()
        elif arg in ("-v", "--verbose"):
            opts["verbose"] = True
        elif arg in ("-q", "--quiet"):
            opts["quiet"] = True
        elif arg.startswith("-"):
            msg = f"Unknown option: {arg}"
            raise ValueError(msg)
        else:
            return opts, i
        i += 1
    return opts, None


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """DEBUG with logger names for -v, ERROR only for -q, INFO otherwise."""
    if verbose:
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    elif quiet:
        level = logging.ERROR
        format_str = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        format_str = "%(message)s"
    logging.basicConfig(level=level, format=format_str, force=True)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, idx = parse_global_options(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if idx is None:
        _usage()
        sys.exit(1)
    if argv[idx] not in COMMANDS:
        print(f"Error: Unknown command: {argv[idx]}", file=sys.stderr)
        sys.exit(1)
    configure_logging(verbose=opts["verbose"], quiet=opts["quiet"])

    project_root: Path = opts["project_root"]
    try:
        layout = load_layout(project_root, opts["config"])
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    command = argv[idx]
    rest = argv[idx + 1 :]
    if command == "build-image":
        docker_cmd.run_build_image_argv(rest, project_root=project_root, layout=layout)
    elif command == "build":
        build_cli.run_build_argv(rest, project_root=project_root, layout=layout)
    elif command == "generate-dockerfile":
        docker_cmd.run_generate_dockerfile_argv(rest, project_root=project_root, layout=layout)
    elif command == "targets":
        targets_cmd.run_targets_argv(rest, layout=layout)


if __name__ == "__main__":
    main()
