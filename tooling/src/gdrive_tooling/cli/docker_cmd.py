"""`gdrive-tooling build-image` and `gdrive-tooling generate-dockerfile`."""

import argparse
import sys
from pathlib import Path

from gdrive_tooling.cli import exit_status
from gdrive_tooling.docker.build_image import run as run_build_image
from gdrive_tooling.docker.generate_dockerfile import run as run_generate_dockerfile
from gdrive_tooling.targets import DEFAULT_TARGET


def run_build_image_argv(
    argv: list[str] | None = None,
    project_root: Path | None = None,
    layout: dict[str, str] | None = None,
) -> None:
    """Parse argv (target, --dockerfile, --dry-run) and build the toolchain image."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(
        prog="gdrive-tooling build-image",
        description="Build the cross-compilation toolchain image for a target",
    )
    ap.add_argument(
        "target",
        nargs="?",
        default=DEFAULT_TARGET,
        help=f"Rust target triple (default: {DEFAULT_TARGET})",
    )
    ap.add_argument("--dockerfile", default=None, help="Dockerfile path relative to project root")
    ap.add_argument("--dry-run", action="store_true", help="Print the docker command only")
    args = ap.parse_args(argv)
    if args.dockerfile:
        layout = {**(layout or {}), "dockerfile": args.dockerfile}
    rc = run_build_image(
        project_root if project_root is not None else Path.cwd(),
        target=args.target,
        layout=layout,
        dry_run=args.dry_run,
    )
    sys.exit(exit_status(rc))


def run_generate_dockerfile_argv(
    argv: list[str] | None = None,
    project_root: Path | None = None,
    layout: dict[str, str] | None = None,
) -> None:
    """Parse argv (--output, --force) and write the toolchain Dockerfile."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(
        prog="gdrive-tooling generate-dockerfile",
        description="Write the toolchain Dockerfile used by build-image",
    )
    ap.add_argument("--output", type=Path, default=None, help="Output path (default: Dockerfile)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = ap.parse_args(argv)
    rc = run_generate_dockerfile(
        project_root,
        output_path=args.output,
        layout=layout,
        force=args.force,
    )
    sys.exit(exit_status(rc))
