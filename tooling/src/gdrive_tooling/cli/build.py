"""`gdrive-tooling build`: compile gdrive in the target's toolchain image."""

import sys
from pathlib import Path

from gdrive_tooling.build.runner import run as run_build
from gdrive_tooling.cli import exit_status
from gdrive_tooling.targets import DEFAULT_TARGET


def run_build_argv(
    argv: list[str] | None = None,
    project_root: Path | None = None,
    layout: dict[str, str] | None = None,
) -> None:
    """Parse argv (target, output-dir, --hash, --dry-run) and run the in-container build."""
    import argparse

    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'gdrive-tooling build'
    ap = argparse.ArgumentParser(
        prog="gdrive-tooling build",
        description="Cross-compile gdrive inside the toolchain image for a target",
    )
    ap.add_argument(
        "target",
        nargs="?",
        default=DEFAULT_TARGET,
        help=f"Rust target triple (default: {DEFAULT_TARGET})",
    )
    ap.add_argument(
        "output_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Host directory for the binary, relative to cwd (default: <project-root>/dist/<target>)",
    )
    ap.add_argument("--hash", action="store_true", help="Write <binary>.sha256 next to the binary")
    ap.add_argument("--dry-run", action="store_true", help="Print the docker command only")
    args = ap.parse_args(argv)
    rc = run_build(
        project_root if project_root is not None else Path.cwd(),
        target=args.target,
        # relative to the invoking shell, not --project-root
        out_dir=args.output_dir.resolve() if args.output_dir is not None else None,
        layout=layout,
        write_hash=args.hash,
        dry_run=args.dry_run,
    )
    sys.exit(exit_status(rc))
