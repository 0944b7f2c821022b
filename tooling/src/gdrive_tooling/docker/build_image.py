"""Build the cross-compilation toolchain image for a target: gdrive-build:{target}."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from gdrive_tooling.config import resolve_layout
from gdrive_tooling.targets import (
    DEFAULT_TARGET,
    UnsupportedTargetError,
    image_tag,
    resolve_base_image,
)

log = logging.getLogger(__name__)


def build_image_command(
    target: str,
    project_root: Path,
    layout: dict[str, str] | None = None,
) -> list[str]:
    """docker build argv for target. Raises UnsupportedTargetError for unknown targets."""
    cfg = resolve_layout(layout)
    base_image = resolve_base_image(target)
    return [
        cfg["docker"],
        "build",
        "--build-arg",
        f"TARGET={target}",
        "--build-arg",
        f"BASE_IMAGE={base_image}",
        "-t",
        image_tag(target, cfg["image_prefix"]),
        "-f",
        str(project_root / cfg["dockerfile"]),
        str(project_root / cfg["context"]),
    ]


def run(
    project_root: Path,
    target: str = DEFAULT_TARGET,
    layout: dict[str, str] | None = None,
    dry_run: bool = False,
) -> int:
    """Build the toolchain image for target. Returns 0, 1 (unsupported target / no Dockerfile) or docker's exit code."""
    cfg = resolve_layout(layout)
    try:
        cmd = build_image_command(target, project_root, cfg)
    except UnsupportedTargetError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    tag = image_tag(target, cfg["image_prefix"])
    if dry_run:
        print(f"[dry-run] would: {' '.join(cmd)}")
        return 0

    dockerfile = project_root / cfg["dockerfile"]
    if not dockerfile.exists():
        print(f"❌ {dockerfile} not found", file=sys.stderr)
        print("   Run: gdrive-tooling generate-dockerfile", file=sys.stderr)
        return 1

    print(f"🔨 Building {tag} from {resolve_base_image(target)}...")
    log.debug("Running: %s", cmd)
    try:
        r = subprocess.run(cmd, cwd=str(project_root))
    except FileNotFoundError:
        print(f"❌ {cfg['docker']} not found on PATH", file=sys.stderr)
        return 1
    if r.returncode != 0:
        print(f"❌ Docker build failed for {target} (exit {r.returncode})", file=sys.stderr)
        return r.returncode
    print(f"✅ Built and tagged: {tag}")
    return 0
