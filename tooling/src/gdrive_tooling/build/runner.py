"""Compile gdrive inside the target's toolchain image and copy the binary to the host.

The image must exist already (gdrive-tooling build-image <target>). The project root is
mounted at the layout's workdir and the output directory at its out_mount; cargo runs with
--release --target <target> and the binary is copied into the out mount only when the
build succeeds.
"""

from __future__ import annotations

import hashlib
import logging
import shlex
import subprocess
import sys
from pathlib import Path

from gdrive_tooling.config import resolve_layout
from gdrive_tooling.targets import (
    DEFAULT_TARGET,
    UnsupportedTargetError,
    artifact_path,
    default_output_dir,
    image_tag,
    resolve_base_image,
)

log = logging.getLogger(__name__)


def container_script(target: str, layout: dict[str, str] | None = None) -> str:
    """Shell script run inside the container: cargo build, then copy the artifact to the out mount."""
    cfg = resolve_layout(layout)
    src = artifact_path(target, cfg["binary_name"])
    dest = f"{cfg['out_mount'].rstrip('/')}/{cfg['binary_name']}"
    return (
        f"cargo build --release --target {shlex.quote(target)}"
        f" && cp {shlex.quote(src)} {shlex.quote(dest)}"
    )


def build_command(
    target: str,
    project_root: Path,
    out_dir: Path,
    layout: dict[str, str] | None = None,
) -> list[str]:
    """docker run argv for target. Raises UnsupportedTargetError for unknown targets."""
    cfg = resolve_layout(layout)
    resolve_base_image(target)  # raises for unknown targets
    return [
        cfg["docker"],
        "run",
        "--rm",
        "-v",
        f"{project_root}:{cfg['workdir']}",
        "-v",
        f"{out_dir}:{cfg['out_mount']}",
        "-w",
        cfg["workdir"],
        image_tag(target, cfg["image_prefix"]),
        "/bin/sh",
        "-c",
        container_script(target, cfg),
    ]


def resolve_output_dir(
    project_root: Path,
    target: str,
    out_dir: Path | None,
    layout: dict[str, str] | None = None,
) -> Path:
    """Absolute output dir: out_dir (relative to project_root) or {project_root}/{dist_dir}/{target}."""
    cfg = resolve_layout(layout)
    if out_dir is None:
        return default_output_dir(project_root, target, cfg["dist_dir"]).resolve()
    if not out_dir.is_absolute():
        out_dir = project_root / out_dir
    return out_dir.resolve()


def write_sha256(path: Path) -> Path:
    """Write {path}.sha256 with the hex digest of path. Returns the hash file path."""
    hash_path = path.with_name(f"{path.name}.sha256")
    hash_path.write_text(hashlib.sha256(path.read_bytes()).hexdigest())
    return hash_path


def run(
    project_root: Path,
    target: str = DEFAULT_TARGET,
    out_dir: Path | None = None,
    layout: dict[str, str] | None = None,
    write_hash: bool = False,
    dry_run: bool = False,
) -> int:
    """Build gdrive for target in its image; copy it to out_dir. Returns 0, 1, or docker's exit code."""
    cfg = resolve_layout(layout)
    root = project_root.resolve()
    dest_dir = resolve_output_dir(root, target, out_dir, cfg)
    try:
        cmd = build_command(target, root, dest_dir, cfg)
    except UnsupportedTargetError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if dry_run:
        print(f"[dry-run] would: mkdir -p {dest_dir}")
        print(f"[dry-run] would: {shlex.join(cmd)}")
        return 0

    dest_dir.mkdir(parents=True, exist_ok=True)
    tag = image_tag(target, cfg["image_prefix"])
    print(f"🔨 Building {cfg['binary_name']} for {target} in {tag}...")
    log.debug("Running: %s", cmd)
    try:
        r = subprocess.run(cmd, cwd=str(root))
    except FileNotFoundError:
        print(f"❌ {cfg['docker']} not found on PATH", file=sys.stderr)
        return 1
    if r.returncode != 0:
        print(f"❌ Build failed for {target} (exit {r.returncode})", file=sys.stderr)
        return r.returncode

    binary = dest_dir / cfg["binary_name"]
    if not binary.is_file():
        print(f"❌ Artifact not found: {binary}", file=sys.stderr)
        print(
            f"   Expected {artifact_path(target, cfg['binary_name'])} to be copied by the build",
            file=sys.stderr,
        )
        return 1

    if write_hash:
        hash_path = write_sha256(binary)
        print(f"✅ Hash written: {hash_path}")
    print(f"✅ {target}: {binary}")
    return 0
