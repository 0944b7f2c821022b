"""Supported cross-compilation targets and the names derived from them.

Both the image builder and the build runner derive image tags and artifact paths
from here, so a target always maps to the same image on both sides.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_TARGET = "aarch64-unknown-linux-musl"
IMAGE_PREFIX = "gdrive-build"
BINARY_NAME = "gdrive"

# target triple -> base toolchain image
TARGET_BASE_IMAGES: dict[str, str] = {
    "aarch64-unknown-linux-musl": "messense/rust-musl-cross:aarch64-musl",
    "armv7-unknown-linux-musleabihf": "messense/rust-musl-cross:armv7-musleabihf",
}


class UnsupportedTargetError(ValueError):
    """Target key is not in TARGET_BASE_IMAGES."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Unsupported target: {target}")


def supported_targets() -> list[str]:
    return sorted(TARGET_BASE_IMAGES)


def is_supported(target: str) -> bool:
    return target in TARGET_BASE_IMAGES


def resolve_base_image(target: str) -> str:
    """Base toolchain image for target. Raises UnsupportedTargetError for unknown keys."""
    try:
        return TARGET_BASE_IMAGES[target]
    except KeyError:
        raise UnsupportedTargetError(target) from None


def image_tag(target: str, prefix: str = IMAGE_PREFIX) -> str:
    """Image tag for target: {prefix}:{target}."""
    return f"{prefix}:{target}"


def artifact_path(target: str, binary_name: str = BINARY_NAME) -> str:
    """Path of the release binary relative to the crate root (POSIX, used inside the container)."""
    return f"target/{target}/release/{binary_name}"


def default_output_dir(project_root: Path, target: str, dist_dir: str = "dist") -> Path:
    """Default host output directory: {project_root}/{dist_dir}/{target}."""
    return project_root / dist_dir / target
