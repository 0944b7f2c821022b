"""Docker helpers: toolchain Dockerfile generation and per-target image builds."""

from .build_image import build_image_command
from .build_image import run as run_build_image
from .generate_dockerfile import generate_dockerfile
from .generate_dockerfile import run as run_generate_dockerfile

__all__ = [
    "build_image_command",
    "generate_dockerfile",
    "run_build_image",
    "run_generate_dockerfile",
]
