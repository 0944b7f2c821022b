"""In-container release builds of gdrive for a cross target."""

from .runner import (
    build_command,
    container_script,
    resolve_output_dir,
    write_sha256,
)
from .runner import run as run_build

__all__ = [
    "build_command",
    "container_script",
    "resolve_output_dir",
    "run_build",
    "write_sha256",
]
