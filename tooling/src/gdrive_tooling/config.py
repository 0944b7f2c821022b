"""Project layout for cross builds. Paths are relative to project_root.

An optional gdrive-build.yaml in the project root overrides the defaults, e.g.

    dockerfile: docker/Dockerfile.cross
    dist_dir: out
    image_prefix: my-gdrive-build

The target table itself is fixed (see gdrive_tooling.targets).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from gdrive_tooling.targets import BINARY_NAME, IMAGE_PREFIX

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "gdrive-build.yaml"

DEFAULT_LAYOUT: dict[str, str] = {
    "dockerfile": "Dockerfile",
    "context": ".",
    "image_prefix": IMAGE_PREFIX,
    "binary_name": BINARY_NAME,
    "dist_dir": "dist",
    "workdir": "/work",
    "out_mount": "/out",
    "docker": "docker",
}


class ConfigError(ValueError):
    """gdrive-build.yaml could not be read or has the wrong shape."""


def resolve_layout(layout: dict[str, Any] | None) -> dict[str, str]:
    """Return layout dict with defaults filled. Unknown keys are dropped."""
    if layout is None:
        return dict(DEFAULT_LAYOUT)
    out = dict(DEFAULT_LAYOUT)
    out.update({k: str(v) for k, v in layout.items() if k in out and v is not None})
    return out


def load_layout(project_root: Path, config_path: Path | None = None) -> dict[str, str]:
    """Load layout from config_path, or project_root/gdrive-build.yaml when present.

    An explicit config_path must exist. Raises ConfigError on unreadable or invalid files.
    """
    explicit = config_path is not None
    path = config_path if config_path is not None else project_root / CONFIG_FILE_NAME
    if not path.is_absolute():
        path = project_root / path
    if not path.exists():
        if explicit:
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return resolve_layout(None)

    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Could not read {path}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping at top level"
        raise ConfigError(msg)

    unknown = sorted(set(data) - set(DEFAULT_LAYOUT))
    if unknown:
        log.debug("Ignoring unknown keys in %s: %s", path, ", ".join(map(str, unknown)))
    layout = resolve_layout(data)
    log.debug("Loaded layout from %s: %s", path, layout)
    return layout
