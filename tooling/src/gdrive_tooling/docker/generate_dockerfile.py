"""Generate the toolchain Dockerfile consumed by build-image."""

from __future__ import annotations

import sys
from pathlib import Path

from gdrive_tooling.config import resolve_layout

DOCKERFILE_TEMPLATE = """\
# Cross-compilation toolchain for gdrive.
# Built by `gdrive-tooling build-image <target>`, which passes both args.
ARG BASE_IMAGE
FROM ${BASE_IMAGE}

ARG TARGET
ENV CARGO_BUILD_TARGET=${TARGET}

RUN rustup target add ${TARGET}

WORKDIR {{workdir}}
"""


def render_dockerfile(layout: dict[str, str] | None = None) -> str:
    cfg = resolve_layout(layout)
    return DOCKERFILE_TEMPLATE.replace("{{workdir}}", cfg["workdir"])


def generate_dockerfile(
    project_root: Path | None = None,
    output_path: Path | None = None,
    layout: dict[str, str] | None = None,
    force: bool = False,
) -> Path:
    """
    Write the toolchain Dockerfile to project_root/{layout dockerfile} unless output_path is set.
    Raises FileExistsError when the file exists and force is False.
    Returns the output path.
    """
    root = Path(project_root) if project_root is not None else Path.cwd()
    cfg = resolve_layout(layout)
    out = output_path or (root / cfg["dockerfile"])
    if not out.is_absolute():
        out = root / out
    if out.exists() and not force:
        msg = f"{out} already exists (use --force to overwrite)"
        raise FileExistsError(msg)

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_dockerfile(cfg))
    print(f"✅ Generated: {out}")
    return out


def run(
    project_root: Path | None = None,
    output_path: Path | None = None,
    layout: dict[str, str] | None = None,
    force: bool = False,
) -> int:
    """CLI entry: generate Dockerfile. Returns 0 on success, 1 on error."""
    try:
        generate_dockerfile(project_root, output_path=output_path, layout=layout, force=force)
        return 0
    except OSError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
