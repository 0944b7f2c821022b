"""Pytest fixtures for gdrive tooling tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Crate-like project tree with a Dockerfile. Resolved, as the runner resolves paths."""
    root = tmp_path / "gdrive"
    root.mkdir()
    (root / "Cargo.toml").write_text('[package]\nname = "gdrive"\n')
    (root / "Dockerfile").write_text("ARG BASE_IMAGE\nFROM ${BASE_IMAGE}\n")
    return root.resolve()


@pytest.fixture
def fake_docker_run() -> Callable[..., Callable[..., MagicMock]]:
    """Factory for a subprocess.run side_effect that mimics the container copying gdrive to /out."""

    def factory(returncode: int = 0, produce: bool = True, content: bytes = b"\x7fELF"):
        def _run(cmd, cwd=None, **_kwargs):
            if produce and returncode == 0:
                out_mount = next(v for v in cmd if v.endswith(":/out"))
                (Path(out_mount[: -len(":/out")]) / "gdrive").write_bytes(content)
            return MagicMock(returncode=returncode)

        return _run

    return factory
