"""Tests for gdrive_tooling.targets."""

from pathlib import Path

import pytest

from gdrive_tooling.targets import (
    DEFAULT_TARGET,
    TARGET_BASE_IMAGES,
    UnsupportedTargetError,
    artifact_path,
    default_output_dir,
    image_tag,
    is_supported,
    resolve_base_image,
    supported_targets,
)


class TestResolveBaseImage:
    def test_aarch64(self) -> None:
        assert (
            resolve_base_image("aarch64-unknown-linux-musl")
            == "messense/rust-musl-cross:aarch64-musl"
        )

    def test_armv7(self) -> None:
        assert (
            resolve_base_image("armv7-unknown-linux-musleabihf")
            == "messense/rust-musl-cross:armv7-musleabihf"
        )

    def test_unsupported_raises_with_key_in_message(self) -> None:
        with pytest.raises(UnsupportedTargetError) as exc:
            resolve_base_image("x86_64-pc-windows-msvc")
        assert exc.value.target == "x86_64-pc-windows-msvc"
        assert str(exc.value) == "Unsupported target: x86_64-pc-windows-msvc"

    def test_unsupported_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_base_image("")


class TestImageTag:
    @pytest.mark.parametrize("target", sorted(TARGET_BASE_IMAGES))
    def test_tag_is_prefix_colon_target(self, target: str) -> None:
        assert image_tag(target) == f"gdrive-build:{target}"

    def test_custom_prefix(self) -> None:
        assert image_tag("armv7-unknown-linux-musleabihf", "ci") == "ci:armv7-unknown-linux-musleabihf"


class TestTargetTable:
    def test_default_target_is_supported(self) -> None:
        assert DEFAULT_TARGET == "aarch64-unknown-linux-musl"
        assert is_supported(DEFAULT_TARGET)

    def test_supported_targets_sorted(self) -> None:
        assert supported_targets() == [
            "aarch64-unknown-linux-musl",
            "armv7-unknown-linux-musleabihf",
        ]

    def test_is_supported_false_for_unknown(self) -> None:
        assert not is_supported("riscv64gc-unknown-linux-gnu")


class TestPaths:
    def test_artifact_path(self) -> None:
        assert (
            artifact_path("armv7-unknown-linux-musleabihf")
            == "target/armv7-unknown-linux-musleabihf/release/gdrive"
        )

    def test_default_output_dir(self, tmp_path: Path) -> None:
        assert default_output_dir(tmp_path, DEFAULT_TARGET) == tmp_path / "dist" / DEFAULT_TARGET
