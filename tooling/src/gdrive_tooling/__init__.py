"""Cross-build tooling for gdrive: toolchain images and in-container release builds."""

__version__ = "0.1.0"
