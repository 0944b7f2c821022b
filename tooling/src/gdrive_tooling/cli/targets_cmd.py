"""`gdrive-tooling targets`: list supported targets, base images and tags."""

import sys

from gdrive_tooling.config import resolve_layout
from gdrive_tooling.targets import DEFAULT_TARGET, image_tag, resolve_base_image, supported_targets


def run_targets_argv(argv: list[str] | None = None, layout: dict[str, str] | None = None) -> None:
    if argv:
        print(f"Error: targets takes no arguments (got: {' '.join(argv)})", file=sys.stderr)
        sys.exit(1)
    prefix = resolve_layout(layout)["image_prefix"]
    for target in supported_targets():
        marker = " (default)" if target == DEFAULT_TARGET else ""
        print(f"{target}{marker}")
        print(f"  base image: {resolve_base_image(target)}")
        print(f"  image tag:  {image_tag(target, prefix)}")
    sys.exit(0)
