"""Command that loads a reanim file and lists the images it needs."""

from __future__ import annotations

import argparse

from pvzgame.animation import AnimationError, read_animation

DEFAULT_PATH = "resources/fire.reanim"


def main(argv: list[str] | None = None) -> int:
    """Load an animation and print its required resources; return an exit code."""
    parser = argparse.ArgumentParser(description="Load a reanim file and list its images.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="reanim file to load")
    args = parser.parse_args(argv)

    try:
        animation = read_animation(args.path)
    except AnimationError as exc:
        print(f"Failed to load animation. ({exc})")
        return 1

    print("Animation loaded successfully!")
    print("Required resource: ")
    for resource in animation.required_resources():
        print(f" >> {resource}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())