"""Command-line entry point: pick an application and run its frame loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .combined_app import CombinedSteeringApp
from .flocking_app import FlockingApp
from .sandbox import SandboxApp
from .steering_app import SteeringApp


class App(Protocol):
    def start(self) -> None: ...

    def update(self, dt: float) -> None: ...


@dataclass
class WindowParams:
    """Parameters of the window the application runs in."""

    window_title: str = "AI Elite Framework"
    width: int = 901
    height: int = 451
    is_resizable: bool = False


APPS: dict[str, Callable[[], App]] = {
    "sandbox": SandboxApp,
    "steering": SteeringApp,
    "combined": CombinedSteeringApp,
    "flocking": FlockingApp,
}

DEFAULT_APP = "flocking"
DEFAULT_FRAMES = 60
DEFAULT_DT = 1.0 / 60.0


def parse_window_position(argv: Sequence[str]) -> tuple[int, int]:
    """Read `-x N` and `-y N` from the arguments; -1 where a value is absent.

    A flag without a following value is ignored; a value that is not an
    integer raises ValueError.
    """
    x = y = -1
    args = list(argv)
    for flag, value in zip(args, args[1:]):
        if flag == "-x":
            x = int(value)
        elif flag == "-y":
            y = int(value)
    return x, y


def create_app(name: str) -> App:
    """Create the application registered under `name` (case-insensitive)."""
    factory = APPS.get(name.lower())
    if factory is None:
        known = ", ".join(sorted(APPS))
        raise ValueError(f"unknown application {name!r}; choose one of: {known}")
    return factory()


def run(app: App, frames: int, dt: float) -> App:
    """Start the application and step it for a number of fixed-length frames."""
    if frames < 0:
        raise ValueError("the number of frames cannot be negative")
    app.start()
    for _ in range(frames):
        app.update(dt)
    return app


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steerai", description="Run a steering-behaviour application headless."
    )
    parser.add_argument(
        "--app", choices=sorted(APPS), default=DEFAULT_APP, help="application to run"
    )
    parser.add_argument(
        "--frames", type=int, default=DEFAULT_FRAMES, help="number of frames to simulate"
    )
    parser.add_argument(
        "--dt", type=float, default=DEFAULT_DT, help="length of one frame in seconds"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args, rest = parser.parse_known_args(sys.argv[1:] if argv is None else list(argv))

    try:
        x, y = parse_window_position(rest)
    except ValueError as exc:
        parser.error(f"invalid window position: {exc}")

    params = WindowParams()
    params.window_title += " [RELEASE]"
    print(f"{params.window_title} ({params.width}x{params.height})")
    if x != -1 and y != -1:
        print(f"Window position: {x}, {y}")

    try:
        run(create_app(args.app), args.frames, args.dt)
    except (ValueError, RuntimeError) as exc:
        print(f"{exc} Error:", file=sys.stderr)
        return 1

    print(f"Ran {args.frames} frames of {args.app}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())