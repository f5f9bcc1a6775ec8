"""Viewer configuration sourced from environment and command line."""

import argparse
import os
from dataclasses import dataclass, replace

from geomlab.logs import resolve_log_level_name

# GL defaults shared by every lab scene
CAMERA_FOV = 1.13  # radians
CAMERA_NEAR_PLANE = 0.01
CAMERA_FAR_PLANE = 100.0
CAMERA_SPEED = 0.1
CAMERA_ROT_SPEED = 0.01
POINT_SIZE = 10.0
LINE_WIDTH = 3.0

DEFAULT_SCENE = "scenes/box.json"


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class AppConfig:
    width: int = 500
    height: int = 500
    title: str = "Geometry Lab"
    fps: int = 60
    log_level: str = "INFO"
    scenes: tuple[str, ...] = (DEFAULT_SCENE,)


def load_app_config() -> AppConfig:
    """Build the config from GEOMLAB_* environment variables."""
    scene = os.getenv("GEOMLAB_SCENE")
    return AppConfig(
        width=_int("GEOMLAB_WIDTH", 500),
        height=_int("GEOMLAB_HEIGHT", 500),
        fps=_int("GEOMLAB_FPS", 60),
        log_level=resolve_log_level_name(),
        scenes=(scene,) if scene else (DEFAULT_SCENE,),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geomlab",
        description="Render procedurally generated primitives from scene files.",
    )
    parser.add_argument("scenes", nargs="*", help="Scene JSON files (Tab cycles between them)")
    parser.add_argument("--width", type=int, help="Window width in pixels")
    parser.add_argument("--height", type=int, help="Window height in pixels")
    parser.add_argument("--fps", type=int, help="Frame rate cap")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def apply_args(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Command-line flags win over environment values."""
    changes = {}
    if args.scenes:
        changes["scenes"] = tuple(args.scenes)
    if args.width is not None:
        changes["width"] = args.width
    if args.height is not None:
        changes["height"] = args.height
    if args.fps is not None:
        changes["fps"] = args.fps
    if args.log_level:
        changes["log_level"] = args.log_level.strip().upper()
    return replace(config, **changes)
