#!/usr/bin/env python3
"""Render one of the built-in demonstration scenes.

Usage:
    python examples/render_scene.py [options]

Options:
    --scene NAME        Scene to render: shadows, materials, shapes (default: materials)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --depth DEPTH       Reflection/refraction recursion depth (default: 5)
    --workers N         Worker processes (default: one per CPU)
    --output OUTPUT     Output file, .png or .ppm (default: scene.png)
    --quiet             Suppress the progress bar
    --verbose           Log per-row detail

Example:
    python examples/render_scene.py --scene shapes --width 320 --height 160
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import taichi as ti

from whitted.core.render import RenderSettings, render
from whitted.preview.export import save_png, save_ppm
from whitted.scene.demo import SCENES
from whitted.scene.world import DEFAULT_DEPTH

logger = logging.getLogger("render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a built-in demonstration scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="materials",
        help="Scene to render (default: materials)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Reflection/refraction recursion depth (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: one per CPU)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file, .png or .ppm (default: scene.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the progress bar",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-row detail",
    )
    return parser.parse_args()


def render_scene(
    scene: str,
    width: int,
    height: int,
    output_path: str,
    *,
    depth: int = DEFAULT_DEPTH,
    workers: int | None = None,
    progress: bool = True,
) -> Path:
    """Render a named demo scene and save it.

    Args:
        scene: Key into ``whitted.scene.demo.SCENES``.
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Destination; the suffix selects PPM or PNG.
        depth: Recursion budget for reflection and refraction.
        workers: Worker process count, or None for one per CPU.
        progress: Whether to show a progress bar.

    Returns:
        Path to the saved image file.
    """
    world, camera = SCENES[scene](width=width, height=height)
    settings = RenderSettings(depth=depth, workers=workers, progress=progress)

    logger.info("Scene %r: %d object(s), %d light(s)", scene, len(world.objects), len(world.lights))
    canvas = render(world, camera, settings)

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        return save_ppm(canvas, output_file)
    return save_png(canvas, output_file)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Only the output encoder runs on Taichi
    ti.init(arch=ti.cpu)

    try:
        output = render_scene(
            args.scene,
            args.width,
            args.height,
            args.output,
            depth=args.depth,
            workers=args.workers,
            progress=not args.quiet,
        )
    except ValueError as e:
        logger.error("Render failed: %s", e)
        return 1

    logger.info("Saved to: %s", output.absolute())
    return 0


if __name__ == "__main__":
    sys.exit(main())
