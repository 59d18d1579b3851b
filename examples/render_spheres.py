#!/usr/bin/env python3
"""Render one of the preset sphere scenes.

This script renders a preset scene through the axis-aligned pinhole camera
and saves the result with Pillow. Rendering runs on the CPU in pure Python,
so keep images small while experimenting.

Usage:
    python examples/render_spheres.py [options]

Options:
    --scene NAME          Preset scene: spheres or materials (default: spheres)
    --width WIDTH         Image width in pixels (default: 800)
    --antialiasing N      Extra jittered samples per pixel (default: 7)
    --bounces N           Maximum ray bounces (default: 50)
    --seed SEED           Random seed (default: fresh entropy)
    --output OUTPUT       Output file path (default: spheres.png)
    --quiet               Suppress progress output
    --verbose             Log per-row progress

Example:
    python examples/render_spheres.py --width 200 --antialiasing 3 --output tmp.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

from ray_tracing.camera.pinhole import Camera
from ray_tracing.config import RenderConfig
from ray_tracing.core.render import Renderer
from ray_tracing.preview.export import save_render
from ray_tracing.scene.presets import SCENES

logger = logging.getLogger("render_spheres")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    defaults = RenderConfig.reference()
    parser = argparse.ArgumentParser(
        description="Render a preset sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="spheres",
        help="Preset scene (default: spheres)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=defaults.image_width,
        help=f"Image width in pixels (default: {defaults.image_width})",
    )
    parser.add_argument(
        "--antialiasing",
        type=int,
        default=defaults.antialiasing,
        help=f"Extra jittered samples per pixel (default: {defaults.antialiasing})",
    )
    parser.add_argument(
        "--bounces",
        type=int,
        default=defaults.max_ray_bounces,
        help=f"Maximum ray bounces (default: {defaults.max_ray_bounces})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: fresh entropy)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="spheres.png",
        help="Output file path (default: spheres.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-row progress",
    )
    return parser.parse_args()


def render_scene(config: RenderConfig, scene: str, output_path: str, quiet: bool = False) -> Path:
    """Render a preset scene and save it to file.

    Args:
        config: Render configuration.
        scene: Name of the preset scene.
        output_path: Output file path; the extension selects the format.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    world = SCENES[scene]()
    camera = Camera.from_config(config)
    renderer = Renderer(camera, world, rng=np.random.default_rng(config.seed))

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            print(
                f"\r  Progress: {current}/{target} rows "
                f"({100.0 * current / target:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    renderer.render(callback=progress_callback)
    if not quiet:
        print()

    output_file = Path(output_path)
    save_render(renderer, output_file, gamma=config.gamma_correct)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = RenderConfig.from_width(
            args.width,
            antialiasing=args.antialiasing,
            max_ray_bounces=args.bounces,
            seed=args.seed,
        )
        render_scene(config, args.scene, args.output, quiet=args.quiet)
        return 0
    except (ValueError, OSError) as e:
        logger.error("Render failed: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.error("Render interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
