# main.py
"""
Render the reference sphere scene with the Monte Carlo path tracer.

Usage:
    pathtracer [--quality {preview,balanced,final}] [--output FILE] [options]

Example:
    pathtracer --quality preview --seed 7 --output spheres.ppm --png spheres.png
"""
import argparse
import logging
import sys
import time
from typing import List, Optional

from config import DEFAULT_OUTPUT, DEFAULT_QUALITY, EXECUTORS, QUALITY_LEVELS, RenderSettings
from log import setup_logging
from renderer.image import save_png, write_ppm
from renderer.scheduler import render
from scene import create_camera, create_world

logger = logging.getLogger("pathtracer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Path trace a fixed scene of spheres into a P3 pixmap.",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT,
                        help=f"Output PPM file (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--png", default=None,
                        help="Also save the image to this file through Pillow")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help=f"Preset for width, samples and bounces (default: {DEFAULT_QUALITY})")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int,
                        help="Image height in pixels (default: width / (16/9))")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum bounces per path")
    parser.add_argument("--seed", type=int,
                        help="Seed for reproducible output (default: random, logged)")
    parser.add_argument("--workers", type=int, help="Worker pool size (default: executor's choice)")
    parser.add_argument("--executor", choices=EXECUTORS, default="thread",
                        help="Run pixel tasks on threads or processes (default: thread)")
    parser.add_argument("--aperture", type=float, default=2.0,
                        help="Lens aperture; 0 gives a pinhole camera (default: 2.0)")
    parser.add_argument("--mirror-lens-offset", action="store_true",
                        help="Aim depth-of-field rays at target - origin + offset")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors and the timing summary")

    args = parser.parse_args(argv)
    try:
        args.settings = RenderSettings.from_quality(
            args.quality,
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.max_depth,
            seed=args.seed,
            workers=args.workers,
            executor=args.executor,
        )
    except ValueError as e:
        parser.error(str(e))
    if args.aperture < 0:
        parser.error(f"aperture must not be negative, got {args.aperture}")
    return args


def _log_progress(done: int, total: int) -> None:
    if done == total or done % max(1, total // 10) == 0:
        logger.debug("%d/%d pixels (%.0f%%)", done, total, 100.0 * done / total)


def run(args: argparse.Namespace) -> int:
    settings: RenderSettings = args.settings

    # Fail before doing any rendering work if the output cannot be written.
    try:
        output_file = open(args.output, "w")
    except OSError as e:
        logger.error("Error opening the output file %s: %s", args.output, e)
        return 1

    with output_file:
        world = create_world()
        camera = create_camera(settings.aspect_ratio, args.aperture, args.mirror_lens_offset)

        start = time.perf_counter()
        image = render(world, camera, settings, progress=_log_progress)
        write_ppm(output_file, image, settings.width, settings.height)
        elapsed = time.perf_counter() - start

    if args.png:
        try:
            save_png(args.png, image, settings.width, settings.height)
        except (OSError, ValueError) as e:
            logger.error("Error saving %s: %s", args.png, e)
            return 1

    logger.info("Done in %.2f seconds, saved to %s", elapsed, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    setup_logging(level)
    # The elapsed-time summary survives --quiet.
    logger.setLevel(min(level, logging.INFO))
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
