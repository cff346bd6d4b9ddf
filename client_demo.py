#!/usr/bin/env python3
#
# PROJECT: raykernel
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from raykernel.config import DemoConfig
from raykernel.demo import main as run_demo
from raykernel.logging_config import setup_logging


def parse_args(argv=None):
    """CLI argument parser. Defaults come from DemoConfig.from_env()."""
    defaults = DemoConfig.from_env()
    epilog = """\
examples:
  %(prog)s                                  1000x1000 trajectory to output.ppm
  %(prog)s --width 300 --height 200 --scale 8
  %(prog)s --steps 400 --color #FF8800 -o arc.ppm
  %(prog)s -v --log-file demo.log           Log every position
"""
    parser = argparse.ArgumentParser(
        description="Projectile demo for the raykernel tuple/canvas kernel",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Canvas width in pixels (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Canvas height in pixels (default: {defaults.height})")
    parser.add_argument("--steps", type=int, default=defaults.steps,
                        help=f"Number of simulation ticks (default: {defaults.steps})")
    parser.add_argument("--scale", type=float, default=defaults.scale,
                        help=f"Pixels per world unit (default: {defaults.scale})")
    parser.add_argument("-o", "--output", default=defaults.output,
                        help=f"Output PPM path (default: {defaults.output})")
    parser.add_argument("--color", default=defaults.color,
                        help=f"Trajectory color in hex #RRGGBB (default: {defaults.color})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every projectile position")
    parser.add_argument("--log-file", default=None,
                        help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    try:
        config = DemoConfig(width=args.width, height=args.height,
                            steps=args.steps, scale=args.scale,
                            output=args.output, color=args.color)
        run_demo(config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
