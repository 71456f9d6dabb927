#!/usr/bin/env python3
"""
Demonstration program for pointgeometry

Builds two points, adds them and reports distances to the origin.
Run with `python -m pointgeometry.demo`.
"""

import argparse
import logging
import sys

from .log import setup_logging, get_logger
from .points import create_point, display_point, distance_to_origin, add_points

logger = get_logger(__name__)


def run_demo():
    """Print the demonstration output to stdout"""
    p1 = create_point(3.0, 4.0)
    p2 = create_point(-1.0, 2.5)

    print("Point p1: ", end="")
    display_point(p1)

    print("Point p2: ", end="")
    display_point(p2)

    dist = distance_to_origin(p1)
    print(f"Distance of p1 from origin: {dist:.2f}")

    sum_point = add_points(p1, p2)
    print("Sum of p1 and p2: ", end="")
    display_point(sum_point)

    dist = distance_to_origin(sum_point)
    print(f"Distance of sumPoint from origin: {dist:.2f}")
    logger.debug("Sum point %r at distance %r", sum_point, dist)


def main(argv=None):
    parser = argparse.ArgumentParser(description="2D point geometry demonstration")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
