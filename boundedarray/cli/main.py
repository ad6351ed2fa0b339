"""
BoundedArray CLI — Demonstration Interface.

Commands:
    boundedarray demo                          — Run the walkthrough
    boundedarray render SIZE [--step K]
                             [--set I=V ...]   — Print one array

Output on stdout is exactly what BoundedArray.render() produces, so it
can be compared byte for byte. Logging goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..bounded import BoundedArray
from ..errors import IndexOutOfBoundsError
from .demo import fill_with_step, run_demo


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


# =============================================================================
# ARGUMENT PARSING HELPERS
# =============================================================================

def parse_assignment(text: str) -> tuple[int, int]:
    """Parse an INDEX=VALUE pair from the command line."""
    index_text, sep, value_text = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"expected INDEX=VALUE, got '{text}'"
        )
    try:
        return int(index_text), int(value_text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"INDEX and VALUE must be integers, got '{text}'"
        )


def configure_logging(level_name: str) -> None:
    """Send log records to stderr at the requested level."""
    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_demo(args: argparse.Namespace) -> int:
    """Run the demonstration sequence."""
    run_demo()
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Build an array from the arguments and print its rendering."""
    array = BoundedArray(args.size)
    logger.info("Built array of size %d", array.size())

    try:
        if args.step is not None:
            fill_with_step(array, args.step)
        for index, value in args.assignments:
            array[index] = value
    except (IndexOutOfBoundsError, OverflowError) as e:
        print(f"Exception: {e}")
        return 1

    sys.stdout.write(array.render())
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="boundedarray",
        description="BoundedArray — fixed-size, bounds-checked integer arrays",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the demonstration sequence",
    )
    demo_parser.set_defaults(func=cmd_demo)

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        help="Build an array and print its rendering",
    )
    render_parser.add_argument(
        "size",
        type=int,
        help="Number of elements",
    )
    render_parser.add_argument(
        "--step",
        type=int,
        default=None,
        help="Fill every element with index * STEP",
    )
    render_parser.add_argument(
        "--set",
        dest="assignments",
        type=parse_assignment,
        action="append",
        default=[],
        metavar="INDEX=VALUE",
        help="Overwrite one element (repeatable)",
    )
    render_parser.set_defaults(func=cmd_render)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
