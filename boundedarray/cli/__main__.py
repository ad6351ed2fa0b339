"""
BoundedArray CLI entry point.

Usage:
    python -m boundedarray.cli demo
    python -m boundedarray.cli render <size> [--step K] [--set I=V ...]
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
