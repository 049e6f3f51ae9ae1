"""
CLI entry point for the toyrobot command.

This module provides the command-line interface for running the simulator.
"""

import sys

from toyrobot.simulator.runner import main


def main_entry():
    """Entry point for the toyrobot command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
