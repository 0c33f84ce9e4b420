"""Entry point for running blaunch as a module."""

import sys

from blaunch.cli import main

if __name__ == "__main__":
    sys.exit(main())
