"""
Main entry point for running herbst3 as a module.

Usage:
    python -m herbst3 shift right
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
