"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install blessed
"""

import sys

from termsnake.controller import run_app


def main() -> int:
    return run_app()


if __name__ == "__main__":
    sys.exit(main())
