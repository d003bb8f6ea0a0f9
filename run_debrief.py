"""Convenience launcher for running the debrief from a checkout.

Usage:
  python run_debrief.py --dry-run
"""

import sys

from debrief_app.cli import main

if __name__ == "__main__":
    sys.exit(main())
