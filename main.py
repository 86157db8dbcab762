#!/usr/bin/env python3
"""
Command-line entry point for Match2Metrics.

Usage:
    python main.py analyze --match-log match.log --summary summary.txt
    python main.py history --runs-dir runs/
"""

import sys

from match2metrics.cli import main

if __name__ == "__main__":
    sys.exit(main())
