"""
Entry point for running daftarhadir as a module.

Usage:
    python -m daftarhadir render request.json --output-dir out/
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
