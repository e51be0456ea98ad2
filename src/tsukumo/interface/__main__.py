"""
Run the tsukumo calculator CLI.

Usage:
    python -m tsukumo.interface
"""

from .cli import main

if __name__ == "__main__":
    main()
