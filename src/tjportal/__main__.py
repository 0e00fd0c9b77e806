"""
tjportal CLI entry point.

Usage:
    python -m tjportal list
    python -m tjportal show development
"""

from tjportal.cli import main

if __name__ == "__main__":
    main()
