"""
Entry point for running bullseye as a module.

Usage:
    python -m bullseye [minutes]
"""

from .cli import main

if __name__ == "__main__":
    main()
