#!/usr/bin/env python3
"""
Reading Import Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m reading_import
"""

# Local imports
from reading_import.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
