# reading_import/adapters/cli/__init__.py

"""CLI adapter for the reading import tool"""

# Local imports
from reading_import.adapters.cli.main import main
from reading_import.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
