"""CLI command implementations for the boxnets application.

This package contains:
- validate: Validate a configuration file
- output_handlers: Run a configuration and write the requested formats
"""

from boxnets.cli.commands.output_handlers import parse_formats, run_and_export
from boxnets.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "parse_formats", "run_and_export", "validate_command"]
