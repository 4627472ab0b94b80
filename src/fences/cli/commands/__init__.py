"""CLI command implementations for the fences application.

- validate: Validate a configuration file
"""

from fences.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
