"""CLI command implementations for the gridcut application.

This package contains:
- validate: Validate a configuration file
- output_handlers: Console rendering and multi-format export
"""

from gridcut.cli.commands.output_handlers import (
    handle_multi_format_export,
    parse_formats,
    render_console_output,
)
from gridcut.cli.commands.validate import display_load_error, validate_command

__all__ = [
    "display_load_error",
    "handle_multi_format_export",
    "parse_formats",
    "render_console_output",
    "validate_command",
]
