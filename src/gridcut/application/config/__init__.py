"""Configuration schema and loading system for layout requests.

Public API:
    - LayoutConfiguration: Root configuration model
    - SheetSizeConfig: Sheet dimensions or preset
    - PieceSizeConfig: Piece dimensions
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_input: Convert a configuration to a LayoutInput
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from gridcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("layout.json"))
    ...     print(f"Piece: {config.piece.width}x{config.piece.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from gridcut.application.config.adapter import config_to_input, resolve_preset_size
from gridcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from gridcut.application.config.merger import merge_config_with_cli
from gridcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    LayoutConfiguration,
    OutputConfig,
    PieceSizeConfig,
    SheetSizeConfig,
)
from gridcut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "LayoutConfiguration",
    "OutputConfig",
    "PieceSizeConfig",
    "SheetSizeConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "resolve_preset_size",
    "validate_config",
]
