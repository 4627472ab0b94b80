"""Configuration schema and loading for fence calculations.

Public API:
    - FenceConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Raised when configuration cannot be loaded
    - config_to_input: Convert configuration to calculator input
    - merge_config_with_cli: Apply CLI overrides to configuration
    - validate_config: Advisory checks with CLI exit codes

Example:
    >>> from pathlib import Path
    >>> from fences.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("pool.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from fences.application.config.adapter import (
    config_to_input,
    config_to_settings,
    config_to_shape,
)
from fences.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from fences.application.config.merger import merge_config_with_cli
from fences.application.config.schema import (
    SUPPORTED_VERSIONS,
    FenceConfiguration,
    GateConfigSchema,
    GateHardwareConfigSchema,
    InlineShapeConfig,
    LShapeConfig,
    OutputConfig,
    RectangleShapeConfig,
    SettingsConfig,
    SideGateConfigSchema,
)
from fences.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "FenceConfiguration",
    "GateConfigSchema",
    "GateHardwareConfigSchema",
    "InlineShapeConfig",
    "LShapeConfig",
    "OutputConfig",
    "RectangleShapeConfig",
    "SUPPORTED_VERSIONS",
    "SettingsConfig",
    "SideGateConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_input",
    "config_to_settings",
    "config_to_shape",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
