"""Configuration schema and loading system for box nets.

Public API:
    - BoxConfiguration: Root configuration model
    - CuboidBoxConfig, CubeBoxConfig, LidConfig, VinylBoxConfig: Box variants
    - OutputConfig: Output file and format model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command line overrides
    - validate_config: Geometry checks beyond the schema
    - config_to_parameters / config_to_layout: Build domain objects

Example:
    >>> from pathlib import Path
    >>> from boxnets.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("shoebox.json"))
    ...     print(f"Box type: {config.box.type}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from boxnets.application.config.adapter import config_to_layout, config_to_parameters
from boxnets.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from boxnets.application.config.merger import merge_config_with_cli
from boxnets.application.config.schema import (
    DEFAULT_CUBE_LID_HEIGHT,
    DEFAULT_GLUE_FLAP,
    DEFAULT_LID_HEIGHT,
    DEFAULT_THICKNESS,
    SUPPORTED_VERSIONS,
    BaseBoxConfig,
    BoxConfig,
    BoxConfiguration,
    CubeBoxConfig,
    CuboidBoxConfig,
    LidConfig,
    OutputConfig,
    VinylBoxConfig,
)
from boxnets.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "BaseBoxConfig",
    "BoxConfig",
    "BoxConfiguration",
    "ConfigError",
    "CubeBoxConfig",
    "CuboidBoxConfig",
    "DEFAULT_CUBE_LID_HEIGHT",
    "DEFAULT_GLUE_FLAP",
    "DEFAULT_LID_HEIGHT",
    "DEFAULT_THICKNESS",
    "LidConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "VinylBoxConfig",
    "config_to_layout",
    "config_to_parameters",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
