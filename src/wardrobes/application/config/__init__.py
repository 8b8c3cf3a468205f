"""Configuration schema and loading system for wardrobe specifications.

This package provides JSON-based configuration loading and validation for
wardrobe specifications and edit scripts. It includes Pydantic models for
schema validation, a loader with comprehensive error handling, an adapter
to the domain model, and layout invariant checks.

Public API:
    - WardrobeConfigSchema: Root configuration model
    - WardrobeConfig: Wardrobe dimensions and sections
    - SectionConfig: Section configuration model
    - ColumnConfig: Column configuration model
    - LimitsConfig: Layout limits model
    - EditScriptSchema: Edit script model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_edit_script: Load an edit script from a JSON file
    - ConfigError: Exception for configuration errors
    - config_to_wardrobe: Build the laid-out domain configuration
    - wardrobe_to_dict: Dump a domain configuration to the file format
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-wardrobe.json"))
    ...     print(config.wardrobe.shape)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_limits,
    config_to_wardrobe,
    wardrobe_to_dict,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_edit_script,
)
from wardrobes.application.config.schema import (
    SUPPORTED_VERSIONS,
    ColumnConfig,
    EditOperation,
    EditScriptSchema,
    LimitsConfig,
    SectionConfig,
    WardrobeConfig,
    WardrobeConfigSchema,
)
from wardrobes.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_layout,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ColumnConfig",
    "ConfigError",
    "EditOperation",
    "EditScriptSchema",
    "LimitsConfig",
    "SectionConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeConfig",
    "WardrobeConfigSchema",
    "check_layout",
    "config_to_limits",
    "config_to_wardrobe",
    "load_config",
    "load_config_from_dict",
    "load_edit_script",
    "validate_config",
    "wardrobe_to_dict",
]
