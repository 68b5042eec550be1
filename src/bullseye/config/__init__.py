"""
Configuration loading and validation.

- load_config: Find, read and validate config.yaml
- load_config_with_env: Apply environment variable overrides
- Config: Pydantic schema for the complete configuration
"""

from .loader import (
    ConfigValidationError,
    collect_warnings,
    find_config_file,
    load_config,
    load_config_with_env,
    print_validation_summary,
    read_config_file,
    validate_config,
)
from .schemas import (
    CaptureConfig,
    CatalogConfig,
    ClassifierConfig,
    Config,
    DetectionConfig,
    OutputConfig,
    validate_config_pydantic,
)

__all__ = [
    "CaptureConfig",
    "CatalogConfig",
    "ClassifierConfig",
    # Pydantic validation
    "Config",
    # Exception
    "ConfigValidationError",
    "DetectionConfig",
    "OutputConfig",
    "collect_warnings",
    # Config loading
    "find_config_file",
    "load_config",
    "load_config_with_env",
    "print_validation_summary",
    "read_config_file",
    "validate_config",
    "validate_config_pydantic",
]
