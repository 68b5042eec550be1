"""
Configuration loading - file discovery, pointer files, environment
overrides and validation.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.constants import ENV_CAMERA_URL
from .schemas import Config, validate_config_pydantic

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "config.yaml"


class ConfigValidationError(Exception):
    """Raised when configuration cannot be loaded or fails validation."""


def find_config_file(config_path: str | None = None) -> Path | None:
    """
    Find config file in standard locations.

    Search order:
    1. Specified path (if provided)
    2. Current directory (config.yaml)
    3. ~/.config/bullseye/config.yaml

    Returns:
        Path to config file, or None when no file exists (defaults apply)

    Raises:
        ConfigValidationError: If an explicitly specified path does not exist
    """
    if config_path:
        specified = Path(config_path)
        if not specified.exists():
            raise ConfigValidationError(f"Specified config file not found: {config_path}")
        return specified

    search_paths = [
        Path.cwd() / DEFAULT_CONFIG_NAME,
        Path.home() / ".config" / "bullseye" / DEFAULT_CONFIG_NAME,
    ]
    for path in search_paths:
        if path.exists():
            logger.info(f"Using config: {path}")
            return path

    logger.info("No config file found - using defaults")
    return None


def read_config_file(config_file: Path) -> dict:
    """
    Read a YAML config file, following a pointer file if present.

    Supports pointer files: if the file only contains ``use: path/to/config.yaml``,
    that file is loaded instead (relative to the pointer's directory).
    """
    try:
        with open(config_file, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if isinstance(config, dict) and list(config.keys()) == ["use"]:
            pointer_path = Path(config_file).parent / config["use"]
            logger.info(f"Config pointer: {config_file} -> {pointer_path}")
            with open(pointer_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}

    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigValidationError(f"Cannot read config {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigValidationError(f"Config root must be a mapping: {config_file}")
    return config


def load_config_with_env(config: dict) -> dict:
    """
    Apply environment variable overrides.

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment variables applied
    """
    if ENV_CAMERA_URL in os.environ:
        logger.info(f"Using camera URL from environment: {ENV_CAMERA_URL}")
        config.setdefault("camera", {})["url"] = os.environ[ENV_CAMERA_URL]
    return config


def validate_config(config: dict) -> Config:
    """
    Validate a raw config dictionary.

    Raises:
        ConfigValidationError: With one line per validation problem
    """
    try:
        return validate_config_pydantic(config)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigValidationError(
            "Configuration validation failed:\n" + "\n".join(f"  - {p}" for p in problems)
        ) from e


def load_config(config_path: str | None = None) -> Config:
    """
    Locate, read, override and validate configuration.

    Args:
        config_path: Optional explicit path to a YAML config

    Returns:
        Validated Config

    Raises:
        ConfigValidationError: If config cannot be loaded or is invalid
    """
    config_file = find_config_file(config_path)
    raw = read_config_file(config_file) if config_file is not None else {}
    raw = load_config_with_env(raw)
    config = validate_config(raw)
    logger.info("Configuration validated")
    return config


def collect_warnings(config: Config) -> list[str]:
    """Non-fatal problems worth reporting before a run."""
    warnings = []
    model_path = Path(config.detection.model_file)
    if model_path.parent != Path(".") and not model_path.exists():
        warnings.append(f"Detection model not found: {config.detection.model_file}")
    if not config.classifier.primary_model and not config.classifier.fallback_model:
        warnings.append("No classifier configured - captures will be unclassified")
    if config.detection.confidence_threshold >= 1.0:
        warnings.append("confidence_threshold of 1.0 rejects every detection")
    return warnings


def print_validation_summary(config: Config) -> None:
    """Print a summary of validated configuration."""
    print("\n" + "=" * 70)
    print("CONFIGURATION SUMMARY")
    print("=" * 70)

    print("\nDetection:")
    print(f"  Model: {config.detection.model_file}")
    print(f"  Target class: {config.detection.target_class}")
    print(f"  Confidence: > {config.detection.confidence_threshold}")

    print("\nClassifier:")
    print(f"  Primary: {config.classifier.primary_model or 'none'}")
    print(f"  Fallback: {config.classifier.fallback_model or 'none'}")

    print("\nCapture:")
    print(f"  Cooldown: {config.capture.cooldown_ms} ms")
    print(f"  History: last {config.capture.buffer_capacity} captures")
    print(f"  Input size: {config.capture.input_size}px")

    print(f"\nCatalog: {len(config.catalog.categories)} categories")
    print(f"Camera: {config.camera.url}")

    print("\nOutput:")
    print(f"  Gallery: {config.output.gallery_dir or 'disabled'}")
    print(f"  Snapshot: {config.output.snapshot_dir or 'disabled'}")

    warnings = collect_warnings(config)
    if warnings:
        print("\nWarnings:")
        for warning in warnings:
            print(f"  - {warning}")

    print("\n" + "=" * 70 + "\n")
