"""
Pydantic schemas for configuration validation.

Provides type-safe, declarative validation with clear error messages.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.constants import (
    BREED_CATALOG,
    DEFAULT_BUFFER_CAPACITY,
    DEFAULT_CAPTURE_COOLDOWN_MS,
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_GALLERY_DIR,
    DEFAULT_INPUT_SIZE,
    DEFAULT_SNAPSHOT_DIR,
    DEFAULT_SNAPSHOT_INTERVAL,
    DEFAULT_TARGET_CLASS,
)


class StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class DetectionConfig(StrictModel):
    """Detection settings."""

    model_file: str = Field(default="yolov8n.pt", description="YOLO detection model (.pt)")
    target_class: str = Field(default=DEFAULT_TARGET_CLASS, min_length=1)
    confidence_threshold: float = Field(
        default=DEFAULT_CONFIDENCE_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Detections must score strictly above this",
    )

    @field_validator("model_file")
    @classmethod
    def validate_model_file(cls, v: str) -> str:
        if not v.endswith(".pt"):
            raise ValueError("Model file must be .pt format")
        return v


class ClassifierConfig(StrictModel):
    """Primary and fallback classification models."""

    primary_model: str | None = Field(default="yolov8m-cls.pt")
    fallback_model: str | None = Field(default="yolov8n-cls.pt")
    top_k: int = Field(default=5, ge=1)


class CaptureConfig(StrictModel):
    """Capture throttling and history settings."""

    cooldown_ms: int = Field(default=DEFAULT_CAPTURE_COOLDOWN_MS, ge=0)
    buffer_capacity: int = Field(default=DEFAULT_BUFFER_CAPACITY, gt=0)
    input_size: int = Field(default=DEFAULT_INPUT_SIZE, gt=0)


class CatalogConfig(StrictModel):
    """Ordered category catalog that labels are hashed onto."""

    categories: list[str] = Field(default_factory=lambda: list(BREED_CATALOG))

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("Catalog must contain at least one category")
        if any(not c for c in v):
            raise ValueError("Catalog categories must be non-empty")
        if len(set(v)) != len(v):
            raise ValueError("Catalog categories must be unique")
        return v


class CameraConfig(StrictModel):
    """Camera configuration."""

    url: str = Field(default="0", min_length=1, description="Stream URL or device index")


class OutputConfig(StrictModel):
    """Persisted output. A null directory disables that output."""

    gallery_dir: str | None = Field(
        default=DEFAULT_GALLERY_DIR, description="Stills of the most recent captures"
    )
    snapshot_dir: str | None = Field(
        default=DEFAULT_SNAPSHOT_DIR, description="Annotated latest.jpg location"
    )
    snapshot_interval: int = Field(default=DEFAULT_SNAPSHOT_INTERVAL, ge=1)


class RuntimeConfig(StrictModel):
    """Runtime configuration."""

    default_duration_minutes: float = Field(default=60.0, gt=0)


class Config(StrictModel):
    """Complete configuration schema."""

    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    capture: CaptureConfig = Field(default_factory=CaptureConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


def validate_config_pydantic(config: dict) -> Config:
    """
    Validate configuration using Pydantic.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated Config object

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return Config(**config)
