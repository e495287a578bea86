"""Configuration settings for paramshape."""

from pathlib import Path

from pydantic import BaseModel, Field


class StyleConfig(BaseModel):
    """Fill and stroke a shape is painted with.

    Implements the StyleQuery interface that shapes consult for hit
    testing, stroke-aware bounds and draw decisions.
    """

    fill_color: str | None = Field(
        default=None,
        description="Fill color (None = no fill)",
    )
    stroke_color: str | None = Field(
        default=None,
        description="Stroke color (None = no stroke)",
    )
    stroke_width: float = Field(
        default=1.0,
        ge=0.0,
        description="Stroke width, centered on the outline",
    )

    def has_fill(self) -> bool:
        return self.fill_color is not None

    def has_stroke(self) -> bool:
        """A stroke needs a color and a positive width."""
        return self.stroke_color is not None and self.stroke_width > 0

    def get_stroke_width(self) -> float:
        return self.stroke_width


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ParamShapeSettings(BaseModel):
    """Main application settings."""

    style: StyleConfig = Field(default_factory=StyleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ParamShapeSettings:
    """Get default application settings."""
    return ParamShapeSettings()
