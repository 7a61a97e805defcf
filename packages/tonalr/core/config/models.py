"""Configuration models for tonalr."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tonalr.core.utils.math import clamp

WHITE_LUMINANCE_USER_MAX = 1000
# ~200 nits, divisible by the slider step (decodes to 199.526)
WHITE_LUMINANCE_USER_DEFAULT = 425


class TunableParameters(BaseModel):
    """User-tunable inputs of one theme generation pass.

    Out-of-range values are clamped to the nearest valid bound rather than
    rejected, so a bad stored setting can never block theme generation.

    Example:
        >>> TunableParameters(white_luminance_user=5000).white_luminance_user
        1000
        >>> TunableParameters(chroma_factor=-1.0).chroma_factor
        0.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    chroma_factor: float = Field(
        default=1.0,
        description="Multiplier applied to every target chroma and to the seed chroma",
    )
    white_luminance_user: int = Field(
        default=WHITE_LUMINANCE_USER_DEFAULT,
        description="White luminance slider position (0-1000, inverse log scale)",
    )
    accurate_shades: bool = Field(
        default=True,
        description="Gamut-map by chroma reduction (True) or channel clamping (False)",
    )
    linear_lightness: bool = Field(
        default=False,
        description="Use linear ZCAM lightness instead of CIELAB-matched lightness",
    )
    custom_color: bool = Field(
        default=False,
        description="Use color_override as the seed instead of the wallpaper color",
    )
    color_override: int | None = Field(
        default=None,
        description="Explicit seed color as 0xRRGGBB",
    )

    @field_validator("chroma_factor", mode="before")
    @classmethod
    def clamp_chroma_factor(cls, v: Any) -> float:
        """Negative chroma factors collapse to zero."""
        return max(0.0, float(v))

    @field_validator("white_luminance_user", mode="before")
    @classmethod
    def clamp_white_luminance(cls, v: Any) -> int:
        """Clamp slider position into [0, WHITE_LUMINANCE_USER_MAX]."""
        return int(clamp(int(v), 0, WHITE_LUMINANCE_USER_MAX))

    @field_validator("color_override", mode="before")
    @classmethod
    def mask_color_override(cls, v: Any) -> int | None:
        """Drop alpha bits, so signed ARGB values keep their RGB part."""
        if v is None:
            return None
        return int(v) & 0xFFFFFF

    def resolve_seed(self, wallpaper_color: int) -> int:
        """Pick the seed color: the override when enabled, else the wallpaper color.

        Args:
            wallpaper_color: Primary wallpaper color as 0xRRGGBB

        Returns:
            Seed color as 0xRRGGBB
        """
        if self.custom_color and self.color_override is not None:
            return self.color_override
        return wallpaper_color & 0xFFFFFF


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False
    filename: str | None = None


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    tunables: TunableParameters = TunableParameters()
    wallpaper_color: int | None = Field(
        default=None,
        description="Fallback seed when no wallpaper color is supplied (0xRRGGBB)",
    )

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.yaml")
