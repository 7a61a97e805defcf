"""CIE 1931 XYZ tristimulus values, relative and absolute.

Relative XYZ is normalized so that the reference white has Y = 1.
Absolute XYZ carries photometric units (cd/m²). Converting between the two
always needs the luminance of the reference white; there is no implicit
scale of 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CieXyz:
    """Relative CIE XYZ (Y = 1 for the reference white)."""

    x: float
    y: float
    z: float

    def to_abs(self, luminance: float) -> CieXyzAbs:
        """Scale to absolute XYZ for a white of the given luminance (nits)."""
        return CieXyzAbs(
            x=self.x * luminance,
            y=self.y * luminance,
            z=self.z * luminance,
        )

    @classmethod
    def from_xy(cls, x: float, y: float) -> CieXyz:
        """Build a Y = 1 color from CIE xy chromaticity coordinates."""
        return cls(x=x / y, y=1.0, z=(1.0 - x - y) / y)


@dataclass(frozen=True)
class CieXyzAbs:
    """Absolute CIE XYZ in cd/m²."""

    x: float
    y: float
    z: float

    def to_rel(self, luminance: float) -> CieXyz:
        """Normalize to relative XYZ for a white of the given luminance (nits)."""
        return CieXyz(
            x=self.x / luminance,
            y=self.y / luminance,
            z=self.z / luminance,
        )


class Illuminants:
    """Standard illuminants as relative XYZ."""

    # CIE 1931 2° observer, sRGB white point chromaticity
    D65 = CieXyz.from_xy(0.3127, 0.3290)


__all__ = [
    "CieXyz",
    "CieXyzAbs",
    "Illuminants",
]
