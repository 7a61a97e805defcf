"""sRGB color values and their linear-light counterpart."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

import numpy as np

from tonalr.core.color.xyz import CieXyz
from tonalr.core.utils.math import clamp

# Linear sRGB -> relative XYZ (D65), IEC 61966-2-1
_LINEAR_SRGB_TO_XYZ = np.array(
    [
        [0.4123907992659595, 0.3575843393838780, 0.1804807884018343],
        [0.2126390058715104, 0.7151686787677559, 0.0721923153607337],
        [0.0193308187155918, 0.1191947797946259, 0.9505321522496608],
    ]
)
_XYZ_TO_LINEAR_SRGB = np.linalg.inv(_LINEAR_SRGB_TO_XYZ)

# Linear channels this far outside [0, 1] still count as displayable
GAMUT_EPSILON = 1e-4

_HEX_PATTERN = re.compile(r"^(?:#|0x)?([0-9a-fA-F]{6})$")


def _oetf(x: float) -> float:
    if abs(x) >= 0.0031308:
        return math.copysign(1.055 * abs(x) ** (1.0 / 2.4) - 0.055, x)
    return 12.92 * x


def _eotf(x: float) -> float:
    if abs(x) >= 0.04045:
        return math.copysign(((abs(x) + 0.055) / 1.055) ** 2.4, x)
    return x / 12.92


@dataclass(frozen=True)
class Srgb:
    """Gamma-encoded sRGB with float channels in [0, 1].

    Example:
        >>> Srgb.from_rgb8(0x4285F4).to_hex()
        '#4285f4'
    """

    r: float
    g: float
    b: float

    @classmethod
    def from_rgb8(cls, color: int) -> Srgb:
        """Build from a packed 0xRRGGBB integer. Alpha bits are ignored."""
        return cls(
            r=((color >> 16) & 0xFF) / 255.0,
            g=((color >> 8) & 0xFF) / 255.0,
            b=(color & 0xFF) / 255.0,
        )

    @classmethod
    def from_hex(cls, text: str) -> Srgb:
        """Parse ``#RRGGBB``, ``0xRRGGBB`` or ``RRGGBB``.

        Raises:
            ValueError: If the string is not a 24-bit hex color
        """
        match = _HEX_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Color must be #RRGGBB format, got '{text}'")
        return cls.from_rgb8(int(match.group(1), 16))

    def quantize(self) -> tuple[int, int, int]:
        """Round each channel to 8 bits, clamping into [0, 255]."""
        return (
            int(clamp(math.floor(self.r * 255.0 + 0.5), 0, 255)),
            int(clamp(math.floor(self.g * 255.0 + 0.5), 0, 255)),
            int(clamp(math.floor(self.b * 255.0 + 0.5), 0, 255)),
        )

    def to_rgb8(self) -> int:
        """Pack into a 0xRRGGBB integer."""
        r, g, b = self.quantize()
        return (r << 16) | (g << 8) | b

    def to_argb8(self) -> int:
        """Pack into a fully opaque 0xAARRGGBB integer."""
        return 0xFF000000 | self.to_rgb8()

    def to_hex(self) -> str:
        return f"#{self.to_rgb8():06x}"

    def to_linear(self) -> LinearSrgb:
        return LinearSrgb(r=_eotf(self.r), g=_eotf(self.g), b=_eotf(self.b))


@dataclass(frozen=True)
class LinearSrgb:
    """Linear-light sRGB. Channels may leave [0, 1] before gamut mapping."""

    r: float
    g: float
    b: float

    @classmethod
    def from_xyz(cls, xyz: CieXyz) -> LinearSrgb:
        r, g, b = _XYZ_TO_LINEAR_SRGB @ np.array([xyz.x, xyz.y, xyz.z])
        return cls(r=float(r), g=float(g), b=float(b))

    def to_xyz(self) -> CieXyz:
        x, y, z = _LINEAR_SRGB_TO_XYZ @ np.array([self.r, self.g, self.b])
        return CieXyz(x=float(x), y=float(y), z=float(z))

    def to_srgb(self) -> Srgb:
        return Srgb(r=_oetf(self.r), g=_oetf(self.g), b=_oetf(self.b))

    def is_in_gamut(self, epsilon: float = GAMUT_EPSILON) -> bool:
        """Check whether every channel lies within [0, 1] (plus epsilon)."""
        return all(-epsilon <= c <= 1.0 + epsilon for c in (self.r, self.g, self.b))

    def clamp(self) -> LinearSrgb:
        """Clamp each channel into [0, 1] independently."""
        return LinearSrgb(
            r=clamp(self.r, 0.0, 1.0),
            g=clamp(self.g, 0.0, 1.0),
            b=clamp(self.b, 0.0, 1.0),
        )


__all__ = [
    "GAMUT_EPSILON",
    "LinearSrgb",
    "Srgb",
]
