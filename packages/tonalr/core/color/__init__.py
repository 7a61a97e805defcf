"""Color representations and conversions.

Conversions chain through absolute CIE XYZ:

    Srgb <-> LinearSrgb <-> CieXyz <-> CieXyzAbs <-> Zcam
"""

from tonalr.core.color.gamut import ClippingMethod, clip_to_linear_srgb
from tonalr.core.color.lab import CieLab
from tonalr.core.color.rgb import LinearSrgb, Srgb
from tonalr.core.color.xyz import CieXyz, CieXyzAbs, Illuminants
from tonalr.core.color.zcam import (
    SURROUND_AVERAGE,
    SURROUND_DARK,
    SURROUND_DIM,
    ViewingConditions,
    Zcam,
)

__all__ = [
    # Representations
    "CieLab",
    "CieXyz",
    "CieXyzAbs",
    "LinearSrgb",
    "Srgb",
    "Zcam",
    # Appearance model
    "SURROUND_AVERAGE",
    "SURROUND_DARK",
    "SURROUND_DIM",
    "Illuminants",
    "ViewingConditions",
    # Gamut mapping
    "ClippingMethod",
    "clip_to_linear_srgb",
]
