"""Gamut mapping from ZCAM into the sRGB cube."""

from __future__ import annotations

from enum import Enum

from tonalr.core.color.rgb import LinearSrgb
from tonalr.core.color.zcam import Zcam

# Chroma bracket width at which the bisection stops. Far below one 8-bit
# quantization step for every lightness in the Material stop set.
CHROMA_EPSILON = 1e-3


class ClippingMethod(str, Enum):
    """How out-of-gamut colors are brought back into sRGB."""

    PRESERVE_LIGHTNESS = "preserve_lightness"  # Reduce chroma, keep hue and lightness
    CLAMP = "clamp"  # Clamp linear channels independently


def clip_to_linear_srgb(color: Zcam, method: ClippingMethod) -> LinearSrgb:
    """Convert a ZCAM color to linear sRGB, mapping it into gamut if needed.

    In-gamut colors are returned as converted, whatever the method, so both
    methods agree on every color that did not need mapping.

    Args:
        color: Target color
        method: Clipping method for out-of-gamut colors

    Returns:
        Linear sRGB with every channel in [0, 1]
    """
    initial = color.to_linear_srgb()
    if initial.is_in_gamut():
        return initial.clamp()

    if method == ClippingMethod.CLAMP:
        return initial.clamp()

    # Zero chroma is the achromatic limit and the fallback when nothing fits
    best = color.with_chroma(0.0).to_linear_srgb()
    lo, hi = 0.0, color.chroma
    while hi - lo > CHROMA_EPSILON:
        mid = (lo + hi) / 2.0
        candidate = color.with_chroma(mid).to_linear_srgb()
        if candidate.is_in_gamut():
            lo = mid
            best = candidate
        else:
            hi = mid

    return best.clamp()


__all__ = [
    "CHROMA_EPSILON",
    "ClippingMethod",
    "clip_to_linear_srgb",
]
