"""Viewing conditions derived from the white luminance tunable."""

from __future__ import annotations

import math

from tonalr.core.color.lab import CieLab
from tonalr.core.color.xyz import Illuminants
from tonalr.core.color.zcam import SURROUND_AVERAGE, ViewingConditions
from tonalr.core.config.models import WHITE_LUMINANCE_USER_MAX
from tonalr.core.utils.math import clamp

WHITE_LUMINANCE_MIN = 1.0
WHITE_LUMINANCE_MAX = 10000.0

# Self-luminous display in an average surround (sRGB viewing environment)
ADAPTING_LUMINANCE_RATIO = 0.4

# Gray world: the background is a mid-gray of CIELAB L* = 50
BACKGROUND_LIGHTNESS = 50.0


def parse_white_luminance_user(user_value: int) -> float:
    """Map the 0-1000 slider to a white luminance in nits.

    The slider is an inverted log scale over four decades so that equal
    slider steps look evenly spaced: 0 is the brightest white (10000 nits),
    1000 the dimmest (1 nit).

    Args:
        user_value: Slider position; clamped into [0, 1000]

    Returns:
        White luminance in cd/m², within [1, 10000]

    Example:
        >>> parse_white_luminance_user(0)
        10000.0
        >>> parse_white_luminance_user(1000)
        1.0
    """
    user_src = clamp(user_value, 0, WHITE_LUMINANCE_USER_MAX) / WHITE_LUMINANCE_USER_MAX
    user_inv = 1.0 - user_src
    luminance = 10.0 ** (user_inv * math.log10(WHITE_LUMINANCE_MAX))
    return float(clamp(luminance, WHITE_LUMINANCE_MIN, WHITE_LUMINANCE_MAX))


def viewing_conditions_for_luminance(white_luminance: float) -> ViewingConditions:
    """Build ZCAM viewing conditions for a display white of the given luminance."""
    background_y = CieLab(l=BACKGROUND_LIGHTNESS, a=0.0, b=0.0).to_xyz().y
    return ViewingConditions(
        surround_factor=SURROUND_AVERAGE,
        adapting_luminance=ADAPTING_LUMINANCE_RATIO * white_luminance,
        background_luminance=background_y * white_luminance,
        reference_white=Illuminants.D65.to_abs(white_luminance),
    )


def build_viewing_conditions(white_luminance_user: int) -> ViewingConditions:
    """Build viewing conditions from the white luminance slider position."""
    return viewing_conditions_for_luminance(parse_white_luminance_user(white_luminance_user))


__all__ = [
    "WHITE_LUMINANCE_MAX",
    "WHITE_LUMINANCE_MIN",
    "build_viewing_conditions",
    "parse_white_luminance_user",
    "viewing_conditions_for_luminance",
]
