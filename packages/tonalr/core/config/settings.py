"""Translation between flat tuning settings and TunableParameters.

Tunables are persisted externally as a flat key/value store (one entry per
``monet_engine_*`` key, values stored as strings or numbers). Change
notifications arrive per key; any tuning key triggers a full re-read.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tonalr.core.config.models import WHITE_LUMINANCE_USER_DEFAULT, TunableParameters

logger = logging.getLogger(__name__)

PREF_PREFIX = "monet_engine"
PREF_CUSTOM_COLOR = f"{PREF_PREFIX}_custom_color"
PREF_COLOR_OVERRIDE = f"{PREF_PREFIX}_color_override"
PREF_CHROMA_FACTOR = f"{PREF_PREFIX}_chroma_factor"
PREF_ACCURATE_SHADES = f"{PREF_PREFIX}_accurate_shades"
PREF_LINEAR_LIGHTNESS = f"{PREF_PREFIX}_linear_lightness"
PREF_WHITE_LUMINANCE = f"{PREF_PREFIX}_white_luminance_user"

TUNING_KEYS = (
    PREF_CUSTOM_COLOR,
    PREF_COLOR_OVERRIDE,
    PREF_CHROMA_FACTOR,
    PREF_ACCURATE_SHADES,
    PREF_LINEAR_LIGHTNESS,
    PREF_WHITE_LUMINANCE,
)

# Stored chroma factor is a percentage
_CHROMA_FACTOR_DEFAULT_PERCENT = 100.0


def is_tuning_key(key: str | None) -> bool:
    """Whether a change notification for ``key`` concerns the theme engine."""
    return key is not None and PREF_PREFIX in key


def _get_int(settings: Mapping[str, Any], key: str, default: int | None) -> int | None:
    raw = settings.get(key)
    if raw is None:
        return default
    try:
        return int(str(raw).strip(), 0) if isinstance(raw, str) else int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed integer setting {key}={raw!r}")
        return default


def _get_float(settings: Mapping[str, Any], key: str, default: float) -> float:
    raw = settings.get(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed float setting {key}={raw!r}")
        return default


def parse_tunables(settings: Mapping[str, Any]) -> TunableParameters:
    """Read every tuning key from a flat settings mapping.

    Missing or malformed entries fall back to their defaults: custom color
    off, no override, chroma 100 %, accurate shades on, linear
    lightness off, white luminance slider at 425.

    Args:
        settings: Flat key/value settings store

    Returns:
        Validated TunableParameters
    """
    return TunableParameters(
        custom_color=_get_int(settings, PREF_CUSTOM_COLOR, 0) == 1,
        color_override=_get_int(settings, PREF_COLOR_OVERRIDE, None),
        chroma_factor=_get_float(settings, PREF_CHROMA_FACTOR, _CHROMA_FACTOR_DEFAULT_PERCENT)
        / 100.0,
        accurate_shades=_get_int(settings, PREF_ACCURATE_SHADES, 1) != 0,
        linear_lightness=_get_int(settings, PREF_LINEAR_LIGHTNESS, 0) != 0,
        white_luminance_user=_get_int(settings, PREF_WHITE_LUMINANCE, WHITE_LUMINANCE_USER_DEFAULT),
    )


def dump_tunables(params: TunableParameters) -> dict[str, str]:
    """Inverse of parse_tunables, producing the stored string values.

    An unset color override is left out of the store rather than written.
    """
    stored = {
        PREF_CUSTOM_COLOR: "1" if params.custom_color else "0",
        PREF_CHROMA_FACTOR: repr(params.chroma_factor * 100.0),
        PREF_ACCURATE_SHADES: "1" if params.accurate_shades else "0",
        PREF_LINEAR_LIGHTNESS: "1" if params.linear_lightness else "0",
        PREF_WHITE_LUMINANCE: str(params.white_luminance_user),
    }
    if params.color_override is not None:
        stored[PREF_COLOR_OVERRIDE] = str(params.color_override)
    return stored
