"""Overlay assembly: flatten a scheme into named ARGB color resources.

Keys follow the system palette resource names::

    system_accent1_0, system_accent1_10, ..., system_neutral2_1000

The neutral overlay also overrides a few modulated surface colors with
fixed neutral1 shades.
"""

from __future__ import annotations

from typing import Literal

from tonalr.core.theme.models import ACCENT_GROUPS, NEUTRAL_GROUPS, ColorGroup, Scheme

OverlayKind = Literal["accent", "neutral"]

# Surface aliases copied from neutral1: (resource name, stop)
SURFACE_ALIASES: tuple[tuple[str, int], ...] = (
    ("surface_light", 20),  # L* 98
    ("surface_highlight_dark", 650),  # L* 35
    ("surface_header_dark_sysui", 950),  # L* 5
)


def resource_name(group: ColorGroup, stop: int) -> str:
    """Resource name of one palette color.

    Example:
        >>> resource_name(ColorGroup.ACCENT1, 400)
        'system_accent1_400'
    """
    return f"system_{group.family}{group.position}_{stop}"


def build_overlay(scheme: Scheme, kind: OverlayKind | None = None) -> dict[str, int]:
    """Flatten a scheme into resource name -> ARGB8 entries.

    Args:
        scheme: Completed scheme
        kind: Restrict to the "accent" or "neutral" groups; None for both

    Returns:
        Mapping of resource names to opaque 0xAARRGGBB colors

    Raises:
        ValueError: If kind is not "accent", "neutral" or None
    """
    if kind is None:
        groups = ACCENT_GROUPS + NEUTRAL_GROUPS
    elif kind == "accent":
        groups = ACCENT_GROUPS
    elif kind == "neutral":
        groups = NEUTRAL_GROUPS
    else:
        raise ValueError(f"Unknown overlay kind: {kind!r}")

    entries: dict[str, int] = {}
    for group in groups:
        for stop, color in scheme.group(group).items():
            entries[resource_name(group, stop)] = color.to_argb8()

    if ColorGroup.NEUTRAL1 in groups:
        neutral1 = scheme.group(ColorGroup.NEUTRAL1)
        for name, stop in SURFACE_ALIASES:
            color = neutral1.get(stop)
            if color is not None:
                entries[name] = color.to_argb8()

    return entries


def group_argb(scheme: Scheme, group: ColorGroup) -> list[int]:
    """ARGB8 colors of one group, ordered by stop."""
    return [color.to_argb8() for _, color in scheme.group(group).items()]


__all__ = [
    "SURFACE_ALIASES",
    "OverlayKind",
    "build_overlay",
    "group_argb",
    "resource_name",
]
