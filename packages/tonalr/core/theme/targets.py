"""Material You target curves.

For every color group and tonal stop, a target (lightness, chroma) pair in
ZCAM units. Hue is left at zero: the scheme generator takes it from the seed.

Lightness follows the AOSP default shade table, either as linear ZCAM
lightness or (default) as the ZCAM lightness of the CIELAB L* values in that
table. Chroma is derived from the default Pixel blue accent:

    accent1 = mean chroma of the reference blues x 1.2
    accent2 = accent1 / 3
    accent3 = accent2 x 2
    neutral1 = accent1 / 8
    neutral2 = accent1 / 5

All chroma values are then scaled by the chroma factor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from tonalr.core.color.lab import CieLab
from tonalr.core.color.rgb import Srgb
from tonalr.core.color.zcam import ViewingConditions, Zcam
from tonalr.core.theme.models import MATERIAL_STOPS, ColorGroup, Swatch, validate_stop

logger = logging.getLogger(__name__)

# Linear lightness: stop 0 is white (100), stop 1000 is black (0)
LINEAR_LIGHTNESS_MAP: Mapping[int, float] = MappingProxyType(
    {stop: 100.0 - stop / 10.0 for stop in MATERIAL_STOPS}
)

# CIELAB L* of the AOSP defaults; identical except for the mid-tone
CIELAB_LIGHTNESS_MAP: Mapping[int, float] = MappingProxyType(
    {stop: 49.6 if stop == 500 else lightness for stop, lightness in LINEAR_LIGHTNESS_MAP.items()}
)

# Pixel default blue, shades 100-900. The very light 10/50 shades are left
# out to avoid biasing the average towards white.
REF_ACCENT1_COLORS = (
    0xD3E3FD,
    0xA8C7FA,
    0x7CACF8,
    0x4C8DF6,
    0x1B6EF3,
    0x0B57D0,
    0x0842A0,
    0x062E6F,
    0x041E49,
)

ACCENT1_REF_CHROMA_FACTOR = 1.2

# Tertiary accent is the seed shifted to the next secondary color
ACCENT3_HUE_SHIFT_DEGREES = 60.0

GROUP_HUE_SHIFT: Mapping[ColorGroup, float] = MappingProxyType(
    {
        ColorGroup.ACCENT1: 0.0,
        ColorGroup.ACCENT2: 0.0,
        ColorGroup.ACCENT3: ACCENT3_HUE_SHIFT_DEGREES,
        ColorGroup.NEUTRAL1: 0.0,
        ColorGroup.NEUTRAL2: 0.0,
    }
)

# Group whose chroma bounds the seed chroma when scaling each group.
# Keeps the A-1 : A-2 : A-3 and N-1 : N-2 chroma ratios intact.
GROUP_CHROMA_REFERENCE: Mapping[ColorGroup, ColorGroup] = MappingProxyType(
    {
        ColorGroup.ACCENT1: ColorGroup.ACCENT1,
        ColorGroup.ACCENT2: ColorGroup.ACCENT1,
        ColorGroup.ACCENT3: ColorGroup.ACCENT1,
        ColorGroup.NEUTRAL1: ColorGroup.NEUTRAL1,
        ColorGroup.NEUTRAL2: ColorGroup.NEUTRAL1,
    }
)


class MaterialYouTargets:
    """Target lightness and chroma per color group and stop.

    Args:
        cond: Viewing conditions used to express the targets in ZCAM
        chroma_factor: Multiplier for every group chroma
        linear_lightness: Use linear lightness instead of CIELAB-matched lightness
    """

    def __init__(
        self,
        cond: ViewingConditions,
        chroma_factor: float = 1.0,
        linear_lightness: bool = False,
    ) -> None:
        self.cond = cond
        self.chroma_factor = chroma_factor
        self.linear_lightness = linear_lightness

        if linear_lightness:
            lightness_map = dict(LINEAR_LIGHTNESS_MAP)
        else:
            lightness_map = {
                stop: self._cielab_to_zcam_lightness(l_star)
                for stop, l_star in CIELAB_LIGHTNESS_MAP.items()
            }
        self.lightness_map: Mapping[int, float] = MappingProxyType(lightness_map)

        accent1_chroma = self._reference_accent_chroma() * ACCENT1_REF_CHROMA_FACTOR
        accent2_chroma = accent1_chroma / 3.0
        self.base_chroma: Mapping[ColorGroup, float] = MappingProxyType(
            {
                ColorGroup.ACCENT1: accent1_chroma,
                ColorGroup.ACCENT2: accent2_chroma,
                ColorGroup.ACCENT3: accent2_chroma * 2.0,
                ColorGroup.NEUTRAL1: accent1_chroma / 8.0,
                ColorGroup.NEUTRAL2: accent1_chroma / 5.0,
            }
        )

        self._swatches = {group: self._build_swatch(group) for group in ColorGroup}
        logger.debug(
            f"Targets: accent1 chroma {accent1_chroma:.3f}, factor {chroma_factor}, "
            f"linear lightness {linear_lightness}"
        )

    def _cielab_to_zcam_lightness(self, l_star: float) -> float:
        xyz = CieLab(l=l_star, a=0.0, b=0.0).to_xyz().to_abs(self.cond.reference_white.y)
        return Zcam.from_xyz_abs(xyz, self.cond).lightness

    def _reference_accent_chroma(self) -> float:
        chromas = [Zcam.from_srgb(Srgb.from_rgb8(c), self.cond).chroma for c in REF_ACCENT1_COLORS]
        return sum(chromas) / len(chromas)

    def _build_swatch(self, group: ColorGroup) -> Swatch[Zcam]:
        chroma = self.chroma(group)
        return Swatch(
            group=group,
            colors={
                stop: Zcam(
                    lightness=lightness,
                    chroma=chroma,
                    hue=0.0,
                    viewing_conditions=self.cond,
                )
                for stop, lightness in self.lightness_map.items()
            },
        )

    @property
    def stops(self) -> tuple[int, ...]:
        return tuple(self.lightness_map)

    def lightness(self, stop: int) -> float:
        """Target ZCAM lightness at a stop.

        Raises:
            InvalidStopError: If the stop is outside the stop domain
            KeyError: If the stop is in the domain but not sampled by this target system
        """
        return self.lightness_map[validate_stop(stop)]

    def chroma(self, group: ColorGroup) -> float:
        """Target ZCAM chroma of a group, chroma factor applied."""
        return self.base_chroma[ColorGroup(group)] * self.chroma_factor

    def target(self, group: ColorGroup, stop: int) -> tuple[float, float]:
        """Target (lightness, chroma) for a group at a stop."""
        return self.lightness(stop), self.chroma(group)

    def swatch(self, group: ColorGroup) -> Swatch[Zcam]:
        """All targets of a group as hue-0 ZCAM colors."""
        return self._swatches[ColorGroup(group)]

    @staticmethod
    def hue_shift(group: ColorGroup) -> float:
        """Hue rotation in degrees applied to the seed hue for a group."""
        return GROUP_HUE_SHIFT[ColorGroup(group)]

    @staticmethod
    def reference_group(group: ColorGroup) -> ColorGroup:
        """Group whose chroma bounds the seed chroma for ``group``."""
        return GROUP_CHROMA_REFERENCE[ColorGroup(group)]


__all__ = [
    "ACCENT1_REF_CHROMA_FACTOR",
    "ACCENT3_HUE_SHIFT_DEGREES",
    "CIELAB_LIGHTNESS_MAP",
    "LINEAR_LIGHTNESS_MAP",
    "MaterialYouTargets",
    "REF_ACCENT1_COLORS",
]
