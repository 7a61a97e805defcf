"""Boot animation colors.

Four colors picked from fixed accent stops, exported as the external
properties ``persist.bootanim.color1`` .. ``color4``. Export is best-effort:
a failing property writer is logged and never reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Protocol

from tonalr.core.theme.models import ColorGroup, Scheme

logger = logging.getLogger(__name__)

BOOT_PROPERTY_PREFIX = "persist.bootanim.color"

# (group, stop) of each boot color, in property order
BOOT_COLOR_STOPS: tuple[tuple[ColorGroup, int], ...] = (
    (ColorGroup.ACCENT1, 400),
    (ColorGroup.ACCENT1, 200),
    (ColorGroup.ACCENT1, 700),
    (ColorGroup.ACCENT2, 900),
)


class PropertyWriter(Protocol):
    """Sink for named external properties (e.g. system properties)."""

    def set(self, name: str, value: str) -> None:
        """Write one property.

        Args:
            name: Property name
            value: Property value as a string
        """
        ...


def boot_colors(scheme: Scheme) -> list[int]:
    """The four boot animation colors as 0xRRGGBB integers.

    Raises:
        KeyError: If the scheme lacks one of the boot stops
    """
    return [scheme.group(group)[stop].to_rgb8() for group, stop in BOOT_COLOR_STOPS]


class BootColorExporter:
    """Writes boot colors of a completed scheme through a PropertyWriter."""

    def __init__(self, writer: PropertyWriter) -> None:
        self.writer = writer

    def export(self, scheme: Scheme) -> bool:
        """Export the boot colors.

        Args:
            scheme: Completed scheme

        Returns:
            True if every property was written, False if export failed
        """
        try:
            for i, color in enumerate(boot_colors(scheme), start=1):
                self.writer.set(f"{BOOT_PROPERTY_PREFIX}{i}", str(color))
                logger.debug(f"Writing boot animation color {i}: {color}")
        except Exception as e:
            logger.warning(f"Cannot set boot animation colors: {e}")
            return False
        return True


__all__ = [
    "BOOT_COLOR_STOPS",
    "BOOT_PROPERTY_PREFIX",
    "BootColorExporter",
    "PropertyWriter",
    "boot_colors",
]
