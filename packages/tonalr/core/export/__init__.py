"""Export of completed schemes: overlay entries and boot colors.

Nothing here knows how a scheme was computed.
"""

from tonalr.core.export.boot import (
    BOOT_COLOR_STOPS,
    BOOT_PROPERTY_PREFIX,
    BootColorExporter,
    PropertyWriter,
    boot_colors,
)
from tonalr.core.export.overlay import (
    SURFACE_ALIASES,
    build_overlay,
    group_argb,
    resource_name,
)

__all__ = [
    # Overlay
    "SURFACE_ALIASES",
    "build_overlay",
    "group_argb",
    "resource_name",
    # Boot colors
    "BOOT_COLOR_STOPS",
    "BOOT_PROPERTY_PREFIX",
    "BootColorExporter",
    "PropertyWriter",
    "boot_colors",
]
