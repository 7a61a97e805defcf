"""Theme generation: target curves, scheme generation and caching."""

from tonalr.core.theme.models import (
    ACCENT_GROUPS,
    MATERIAL_STOPS,
    NEUTRAL_GROUPS,
    STOP_DOMAIN,
    ColorGroup,
    InvalidStopError,
    Scheme,
    Swatch,
    validate_stop,
)
from tonalr.core.theme.scheme import build_scheme, generate_scheme
from tonalr.core.theme.service import ThemeService
from tonalr.core.theme.targets import MaterialYouTargets
from tonalr.core.theme.viewing import build_viewing_conditions, parse_white_luminance_user

__all__ = [
    # Models
    "ACCENT_GROUPS",
    "MATERIAL_STOPS",
    "NEUTRAL_GROUPS",
    "STOP_DOMAIN",
    "ColorGroup",
    "InvalidStopError",
    "Scheme",
    "Swatch",
    "validate_stop",
    # Generation
    "MaterialYouTargets",
    "build_scheme",
    "build_viewing_conditions",
    "generate_scheme",
    "parse_white_luminance_user",
    # Service
    "ThemeService",
]
