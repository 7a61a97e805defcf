"""Configuration management for tonalr."""

from tonalr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from tonalr.core.config.models import (
    WHITE_LUMINANCE_USER_DEFAULT,
    WHITE_LUMINANCE_USER_MAX,
    AppConfig,
    LoggingConfig,
    TunableParameters,
)
from tonalr.core.config.settings import (
    TUNING_KEYS,
    dump_tunables,
    is_tuning_key,
    parse_tunables,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "TunableParameters",
    "WHITE_LUMINANCE_USER_DEFAULT",
    "WHITE_LUMINANCE_USER_MAX",
    # Settings store
    "TUNING_KEYS",
    "dump_tunables",
    "is_tuning_key",
    "parse_tunables",
]
