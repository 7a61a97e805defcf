"""Shared pytest fixtures for tonalr tests."""

from __future__ import annotations

import logging

import pytest

from tonalr.core.color.rgb import Srgb
from tonalr.core.color.zcam import ViewingConditions
from tonalr.core.config.models import TunableParameters
from tonalr.core.theme.models import Scheme
from tonalr.core.theme.scheme import build_scheme
from tonalr.core.theme.targets import MaterialYouTargets
from tonalr.core.theme.viewing import build_viewing_conditions

# ============================================================================
# Seed Colors
# ============================================================================

GOOGLE_BLUE = 0x4285F4


@pytest.fixture
def blue_seed() -> Srgb:
    """Saturated blue seed color."""
    return Srgb.from_rgb8(GOOGLE_BLUE)


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def default_params() -> TunableParameters:
    """Default tunables (chroma 1.0, luminance slider 425, accurate shades)."""
    return TunableParameters()


@pytest.fixture(scope="session")
def default_cond() -> ViewingConditions:
    """Viewing conditions for the default luminance slider position."""
    return build_viewing_conditions(425)


@pytest.fixture(scope="session")
def default_targets(default_cond: ViewingConditions) -> MaterialYouTargets:
    """Material You targets under the default viewing conditions."""
    return MaterialYouTargets(cond=default_cond)


@pytest.fixture(scope="session")
def blue_scheme(default_params: TunableParameters) -> Scheme:
    """Scheme for the blue seed with default tunables."""
    return build_scheme(GOOGLE_BLUE, default_params)


@pytest.fixture(scope="session")
def blue_scheme_fast() -> Scheme:
    """Scheme for the blue seed with channel clamping instead of chroma reduction."""
    return build_scheme(GOOGLE_BLUE, TunableParameters(accurate_shades=False))


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def restore_logging():
    """Drop root handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        # pytest capture handlers subclass StreamHandler and are left alone
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
