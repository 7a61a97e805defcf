"""Unit tests for the ZCAM appearance model."""

from __future__ import annotations

import pytest

from tonalr.core.color.rgb import Srgb
from tonalr.core.color.xyz import CieXyzAbs
from tonalr.core.color.zcam import (
    ViewingConditions,
    Zcam,
    izazbz_to_xyz,
    xyz_to_izazbz,
)
from tonalr.core.theme.viewing import build_viewing_conditions

ROUND_TRIP_COLORS = (0x4285F4, 0x123456, 0x808080, 0xFF0000, 0x00FF00, 0xE8DEF8, 0x1B1B1F)


class TestIzazbz:
    """Tests for the opponent color space."""

    def test_black_has_zero_iz(self) -> None:
        iz, az, bz = xyz_to_izazbz(CieXyzAbs(0.0, 0.0, 0.0))
        assert iz == pytest.approx(0.0, abs=1e-9)
        assert az == pytest.approx(0.0, abs=1e-9)
        assert bz == pytest.approx(0.0, abs=1e-9)

    def test_round_trip(self) -> None:
        xyz = CieXyzAbs(40.0, 50.0, 90.0)
        back = izazbz_to_xyz(*xyz_to_izazbz(xyz))
        assert back.x == pytest.approx(xyz.x, rel=1e-6)
        assert back.y == pytest.approx(xyz.y, rel=1e-6)
        assert back.z == pytest.approx(xyz.z, rel=1e-6)


class TestViewingConditions:
    """Tests for derived viewing condition parameters."""

    def test_background_factor(self, default_cond: ViewingConditions) -> None:
        # Background is L* 50 gray, about 18.4% of white
        assert default_cond.f_b == pytest.approx(0.18419**0.5, rel=1e-3)

    def test_white_brightness_positive(self, default_cond: ViewingConditions) -> None:
        assert default_cond.iz_w > 0.0
        assert default_cond.qz_w > 0.0

    def test_brightness_round_trip(self, default_cond: ViewingConditions) -> None:
        iz = 0.07
        assert default_cond.qz_to_iz(default_cond.iz_to_qz(iz)) == pytest.approx(iz)

    def test_equal_inputs_compare_equal(self) -> None:
        assert build_viewing_conditions(425) == build_viewing_conditions(425)
        assert build_viewing_conditions(425) != build_viewing_conditions(600)


class TestZcamForward:
    """Tests for the forward model."""

    def test_white_is_full_lightness(self, default_cond: ViewingConditions) -> None:
        white = Zcam.from_srgb(Srgb(1.0, 1.0, 1.0), default_cond)
        assert white.lightness == pytest.approx(100.0, abs=1e-3)
        assert white.chroma < 2.0

    def test_black_is_zero_lightness(self, default_cond: ViewingConditions) -> None:
        black = Zcam.from_srgb(Srgb(0.0, 0.0, 0.0), default_cond)
        assert black.lightness == pytest.approx(0.0, abs=1e-6)

    def test_lightness_orders_grays(self, default_cond: ViewingConditions) -> None:
        grays = [Zcam.from_srgb(Srgb(v, v, v), default_cond).lightness for v in (0.1, 0.4, 0.7)]
        assert grays == sorted(grays)

    def test_saturated_blue_is_chromatic(self, default_cond: ViewingConditions) -> None:
        blue = Zcam.from_srgb(Srgb.from_rgb8(0x4285F4), default_cond)
        gray = Zcam.from_srgb(Srgb.from_rgb8(0x808080), default_cond)
        assert blue.chroma > 5.0 * gray.chroma
        assert 0.0 <= blue.hue < 360.0

    def test_brightness_and_colorfulness_filled(self, default_cond: ViewingConditions) -> None:
        color = Zcam.from_srgb(Srgb.from_rgb8(0x4285F4), default_cond)
        assert color.brightness is not None
        assert color.colorfulness is not None
        assert color.saturation is None

    def test_include_2d(self, default_cond: ViewingConditions) -> None:
        xyz = Srgb.from_rgb8(0x4285F4).to_linear().to_xyz().to_abs(default_cond.reference_white.y)
        color = Zcam.from_xyz_abs(xyz, default_cond, include_2d=True)
        assert color.saturation is not None and color.saturation > 0.0
        assert color.vividness is not None
        assert color.blackness is not None
        assert color.whiteness is not None
        assert color.whiteness == pytest.approx(
            100.0 - ((100.0 - color.lightness) ** 2 + color.chroma**2) ** 0.5
        )


class TestZcamInverse:
    """Tests for the inverse model."""

    @pytest.mark.parametrize("rgb8", ROUND_TRIP_COLORS)
    def test_srgb_round_trip(self, rgb8: int, default_cond: ViewingConditions) -> None:
        zcam = Zcam.from_srgb(Srgb.from_rgb8(rgb8), default_cond)
        assert zcam.to_linear_srgb().to_srgb().to_rgb8() == rgb8

    def test_appearance_round_trip(self, default_cond: ViewingConditions) -> None:
        color = Zcam(lightness=60.0, chroma=12.0, hue=250.0, viewing_conditions=default_cond)
        back = Zcam.from_xyz_abs(color.to_xyz_abs(), default_cond)
        assert back.lightness == pytest.approx(60.0, rel=1e-6)
        assert back.chroma == pytest.approx(12.0, rel=1e-6)
        assert back.hue == pytest.approx(250.0, rel=1e-6)

    def test_round_trip_at_other_luminance(self) -> None:
        cond = build_viewing_conditions(100)
        zcam = Zcam.from_srgb(Srgb.from_rgb8(0x4285F4), cond)
        assert zcam.to_linear_srgb().to_srgb().to_rgb8() == 0x4285F4


class TestZcamCopies:
    """Tests for derived copies."""

    def test_with_hue_wraps(self, default_cond: ViewingConditions) -> None:
        color = Zcam(lightness=50.0, chroma=10.0, hue=300.0, viewing_conditions=default_cond)
        assert color.with_hue(400.0).hue == pytest.approx(40.0)
        assert color.with_hue(-30.0).hue == pytest.approx(330.0)

    def test_with_chroma_drops_stale_attributes(self, default_cond: ViewingConditions) -> None:
        color = Zcam.from_srgb(Srgb.from_rgb8(0x4285F4), default_cond)
        reduced = color.with_chroma(1.0)
        assert reduced.chroma == 1.0
        assert reduced.lightness == color.lightness
        assert reduced.colorfulness is None
        assert reduced.viewing_conditions is default_cond
