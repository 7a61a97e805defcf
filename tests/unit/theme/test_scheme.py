"""Unit tests for scheme generation."""

from __future__ import annotations

import pytest

from tonalr.core.color.gamut import ClippingMethod
from tonalr.core.color.rgb import Srgb
from tonalr.core.color.zcam import ViewingConditions, Zcam
from tonalr.core.config.models import TunableParameters
from tonalr.core.export.overlay import build_overlay
from tonalr.core.theme.models import MATERIAL_STOPS, ColorGroup, Scheme
from tonalr.core.theme.scheme import build_scheme, chroma_scale, generate_scheme, transform_color
from tonalr.core.theme.targets import MaterialYouTargets
from tonalr.core.theme.viewing import build_viewing_conditions

GOOGLE_BLUE = 0x4285F4


def _zcam(scheme: Scheme, group: ColorGroup, stop: int) -> Zcam:
    return Zcam.from_srgb(scheme.group(group)[stop], scheme.viewing_conditions)


def _channel_spread(color: Srgb) -> int:
    rgb = color.quantize()
    return max(rgb) - min(rgb)


def _assert_lightness_ordered(scheme: Scheme) -> None:
    for group in ColorGroup:
        values = [_zcam(scheme, group, stop).lightness for stop in MATERIAL_STOPS]
        for stop, (a, b) in zip(MATERIAL_STOPS[1:], zip(values, values[1:])):
            assert a >= b - 1e-3, f"{group.name} stop {stop}: {b:.3f} above {a:.3f}"


class TestChromaScale:
    """Tests for seed chroma scaling."""

    def test_fraction(self) -> None:
        assert chroma_scale(5.0, 10.0) == 0.5

    def test_capped(self) -> None:
        assert chroma_scale(20.0, 10.0) == 1.0

    def test_zero_reference(self) -> None:
        assert chroma_scale(3.0, 0.0) == 0.0

    def test_negative_seed(self) -> None:
        assert chroma_scale(-1.0, 10.0) == 0.0


class TestTransformColor:
    """Tests for single color transforms."""

    def test_takes_seed_hue(self, default_cond: ViewingConditions) -> None:
        target = Zcam(lightness=50.0, chroma=8.0, hue=0.0, viewing_conditions=default_cond)
        seed = Zcam(lightness=70.0, chroma=8.0, hue=120.0, viewing_conditions=default_cond)
        color = transform_color(target, seed, target, ClippingMethod.PRESERVE_LIGHTNESS)

        result = Zcam.from_srgb(color, default_cond)
        assert result.hue == pytest.approx(120.0, abs=2.0)
        assert result.lightness == pytest.approx(50.0, abs=0.5)

    def test_achromatic_reference(self, default_cond: ViewingConditions) -> None:
        target = Zcam(lightness=50.0, chroma=8.0, hue=0.0, viewing_conditions=default_cond)
        reference = target.with_chroma(0.0)
        seed = Zcam(lightness=70.0, chroma=8.0, hue=120.0, viewing_conditions=default_cond)
        color = transform_color(target, seed, reference, ClippingMethod.PRESERVE_LIGHTNESS)
        assert _channel_spread(color) <= 2


class TestGenerateScheme:
    """Tests for generate_scheme."""

    def test_complete(self, blue_scheme: Scheme) -> None:
        for group in ColorGroup:
            assert blue_scheme.group(group).stops == MATERIAL_STOPS

    def test_records_inputs(self, blue_scheme: Scheme, blue_seed: Srgb) -> None:
        assert blue_scheme.seed == blue_seed
        assert blue_scheme.viewing_conditions == build_viewing_conditions(425)

    def test_deterministic(self, default_params: TunableParameters) -> None:
        first = build_overlay(build_scheme(GOOGLE_BLUE, default_params))
        second = build_overlay(build_scheme(GOOGLE_BLUE, default_params))
        assert first == second

    @pytest.mark.parametrize("group", list(ColorGroup))
    def test_lightness_decreases_with_stop(self, blue_scheme: Scheme, group: ColorGroup) -> None:
        values = [_zcam(blue_scheme, group, stop).lightness for stop in MATERIAL_STOPS]
        assert all(a >= b for a, b in zip(values, values[1:]))
        assert values[0] > 95.0
        assert values[-1] < 1.0

    @pytest.mark.parametrize("accurate_shades", [True, False])
    @pytest.mark.parametrize("white_luminance_user", [0, 425, 1000])
    @pytest.mark.parametrize("seed", [GOOGLE_BLUE, 0x00FFFF, 0x8000FF])
    def test_lightness_ordered_across_settings(
        self, seed: int, white_luminance_user: int, accurate_shades: bool
    ) -> None:
        params = TunableParameters(
            white_luminance_user=white_luminance_user, accurate_shades=accurate_shades
        )
        _assert_lightness_ordered(build_scheme(seed, params))

    def test_fast_shades_ordered_with_boosted_chroma(self) -> None:
        params = TunableParameters(chroma_factor=2.0, accurate_shades=False)
        for seed in (GOOGLE_BLUE, 0x00FFFF, 0x8000FF):
            _assert_lightness_ordered(build_scheme(seed, params))

    def test_accent_keeps_seed_hue(self, blue_scheme: Scheme, default_cond: ViewingConditions) -> None:
        seed_hue = Zcam.from_srgb(Srgb.from_rgb8(GOOGLE_BLUE), default_cond).hue
        assert _zcam(blue_scheme, ColorGroup.ACCENT1, 500).hue == pytest.approx(seed_hue, abs=2.0)

    def test_neutral_keeps_seed_hue_at_low_chroma(
        self,
        blue_scheme: Scheme,
        default_cond: ViewingConditions,
        default_targets: MaterialYouTargets,
    ) -> None:
        seed_hue = Zcam.from_srgb(Srgb.from_rgb8(GOOGLE_BLUE), default_cond).hue
        neutral = _zcam(blue_scheme, ColorGroup.NEUTRAL1, 500)
        accent = _zcam(blue_scheme, ColorGroup.ACCENT1, 500)

        assert neutral.hue == pytest.approx(seed_hue, abs=2.0)
        assert 0.0 < neutral.chroma <= default_targets.chroma(ColorGroup.NEUTRAL1) * 1.05
        assert neutral.chroma < 0.25 * accent.chroma

    def test_accent3_shifts_hue(self, blue_scheme: Scheme, default_cond: ViewingConditions) -> None:
        seed_hue = Zcam.from_srgb(Srgb.from_rgb8(GOOGLE_BLUE), default_cond).hue
        hue = _zcam(blue_scheme, ColorGroup.ACCENT3, 500).hue
        diff = (hue - seed_hue - 60.0 + 180.0) % 360.0 - 180.0
        assert abs(diff) < 3.0

    def test_accents_more_chromatic_than_neutrals(self, blue_scheme: Scheme) -> None:
        accent = _zcam(blue_scheme, ColorGroup.ACCENT1, 500).chroma
        muted = _zcam(blue_scheme, ColorGroup.ACCENT2, 500).chroma
        neutral = _zcam(blue_scheme, ColorGroup.NEUTRAL1, 500).chroma
        assert accent > muted > neutral

    def test_zero_chroma_factor_gives_grays(self) -> None:
        scheme = build_scheme(GOOGLE_BLUE, TunableParameters(chroma_factor=0.0))
        for group in ColorGroup:
            for _, color in scheme.group(group).items():
                assert _channel_spread(color) <= 2

    def test_gray_seed(self, blue_scheme: Scheme, default_params: TunableParameters) -> None:
        scheme = build_scheme(0x808080, default_params)
        assert all(len(scheme.group(g)) == len(MATERIAL_STOPS) for g in ColorGroup)
        gray_chroma = _zcam(scheme, ColorGroup.ACCENT1, 500).chroma
        assert gray_chroma < _zcam(blue_scheme, ColorGroup.ACCENT1, 500).chroma

    def test_fast_matches_accurate_in_gamut(
        self,
        blue_scheme: Scheme,
        blue_scheme_fast: Scheme,
        default_cond: ViewingConditions,
        default_targets: MaterialYouTargets,
    ) -> None:
        seed = Zcam.from_srgb(Srgb.from_rgb8(GOOGLE_BLUE), default_cond)
        checked = 0
        for group in ColorGroup:
            group_seed = seed.with_hue(seed.hue + default_targets.hue_shift(group))
            reference = default_targets.swatch(default_targets.reference_group(group))
            for stop, target in default_targets.swatch(group).items():
                chroma = target.chroma * chroma_scale(group_seed.chroma, reference[stop].chroma)
                wanted = Zcam(
                    lightness=target.lightness,
                    chroma=chroma,
                    hue=group_seed.hue,
                    viewing_conditions=default_cond,
                )
                if wanted.to_linear_srgb().is_in_gamut():
                    checked += 1
                    assert blue_scheme.group(group)[stop] == blue_scheme_fast.group(group)[stop]
        assert checked > 0

    def test_fast_shades_in_range(self, blue_scheme_fast: Scheme) -> None:
        for group in ColorGroup:
            for _, color in blue_scheme_fast.group(group).items():
                assert all(0.0 <= c <= 1.0 for c in (color.r, color.g, color.b))

    def test_condition_mismatch(self, blue_seed: Srgb, default_targets: MaterialYouTargets) -> None:
        with pytest.raises(ValueError, match="viewing conditions"):
            generate_scheme(blue_seed, build_viewing_conditions(100), default_targets)

    def test_linear_lightness_changes_midtone(self, default_params: TunableParameters) -> None:
        cielab = build_scheme(GOOGLE_BLUE, default_params)
        linear = build_scheme(GOOGLE_BLUE, TunableParameters(linear_lightness=True))
        assert cielab.group(ColorGroup.NEUTRAL1)[500] != linear.group(ColorGroup.NEUTRAL1)[500]
