"""Dynamic color scheme generation.

Takes the hue of the seed color and the lightness/chroma of the target
curves, then maps each resulting color back into sRGB.
"""

from __future__ import annotations

import logging
import math

from tonalr.core.color.gamut import ClippingMethod, clip_to_linear_srgb
from tonalr.core.color.rgb import Srgb
from tonalr.core.color.zcam import ViewingConditions, Zcam
from tonalr.core.config.models import TunableParameters
from tonalr.core.theme.models import ColorGroup, Scheme, Swatch
from tonalr.core.theme.targets import MaterialYouTargets
from tonalr.core.theme.viewing import build_viewing_conditions
from tonalr.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


def chroma_scale(seed_chroma: float, reference_chroma: float) -> float:
    """Fraction of the reference chroma the seed can fill.

    Low-chroma and gray seeds are allowed; seeds more chromatic than the
    reference are capped so the group never exceeds its target chroma.

    Example:
        >>> chroma_scale(5.0, 10.0)
        0.5
        >>> chroma_scale(20.0, 10.0)
        1.0
        >>> chroma_scale(3.0, 0.0)
        0.0
    """
    if reference_chroma == 0.0:
        # No chroma to scale; avoids a divide-by-zero
        return 0.0
    return min(max(seed_chroma, 0.0), reference_chroma) / reference_chroma


def transform_color(
    target: Zcam,
    seed: Zcam,
    reference: Zcam,
    method: ClippingMethod,
) -> Srgb:
    """Build one palette color from its target, the seed and the group reference.

    Args:
        target: Target lightness and chroma (hue ignored)
        seed: Seed color in ZCAM, hue already shifted for the group
        reference: Target of the reference group at the same stop
        method: Gamut mapping for out-of-gamut results

    Returns:
        Displayable sRGB color
    """
    chroma = target.chroma * chroma_scale(seed.chroma, reference.chroma)
    new_color = Zcam(
        lightness=target.lightness,
        chroma=chroma,
        hue=seed.hue,
        viewing_conditions=target.viewing_conditions,
    )
    return clip_to_linear_srgb(new_color, method).to_srgb()


def _ordered_clamp(
    target: Zcam,
    seed: Zcam,
    reference: Zcam,
    ceiling: float,
    floor: float,
) -> Srgb:
    """Clamp a color, unless clamping breaks the lightness order of the swatch.

    Clamping channels independently shifts lightness, most visibly for very
    dark stops. A clamped color is kept only if its lightness stays within
    [floor, ceiling]; otherwise the stop is gamut-mapped by chroma reduction.

    Args:
        target: Target lightness and chroma (hue ignored)
        seed: Seed color in ZCAM, hue already shifted for the group
        reference: Target of the reference group at the same stop
        ceiling: Lightness of the previous (lighter) stop as emitted
        floor: Target lightness of the next (darker) stop

    Returns:
        Displayable sRGB color
    """
    color = transform_color(target, seed, reference, ClippingMethod.CLAMP)
    lightness = Zcam.from_srgb(color, target.viewing_conditions).lightness
    if floor <= lightness <= ceiling:
        return color

    logger.debug(
        f"Clamped lightness {lightness:.3f} outside [{floor:.3f}, {ceiling:.3f}], "
        "reducing chroma instead"
    )
    return transform_color(target, seed, reference, ClippingMethod.PRESERVE_LIGHTNESS)


@log_performance
def generate_scheme(
    seed: Srgb,
    cond: ViewingConditions,
    targets: MaterialYouTargets,
    accurate_shades: bool = True,
) -> Scheme:
    """Generate the full palette for a seed color.

    Deterministic: the same inputs always produce an identical Scheme.

    Args:
        seed: Seed color
        cond: Viewing conditions; must be the ones the targets were built with
        targets: Target curves
        accurate_shades: Gamut-map by chroma reduction instead of channel clamping

    Returns:
        Scheme with one swatch per color group

    Raises:
        ValueError: If the targets were built for other viewing conditions
    """
    if targets.cond != cond:
        raise ValueError("Targets were built for different viewing conditions")

    method = ClippingMethod.PRESERVE_LIGHTNESS if accurate_shades else ClippingMethod.CLAMP

    seed_zcam = Zcam.from_srgb(seed, cond)
    seed_zcam = seed_zcam.with_chroma(seed_zcam.chroma * targets.chroma_factor)
    logger.debug(
        f"Seed color: {seed.to_hex()} => J={seed_zcam.lightness:.3f} "
        f"C={seed_zcam.chroma:.3f} h={seed_zcam.hue:.3f}"
    )

    swatches: dict[ColorGroup, Swatch[Srgb]] = {}
    for group in ColorGroup:
        group_seed = seed_zcam.with_hue(seed_zcam.hue + targets.hue_shift(group))
        target_swatch = targets.swatch(group)
        reference_swatch = targets.swatch(targets.reference_group(group))

        targets_in_order = list(target_swatch.items())
        ceiling = math.inf

        colors: dict[int, Srgb] = {}
        for i, (stop, target) in enumerate(targets_in_order):
            reference = reference_swatch[stop]
            if method == ClippingMethod.CLAMP:
                if i + 1 < len(targets_in_order):
                    floor = targets_in_order[i + 1][1].lightness
                else:
                    floor = -math.inf
                colors[stop] = _ordered_clamp(target, group_seed, reference, ceiling, floor)
                ceiling = Zcam.from_srgb(colors[stop], cond).lightness
            else:
                colors[stop] = transform_color(target, group_seed, reference, method)
            logger.debug(f"Transform: {group.value}[{stop}] {target} => {colors[stop].to_hex()}")

        swatches[group] = Swatch(group=group, colors=colors)

    return Scheme(seed=seed, viewing_conditions=cond, swatches=swatches)


def build_scheme(seed_color: int, params: TunableParameters) -> Scheme:
    """Generate a scheme from a packed seed color and the tunables.

    Builds fresh viewing conditions and targets on every call.

    Args:
        seed_color: Seed as 0xRRGGBB
        params: Tunable parameters

    Returns:
        Generated Scheme
    """
    cond = build_viewing_conditions(params.white_luminance_user)
    targets = MaterialYouTargets(
        cond=cond,
        chroma_factor=params.chroma_factor,
        linear_lightness=params.linear_lightness,
    )
    return generate_scheme(
        seed=Srgb.from_rgb8(seed_color),
        cond=cond,
        targets=targets,
        accurate_shades=params.accurate_shades,
    )


__all__ = [
    "build_scheme",
    "chroma_scale",
    "generate_scheme",
    "transform_color",
]
