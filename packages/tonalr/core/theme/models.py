"""Palette models: color groups, tonal stops, swatches and schemes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

from tonalr.core.color.rgb import Srgb
from tonalr.core.color.zcam import ViewingConditions

ColorT = TypeVar("ColorT")

# Every stop any group may be sampled at
STOP_DOMAIN: tuple[int, ...] = tuple(range(0, 1001, 10))

# Stops sampled by the Material target system
MATERIAL_STOPS: tuple[int, ...] = (
    0,
    10,
    20,
    50,
    100,
    200,
    300,
    400,
    500,
    600,
    650,
    700,
    800,
    900,
    950,
    1000,
)

_STOP_SET = frozenset(STOP_DOMAIN)


class InvalidStopError(ValueError):
    """Raised when a tonal stop falls outside the fixed stop domain."""


class ColorGroup(str, Enum):
    """The closed set of palette roles."""

    ACCENT1 = "accent1"  # Primary accent, closest to the seed
    ACCENT2 = "accent2"  # Secondary accent, muted
    ACCENT3 = "accent3"  # Tertiary accent, hue-shifted
    NEUTRAL1 = "neutral1"  # Main backgrounds
    NEUTRAL2 = "neutral2"  # Secondary backgrounds

    @property
    def family(self) -> str:
        """Either "accent" or "neutral"."""
        return self.value.rstrip("0123456789")

    @property
    def position(self) -> int:
        """1-based position within the family."""
        return int(self.value[len(self.family) :])


ACCENT_GROUPS = (ColorGroup.ACCENT1, ColorGroup.ACCENT2, ColorGroup.ACCENT3)
NEUTRAL_GROUPS = (ColorGroup.NEUTRAL1, ColorGroup.NEUTRAL2)


def validate_stop(stop: int) -> int:
    """Check that ``stop`` belongs to the stop domain.

    Raises:
        InvalidStopError: If the stop is not one of 0, 10, ..., 1000
    """
    if isinstance(stop, bool) or not isinstance(stop, int) or stop not in _STOP_SET:
        raise InvalidStopError(f"Tonal stop must be a multiple of 10 in [0, 1000], got {stop!r}")
    return stop


@dataclass(frozen=True)
class Swatch(Generic[ColorT]):
    """Colors of one group, keyed by tonal stop.

    Stops need not cover the whole domain. ``get`` returns None for a valid
    stop that is absent; a stop outside the domain is a precondition failure.

    Example:
        >>> swatch = Swatch(ColorGroup.ACCENT1, {500: Srgb(0.2, 0.4, 0.9)})
        >>> swatch.get(400) is None
        True
    """

    group: ColorGroup
    colors: Mapping[int, ColorT]

    def __post_init__(self) -> None:
        for stop in self.colors:
            validate_stop(stop)
        ordered = {stop: self.colors[stop] for stop in sorted(self.colors)}
        object.__setattr__(self, "colors", MappingProxyType(ordered))

    def get(self, stop: int) -> ColorT | None:
        return self.colors.get(validate_stop(stop))

    def __getitem__(self, stop: int) -> ColorT:
        return self.colors[validate_stop(stop)]

    def __contains__(self, stop: object) -> bool:
        return stop in self.colors

    def __iter__(self) -> Iterator[int]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def stops(self) -> tuple[int, ...]:
        return tuple(self.colors)

    def items(self) -> Iterator[tuple[int, ColorT]]:
        return iter(self.colors.items())


@dataclass(frozen=True)
class Scheme:
    """A complete palette: one swatch per color group.

    Only valid for the seed and viewing conditions it was generated with.
    """

    seed: Srgb
    viewing_conditions: ViewingConditions
    swatches: Mapping[ColorGroup, Swatch[Srgb]]

    def __post_init__(self) -> None:
        missing = [g.value for g in ColorGroup if g not in self.swatches]
        if missing:
            raise ValueError(f"Scheme is missing color groups: {missing}")
        object.__setattr__(self, "swatches", MappingProxyType(dict(self.swatches)))

    def group(self, role: ColorGroup | str) -> Swatch[Srgb]:
        """Swatch for a color group.

        Raises:
            ValueError: If ``role`` is not a known color group
        """
        return self.swatches[ColorGroup(role)]

    @property
    def accent_colors(self) -> list[Swatch[Srgb]]:
        return [self.swatches[g] for g in ACCENT_GROUPS]

    @property
    def neutral_colors(self) -> list[Swatch[Srgb]]:
        return [self.swatches[g] for g in NEUTRAL_GROUPS]


__all__ = [
    "ACCENT_GROUPS",
    "MATERIAL_STOPS",
    "NEUTRAL_GROUPS",
    "STOP_DOMAIN",
    "ColorGroup",
    "InvalidStopError",
    "Scheme",
    "Swatch",
    "validate_stop",
]
