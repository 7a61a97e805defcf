"""ZCAM color appearance model.

Implements the forward and inverse model from Safdar et al., "ZCAM, a
colour appearance model based on a high dynamic range uniform colour space"
(Optics Express, 2021). Input and output are absolute XYZ under D65, so no
chromatic adaptation step is applied.

Example:
    >>> cond = ViewingConditions(
    ...     surround_factor=SURROUND_AVERAGE,
    ...     adapting_luminance=80.0,
    ...     background_luminance=36.8,
    ...     reference_white=Illuminants.D65.to_abs(200.0),
    ... )
    >>> zcam = Zcam.from_srgb(Srgb.from_rgb8(0x4285F4), cond)
    >>> 0.0 <= zcam.hue < 360.0
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

import numpy as np

from tonalr.core.color.rgb import LinearSrgb, Srgb
from tonalr.core.color.xyz import CieXyzAbs
from tonalr.core.utils.math import signed_pow

# Surround factors (F_s)
SURROUND_DARK = 0.525
SURROUND_DIM = 0.59
SURROUND_AVERAGE = 0.69

# Perceptual quantizer (SMPTE ST 2084) with the Jzazbz exponent
_PQ_C1 = 3424.0 / 2.0**12
_PQ_C2 = 2413.0 / 2.0**7
_PQ_C3 = 2392.0 / 2.0**7
_PQ_ETA = 2610.0 / 2.0**14
_PQ_RHO = 1.7 * 2523.0 / 2.0**5

# Cone response of absolute black after PQ; subtracted so black has Iz = 0
_IZ_EPSILON = 3.7035226210190005e-11

# Blue/yellow correction of the input XYZ
_B = 1.15
_G = 0.66

_XYZ_TO_LMS = np.array(
    [
        [0.41478972, 0.579999, 0.0146480],
        [-0.2015100, 1.120649, 0.0531008],
        [-0.0166008, 0.264800, 0.6684799],
    ]
)
_LMS_TO_XYZ = np.linalg.inv(_XYZ_TO_LMS)

_LMS_TO_IZAZBZ = np.array(
    [
        [0.0, 1.0, 0.0],
        [3.524000, -4.066708, 0.542708],
        [0.199076, 1.096799, -1.295875],
    ]
)
_IZAZBZ_TO_LMS = np.linalg.inv(_LMS_TO_IZAZBZ)


def _pq(x: float) -> float:
    xp = signed_pow(x / 10000.0, _PQ_ETA)
    return signed_pow((_PQ_C1 + _PQ_C2 * xp) / (1.0 + _PQ_C3 * xp), _PQ_RHO)


def _pq_inv(x: float) -> float:
    vp = signed_pow(x, 1.0 / _PQ_RHO)
    return 10000.0 * signed_pow((_PQ_C1 - vp) / (_PQ_C3 * vp - _PQ_C2), 1.0 / _PQ_ETA)


def xyz_to_izazbz(xyz: CieXyzAbs) -> tuple[float, float, float]:
    """Convert absolute XYZ to the Izazbz opponent space."""
    xp = _B * xyz.x - (_B - 1.0) * xyz.z
    yp = _G * xyz.y - (_G - 1.0) * xyz.x

    lms = _XYZ_TO_LMS @ np.array([xp, yp, xyz.z])
    lms_p = np.array([_pq(float(c)) for c in lms])

    iz, az, bz = _LMS_TO_IZAZBZ @ lms_p
    return float(iz) - _IZ_EPSILON, float(az), float(bz)


def izazbz_to_xyz(iz: float, az: float, bz: float) -> CieXyzAbs:
    """Convert Izazbz back to absolute XYZ."""
    lms_p = _IZAZBZ_TO_LMS @ np.array([iz + _IZ_EPSILON, az, bz])
    lms = np.array([_pq_inv(float(c)) for c in lms_p])

    xp, yp, z = (float(c) for c in _LMS_TO_XYZ @ lms)
    x = (xp + (_B - 1.0) * z) / _B
    y = (yp + (_G - 1.0) * x) / _G
    return CieXyzAbs(x=x, y=y, z=z)


@dataclass(frozen=True)
class ViewingConditions:
    """Observation environment the appearance model is calibrated for.

    Attributes:
        surround_factor: F_s, one of the SURROUND_* constants
        adapting_luminance: L_a in cd/m²
        background_luminance: Y_b in cd/m²
        reference_white: Absolute XYZ of the adopted white
    """

    surround_factor: float
    adapting_luminance: float
    background_luminance: float
    reference_white: CieXyzAbs

    # Derived once; every conversion under these conditions reuses them
    f_b: float = field(init=False, repr=False)
    f_l: float = field(init=False, repr=False)
    iz_w: float = field(init=False, repr=False)
    qz_w: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        la = self.adapting_luminance
        f_b = math.sqrt(self.background_luminance / self.reference_white.y)
        f_l = 0.171 * la ** (1.0 / 3.0) * (1.0 - math.exp(-48.0 / 9.0 * la))
        object.__setattr__(self, "f_b", f_b)
        object.__setattr__(self, "f_l", f_l)

        iz_w = xyz_to_izazbz(self.reference_white)[0]
        object.__setattr__(self, "iz_w", iz_w)
        object.__setattr__(self, "qz_w", self.iz_to_qz(iz_w))

    @property
    def _qz_coeff(self) -> float:
        return 2700.0 * self.surround_factor**2.2 * self.f_b**0.5 * self.f_l**0.2

    @property
    def _qz_exponent(self) -> float:
        return 1.6 * self.surround_factor / self.f_b**0.12

    @property
    def mz_denominator(self) -> float:
        return self.f_b**0.1 * self.iz_w**0.78

    def iz_to_qz(self, iz: float) -> float:
        """Achromatic response to brightness."""
        return signed_pow(iz, self._qz_exponent) * self._qz_coeff

    def qz_to_iz(self, qz: float) -> float:
        """Brightness to achromatic response."""
        return signed_pow(qz / self._qz_coeff, 1.0 / self._qz_exponent)


def _eccentricity(hue: float) -> float:
    return 1.015 + math.cos(math.radians(89.038 + hue))


@dataclass(frozen=True)
class Zcam:
    """A color in ZCAM lightness (Jz), chroma (Cz) and hue angle (hz).

    Brightness and colorfulness are filled in by the forward conversion.
    The 2D attributes (saturation, vividness, blackness, whiteness) are
    only computed when requested.
    """

    lightness: float
    chroma: float
    hue: float
    viewing_conditions: ViewingConditions = field(repr=False, compare=False)

    brightness: float | None = None
    colorfulness: float | None = None
    saturation: float | None = None
    vividness: float | None = None
    blackness: float | None = None
    whiteness: float | None = None

    @classmethod
    def from_xyz_abs(
        cls,
        xyz: CieXyzAbs,
        cond: ViewingConditions,
        include_2d: bool = False,
    ) -> Zcam:
        """Forward model: absolute XYZ to ZCAM.

        Args:
            xyz: Absolute XYZ (D65 white)
            cond: Viewing conditions
            include_2d: Also compute saturation, vividness, blackness and whiteness

        Returns:
            ZCAM color
        """
        iz, az, bz = xyz_to_izazbz(xyz)

        hz = math.degrees(math.atan2(bz, az)) % 360.0
        ez = _eccentricity(hz)

        qz = cond.iz_to_qz(iz)
        jz = 100.0 * qz / cond.qz_w

        mz = (
            100.0
            * (az * az + bz * bz) ** 0.37
            * (ez**0.068 * cond.f_l**0.2)
            / cond.mz_denominator
        )
        cz = 100.0 * mz / cond.qz_w

        extra: dict[str, float] = {}
        if include_2d:
            extra["saturation"] = 100.0 * cond.f_l**0.6 * math.sqrt(mz / qz) if qz > 0.0 else 0.0
            extra["vividness"] = math.sqrt((jz - 58.0) ** 2 + 3.4 * cz**2)
            extra["blackness"] = 100.0 - 0.8 * math.sqrt(jz**2 + 8.0 * cz**2)
            extra["whiteness"] = 100.0 - math.sqrt((100.0 - jz) ** 2 + cz**2)

        return cls(
            lightness=jz,
            chroma=cz,
            hue=hz,
            viewing_conditions=cond,
            brightness=qz,
            colorfulness=mz,
            **extra,
        )

    @classmethod
    def from_srgb(cls, color: Srgb, cond: ViewingConditions) -> Zcam:
        """Convert device sRGB to ZCAM, scaling by the reference white luminance."""
        xyz = color.to_linear().to_xyz().to_abs(cond.reference_white.y)
        return cls.from_xyz_abs(xyz, cond)

    def to_xyz_abs(self) -> CieXyzAbs:
        """Inverse model: ZCAM lightness/chroma/hue to absolute XYZ."""
        cond = self.viewing_conditions

        qz = self.lightness * cond.qz_w / 100.0
        iz = cond.qz_to_iz(qz)

        mz = self.chroma * cond.qz_w / 100.0
        ez = _eccentricity(self.hue)
        cz_p = (mz * cond.mz_denominator / (100.0 * ez**0.068 * cond.f_l**0.2)) ** (1.0 / 0.74)

        hue_rad = math.radians(self.hue)
        return izazbz_to_xyz(iz, cz_p * math.cos(hue_rad), cz_p * math.sin(hue_rad))

    def to_linear_srgb(self) -> LinearSrgb:
        """Convert to linear sRGB without any gamut mapping."""
        xyz = self.to_xyz_abs().to_rel(self.viewing_conditions.reference_white.y)
        return LinearSrgb.from_xyz(xyz)

    def with_chroma(self, chroma: float) -> Zcam:
        return replace(self, chroma=chroma, brightness=None, colorfulness=None)

    def with_hue(self, hue: float) -> Zcam:
        return replace(self, hue=hue % 360.0, brightness=None, colorfulness=None)


__all__ = [
    "SURROUND_AVERAGE",
    "SURROUND_DARK",
    "SURROUND_DIM",
    "ViewingConditions",
    "Zcam",
    "izazbz_to_xyz",
    "xyz_to_izazbz",
]
