"""CIE 1976 L*a*b*, relative to the D65 white."""

from __future__ import annotations

from dataclasses import dataclass

from tonalr.core.color.xyz import CieXyz, Illuminants

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _f(t: float) -> float:
    if t > _EPSILON:
        return t ** (1.0 / 3.0)
    return (_KAPPA * t + 16.0) / 116.0


def _f_inv(t: float) -> float:
    cube = t**3
    if cube > _EPSILON:
        return cube
    return (116.0 * t - 16.0) / _KAPPA


@dataclass(frozen=True)
class CieLab:
    l: float  # noqa: E741
    a: float
    b: float

    def to_xyz(self, white: CieXyz = Illuminants.D65) -> CieXyz:
        fy = (self.l + 16.0) / 116.0
        fx = fy + self.a / 500.0
        fz = fy - self.b / 200.0
        return CieXyz(
            x=_f_inv(fx) * white.x,
            y=_f_inv(fy) * white.y,
            z=_f_inv(fz) * white.z,
        )

    @classmethod
    def from_xyz(cls, xyz: CieXyz, white: CieXyz = Illuminants.D65) -> CieLab:
        fx = _f(xyz.x / white.x)
        fy = _f(xyz.y / white.y)
        fz = _f(xyz.z / white.z)
        return cls(
            l=116.0 * fy - 16.0,
            a=500.0 * (fx - fy),
            b=200.0 * (fy - fz),
        )


__all__ = [
    "CieLab",
]
