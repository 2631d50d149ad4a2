"""Angle conversions and the tenth-of-degree angle type used by the scanner."""

from __future__ import annotations

import math
from dataclasses import dataclass

_INT16_MIN = -(2**15)
_INT16_MAX = 2**15 - 1


def radian_to_degree(angle_in_rad: float) -> float:
    """Convert an angle from radian to degree."""
    return angle_in_rad * 180.0 / math.pi


def degree_to_radian(angle_in_degree: float) -> float:
    """Convert an angle from degree to radian."""
    return (angle_in_degree / 180.0) * math.pi


def _round_half_away_from_zero(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def degree_to_tenth_degree(angle_in_degree: float) -> int:
    """Convert degrees to whole tenths of a degree, limited to the int16 range."""
    tenth_degree_rounded = _round_half_away_from_zero(10.0 * angle_in_degree)
    if not _INT16_MIN <= tenth_degree_rounded <= _INT16_MAX:
        raise ValueError(
            f"Angle {tenth_degree_rounded:g} (tenth of degree) is out of range."
        )
    return int(tenth_degree_rounded)


def rad_to_tenth_degree(angle_in_rad: float) -> int:
    """Convert radians to whole tenths of a degree."""
    return degree_to_tenth_degree(radian_to_degree(angle_in_rad))


def tenth_degree_to_rad(angle_in_tenth_degree: int) -> float:
    """Convert tenths of a degree to radians."""
    return degree_to_radian(float(angle_in_tenth_degree) / 10.0)


def _truncating_division(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True, order=True)
class TenthOfDegree:
    """An angle expressed in whole tenths of a degree, as used by the scanner."""

    value: int = 0

    @classmethod
    def from_rad(cls, angle_in_rad: float) -> TenthOfDegree:
        """Create an angle from a value in radian."""
        return cls(rad_to_tenth_degree(angle_in_rad))

    def to_rad(self) -> float:
        """Return the angle in radian."""
        return tenth_degree_to_rad(self.value)

    def __mul__(self, other: object) -> TenthOfDegree:
        if isinstance(other, TenthOfDegree):
            return TenthOfDegree(self.value * other.value)
        if isinstance(other, int):
            return TenthOfDegree(self.value * other)
        return NotImplemented

    def __rmul__(self, other: object) -> TenthOfDegree:
        if isinstance(other, int):
            return TenthOfDegree(other * self.value)
        return NotImplemented

    def __truediv__(self, other: object) -> TenthOfDegree:
        if isinstance(other, TenthOfDegree):
            return TenthOfDegree(_truncating_division(self.value, other.value))
        if isinstance(other, int):
            return TenthOfDegree(_truncating_division(self.value, other))
        return NotImplemented

    def __add__(self, other: object) -> TenthOfDegree:
        if isinstance(other, TenthOfDegree):
            return TenthOfDegree(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> TenthOfDegree:
        if isinstance(other, TenthOfDegree):
            return TenthOfDegree(self.value - other.value)
        return NotImplemented