# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Circular quantities for hue.

An Angle is always stored normalized into [0, period). Arithmetic wraps,
interpolation takes the short arc, and equality is modulo the period:

    >>> Angle(350) + 20
    Angle(10.0, 'deg')
    >>> Angle(350).lerp(Angle(10), 0.5)
    Angle(0.0, 'deg')
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Number = Union[int, float]

# Equality resolution: angles are compared on degrees rounded to this many digits
_EQ_DIGITS = 9


class AngleUnit(Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    @property
    def period(self) -> float:
        return 360.0 if self is AngleUnit.DEGREES else math.tau


def _wrap(value: float, period: float) -> float:
    if not math.isfinite(value):
        return 0.0
    wrapped = value % period
    # Tiny negative inputs can round up to exactly one period.
    if wrapped >= period:
        return 0.0
    return wrapped


@dataclass(frozen=True, slots=True, eq=False)
class Angle:
    """
    An angle normalized into [0, period).

    Attributes:
        value: Magnitude in ``unit``, wrapped on construction
        unit: Degrees (default) or radians
    """
    value: float
    unit: AngleUnit = AngleUnit.DEGREES

    def __post_init__(self) -> None:
        unit = AngleUnit(self.unit)
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "value", _wrap(float(self.value), unit.period))

    def __repr__(self) -> str:
        return f"Angle({self.value!r}, {self.unit.value!r})"

    @classmethod
    def from_degrees(cls, value: Number) -> Angle:
        return cls(value, AngleUnit.DEGREES)

    @classmethod
    def from_radians(cls, value: Number) -> Angle:
        return cls(value, AngleUnit.RADIANS)

    @property
    def degrees(self) -> float:
        if self.unit is AngleUnit.DEGREES:
            return self.value
        return math.degrees(self.value)

    @property
    def radians(self) -> float:
        if self.unit is AngleUnit.RADIANS:
            return self.value
        return math.radians(self.value)

    @property
    def period(self) -> float:
        return self.unit.period

    def to_degrees(self) -> Angle:
        return Angle(self.degrees, AngleUnit.DEGREES)

    def to_radians(self) -> Angle:
        return Angle(self.radians, AngleUnit.RADIANS)

    def __float__(self) -> float:
        return self.value

    # -------------------------------------------------------------------------
    # Arithmetic (results keep the left operand's unit)
    # -------------------------------------------------------------------------

    def _operand(self, other: object) -> Optional[float]:
        """Express ``other`` in this angle's unit, or None if unsupported."""
        if isinstance(other, Angle):
            return other.degrees if self.unit is AngleUnit.DEGREES else other.radians
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __add__(self, other: Union[Angle, Number]) -> Angle:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Angle(self.value + v, self.unit)

    def __radd__(self, other: Number) -> Angle:
        return self.__add__(other)

    def __sub__(self, other: Union[Angle, Number]) -> Angle:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Angle(self.value - v, self.unit)

    def __rsub__(self, other: Number) -> Angle:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Angle(v - self.value, self.unit)

    def __neg__(self) -> Angle:
        return Angle(-self.value, self.unit)

    def __mul__(self, factor: Number) -> Angle:
        if not isinstance(factor, (int, float)) or isinstance(factor, bool):
            return NotImplemented
        return Angle(self.value * factor, self.unit)

    __rmul__ = __mul__

    def delta(self, other: Union[Angle, Number]) -> float:
        """
        Signed shortest-arc difference ``other - self``.

        Result lies in (-period/2, period/2], in this angle's unit. Exactly
        opposite angles resolve to the positive half-turn.
        """
        v = self._operand(other)
        if v is None:
            raise TypeError(f"Cannot measure an angle against {type(other).__name__}")
        period = self.period
        d = (v - self.value) % period
        if d > period / 2:
            d -= period
        return d

    def lerp(self, other: Union[Angle, Number], t: float) -> Angle:
        """Interpolate along the short arc; ``t`` = 0 is self, 1 is other."""
        return Angle(self.value + t * self.delta(other), self.unit)

    # -------------------------------------------------------------------------
    # Equality modulo the period
    # -------------------------------------------------------------------------

    def _key(self) -> float:
        """Degrees quantized to the equality resolution, with 360 folded to 0."""
        return round(self.degrees, _EQ_DIGITS) % 360.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    def to_record(self) -> tuple[float, str]:
        """Ordered record: (value, unit)."""
        return (self.value, self.unit.value)

    @classmethod
    def from_record(cls, record) -> Angle:
        value, unit = record
        return cls(value, AngleUnit(unit))

    def to_dict(self) -> dict:
        return {"value": self.value, "unit": self.unit.value}

    @classmethod
    def from_dict(cls, data: dict) -> Angle:
        return cls(data["value"], AngleUnit(data.get("unit", "deg")))


def as_angle(value: Union[Angle, Number]) -> Angle:
    """Coerce a bare number (degrees) to an Angle; Angles pass through."""
    if isinstance(value, Angle):
        return value
    return Angle(value, AngleUnit.DEGREES)
