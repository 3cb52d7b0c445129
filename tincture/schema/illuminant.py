# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Reference white points for the CIE XYZ family (XYZ, xyY, Lab, LCh)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WhitePoint:
    """
    Tristimulus values of a reference white, normalized to Y = 1.

    Attributes:
        name: Illuminant name used in records ("D65", "D50")
        x, y, z: XYZ of the white
    """
    name: str
    x: float
    y: float
    z: float

    @property
    def xyz(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# 2° standard observer
D65 = WhitePoint("D65", 0.95047, 1.0, 1.08883)
D50 = WhitePoint("D50", 0.96422, 1.0, 0.82521)

WHITE_POINTS = {wp.name: wp for wp in (D65, D50)}


def white_point_from_name(name: str) -> WhitePoint:
    try:
        return WHITE_POINTS[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown white point {name!r}, expected one of {sorted(WHITE_POINTS)}"
        ) from None
