# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- Color values across channel encodings and color spaces.

Quick start::

    from tincture import Rgb, Hsv, Lab, U8, over

    red = Rgb(255, 0, 0, channel=U8)
    red.convert(Hsv)                    # Hsv(h=Angle(0.0, 'deg'), s=1, v=1, ...)
    red.convert(Lab)                    # float channels, D65
    over(red.with_alpha(128), Rgb.from_name("white"))
"""

from __future__ import annotations

__version__ = "1.0.0"

from tincture.convert import convert, mix, over, route
from tincture.quantize import InvalidArgument, Palette, QuantizeConfig, quantize
from tincture.schema import (
    D50,
    D65,
    F16,
    F32,
    F64,
    U8,
    U16,
    Angle,
    AngleUnit,
    Channel,
    Color,
    Hsl,
    Hsv,
    Lab,
    Lch,
    LinearRgb,
    Rgb,
    WhitePoint,
    Xyz,
    YCbCr,
    Yxy,
)

__all__ = [
    # Core API
    "convert",
    "route",
    "over",
    "mix",
    "quantize",
    # Types
    "Color",
    "Rgb",
    "LinearRgb",
    "Hsv",
    "Hsl",
    "YCbCr",
    "Xyz",
    "Yxy",
    "Lab",
    "Lch",
    "Angle",
    "AngleUnit",
    "Channel",
    "U8",
    "U16",
    "F16",
    "F32",
    "F64",
    "WhitePoint",
    "D65",
    "D50",
    # Quantization
    "Palette",
    "QuantizeConfig",
    "InvalidArgument",
    # Version
    "__version__",
]
