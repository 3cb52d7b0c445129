# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Value types: channel encodings, angles, white points and colors.

All types in this module are immutable (frozen dataclasses). Converting,
re-encoding or changing alpha always produces a new value.
"""

from tincture.schema.angle import Angle, AngleUnit, as_angle
from tincture.schema.channel import (
    CHANNELS,
    F16,
    F32,
    F64,
    U8,
    U16,
    Channel,
    channel_from_name,
    convert_channel,
)
from tincture.schema.colors import (
    SPACES,
    Color,
    Hsl,
    Hsv,
    Lab,
    Lch,
    LinearRgb,
    Rgb,
    Xyz,
    YCbCr,
    Yxy,
    color_from_dict,
)
from tincture.schema.illuminant import D50, D65, WHITE_POINTS, WhitePoint, white_point_from_name
from tincture.schema.names import SVG_COLORS

__all__ = [
    # Channels
    "Channel",
    "U8",
    "U16",
    "F16",
    "F32",
    "F64",
    "CHANNELS",
    "channel_from_name",
    "convert_channel",
    # Angles
    "Angle",
    "AngleUnit",
    "as_angle",
    # White points
    "WhitePoint",
    "D65",
    "D50",
    "WHITE_POINTS",
    "white_point_from_name",
    # Colors
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
    "SPACES",
    "SVG_COLORS",
    "color_from_dict",
]
