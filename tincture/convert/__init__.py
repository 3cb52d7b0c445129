# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Conversion engine: numeric kernels, hub routing and compositing.
"""

from tincture.convert.colorspace import (
    adapt_xyz,
    hsl_to_rgb,
    hsv_to_rgb,
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    linear_rgb_to_xyz,
    linear_to_srgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_ycbcr,
    srgb_to_linear,
    xyz_to_lab,
    xyz_to_linear_rgb,
    xyz_to_yxy,
    ycbcr_to_rgb,
    yxy_to_xyz,
)
from tincture.convert.compose import mix, over
from tincture.convert.graph import convert, route

__all__ = [
    "convert",
    "route",
    "over",
    "mix",
    "adapt_xyz",
    "srgb_to_linear",
    "linear_to_srgb",
    "linear_rgb_to_xyz",
    "xyz_to_linear_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "xyz_to_yxy",
    "yxy_to_xyz",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_ycbcr",
    "ycbcr_to_rgb",
]
