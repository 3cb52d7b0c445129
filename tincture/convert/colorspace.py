# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color space conversion kernels.

Every kernel maps an array of shape (..., 3) to an array of shape (..., 3)
of float64 values in the space's natural units:

- sRGB, linear RGB, YCbCr, saturation/value/lightness: normalized [0, 1]
- Hue: degrees [0, 360)
- XYZ / xyY: Y(white) = 1
- Lab / LCh: L in [0, 100]

Conversion chain for perceptual spaces:
    sRGB → Linear RGB → XYZ (D65) → [Bradford] → XYZ (white) → Lab → LCh

References:
- sRGB: IEC 61966-2-1
- XYZ / Lab: http://www.brucelindbloom.com
- YCbCr: ITU-R BT.601, full range as used by JPEG/JFIF
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Negative inputs stay on the linear segment.
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Output is clipped to [0, 1].
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ (sRGB primaries, D65)
# =============================================================================

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to XYZ relative to D65."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert D65 XYZ to linear RGB.

    Out-of-gamut results are clipped to [0, 1].
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    rgb = np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)
    return np.clip(rgb, 0.0, 1.0)


# =============================================================================
# Chromatic adaptation
# =============================================================================

_BRADFORD = np.array([
    [0.8951000, 0.2664000, -0.1614000],
    [-0.7502000, 1.7135000, 0.0367000],
    [0.0389000, -0.0685000, 1.0296000],
], dtype=np.float64)

_BRADFORD_INV = np.linalg.inv(_BRADFORD)


@lru_cache(maxsize=16)
def _adaptation_matrix(
    src_white: tuple[float, float, float],
    dst_white: tuple[float, float, float],
) -> NDArray[np.float64]:
    src_lms = _BRADFORD @ np.array(src_white, dtype=np.float64)
    dst_lms = _BRADFORD @ np.array(dst_white, dtype=np.float64)
    return _BRADFORD_INV @ np.diag(dst_lms / src_lms) @ _BRADFORD


def adapt_xyz(
    xyz: NDArray[np.float64],
    src_white: tuple[float, float, float],
    dst_white: tuple[float, float, float],
) -> NDArray[np.float64]:
    """
    Bradford chromatic adaptation of XYZ from one white point to another.

    Args:
        xyz: Array of shape (..., 3)
        src_white: XYZ of the white the values are relative to
        dst_white: XYZ of the white to adapt to

    Returns:
        Array of shape (..., 3); the input itself when the whites match
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if tuple(src_white) == tuple(dst_white):
        return xyz
    m = _adaptation_matrix(tuple(src_white), tuple(dst_white))
    return np.einsum('...j,ij->...i', xyz, m)


# =============================================================================
# XYZ ↔ Lab ↔ LCh
# =============================================================================

# CIE standard: ε = (6/29)^3, κ = (29/3)^3
_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def xyz_to_lab(
    xyz: NDArray[np.float64],
    white: tuple[float, float, float],
) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE Lab relative to ``white``.

    Uses the cube root above ε and the linear segment below it, so the
    transform stays finite and invertible near black.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    ratio = xyz / np.asarray(white, dtype=np.float64)
    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        (_LAB_KAPPA * ratio + 16.0) / 116.0
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(
    lab: NDArray[np.float64],
    white: tuple[float, float, float],
) -> NDArray[np.float64]:
    """Convert CIE Lab relative to ``white`` back to XYZ."""
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    f3 = f ** 3
    ratio = np.where(
        f3 > _LAB_EPSILON,
        f3,
        (116.0 * f - 16.0) / _LAB_KAPPA
    )
    return ratio * np.asarray(white, dtype=np.float64)


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert Lab to LCh.

    H is in degrees [0, 360); neutral colors (C = 0) get H = 0.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    H = np.where(C > 1e-12, H, 0.0)
    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert LCh (H in degrees) to Lab."""
    lch = np.asarray(lch, dtype=np.float64)
    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)
    return np.stack([L, a, b], axis=-1)


# =============================================================================
# XYZ ↔ xyY
# =============================================================================


def xyz_to_yxy(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to xyY.

    Black has no chromaticity; it maps to x = y = 0.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    total = np.sum(xyz, axis=-1)
    nonzero = total != 0.0
    safe = np.where(nonzero, total, 1.0)
    x = np.where(nonzero, xyz[..., 0] / safe, 0.0)
    y = np.where(nonzero, xyz[..., 1] / safe, 0.0)
    return np.stack([x, y, xyz[..., 1]], axis=-1)


def yxy_to_xyz(yxy: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert xyY to XYZ (y = 0 maps to black)."""
    yxy = np.asarray(yxy, dtype=np.float64)
    x, y, Y = yxy[..., 0], yxy[..., 1], yxy[..., 2]
    nonzero = y != 0.0
    safe = np.where(nonzero, y, 1.0)
    X = np.where(nonzero, x * Y / safe, 0.0)
    Z = np.where(nonzero, (1.0 - x - y) * Y / safe, 0.0)
    return np.stack([X, np.where(nonzero, Y, 0.0), Z], axis=-1)


# =============================================================================
# RGB ↔ HSV / HSL
# =============================================================================


def _sector_hue(rgb: NDArray[np.float64], mx, chroma) -> NDArray[np.float64]:
    """
    Six-sector hue in degrees.

    Sector priority on ties is r, then g, then b, so each boundary belongs
    to exactly one sector. Zero chroma gives hue 0.
    """
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    safe = np.where(chroma > 0.0, chroma, 1.0)
    h = np.select(
        [chroma <= 0.0, mx == r, mx == g],
        [0.0, ((g - b) / safe) % 6.0, (b - r) / safe + 2.0],
        default=(r - g) / safe + 4.0,
    )
    return (h * 60.0) % 360.0


def _sector_rgb(hue, chroma, m) -> NDArray[np.float64]:
    """Inverse of the six-sector decomposition: (hue, chroma, offset) → RGB."""
    h = (np.asarray(hue, dtype=np.float64) % 360.0) / 60.0
    x = chroma * (1.0 - np.abs(h % 2.0 - 1.0))
    z = np.zeros_like(chroma)
    sector = np.floor(h) % 6
    conds = [sector == i for i in range(6)]
    r = np.select(conds, [chroma, x, z, z, x, chroma])
    g = np.select(conds, [x, chroma, chroma, x, z, z])
    b = np.select(conds, [z, z, x, chroma, chroma, x])
    return np.stack([r + m, g + m, b + m], axis=-1)


def rgb_to_hsv(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB [0,1] to HSV (H in degrees, S and V in [0,1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    chroma = mx - mn

    h = _sector_hue(rgb, mx, chroma)
    s = np.where(mx > 0.0, chroma / np.where(mx > 0.0, mx, 1.0), 0.0)
    return np.stack([h, s, mx], axis=-1)


def hsv_to_rgb(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSV to sRGB [0,1]."""
    hsv = np.asarray(hsv, dtype=np.float64)
    s = hsv[..., 1]
    v = hsv[..., 2]
    chroma = v * s
    return _sector_rgb(hsv[..., 0], chroma, v - chroma)


def rgb_to_hsl(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB [0,1] to HSL (H in degrees, S and L in [0,1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    chroma = mx - mn

    h = _sector_hue(rgb, mx, chroma)
    lightness = (mx + mn) / 2.0
    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    ok = (chroma > 0.0) & (denom > 0.0)
    s = np.where(ok, chroma / np.where(ok, denom, 1.0), 0.0)
    return np.stack([h, s, lightness], axis=-1)


def hsl_to_rgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL to sRGB [0,1]."""
    hsl = np.asarray(hsl, dtype=np.float64)
    s = hsl[..., 1]
    lightness = hsl[..., 2]
    chroma = (1.0 - np.abs(2.0 * lightness - 1.0)) * s
    return _sector_rgb(hsl[..., 0], chroma, lightness - chroma / 2.0)


def hsv_to_hsl(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSV to HSL directly; hue passes through."""
    hsv = np.asarray(hsv, dtype=np.float64)
    s, v = hsv[..., 1], hsv[..., 2]
    lightness = v * (1.0 - s / 2.0)
    denom = np.minimum(lightness, 1.0 - lightness)
    ok = denom > 0.0
    s_l = np.where(ok, (v - lightness) / np.where(ok, denom, 1.0), 0.0)
    return np.stack([hsv[..., 0], s_l, lightness], axis=-1)


def hsl_to_hsv(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL to HSV directly; hue passes through."""
    hsl = np.asarray(hsl, dtype=np.float64)
    s, lightness = hsl[..., 1], hsl[..., 2]
    v = lightness + s * np.minimum(lightness, 1.0 - lightness)
    ok = v > 0.0
    s_v = np.where(ok, 2.0 * (1.0 - lightness / np.where(ok, v, 1.0)), 0.0)
    return np.stack([hsl[..., 0], s_v, v], axis=-1)


# =============================================================================
# RGB ↔ YCbCr (BT.601 full range)
# =============================================================================

_RGB_TO_YCBCR = np.array([
    [0.299, 0.587, 0.114],
    [-0.168736, -0.331264, 0.5],
    [0.5, -0.418688, -0.081312],
], dtype=np.float64)

_YCBCR_TO_RGB = np.linalg.inv(_RGB_TO_YCBCR)

# Chroma is centered on the channel midpoint
_YCBCR_OFFSET = np.array([0.0, 0.5, 0.5], dtype=np.float64)


def rgb_to_ycbcr(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert gamma-encoded sRGB [0,1] to YCbCr [0,1] (Cb, Cr centered at 0.5)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_YCBCR) + _YCBCR_OFFSET


def ycbcr_to_rgb(ycbcr: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert YCbCr back to sRGB [0,1].

    YCbCr covers more than the RGB cube; results are clipped to [0, 1].
    """
    ycbcr = np.asarray(ycbcr, dtype=np.float64)
    rgb = np.einsum('...j,ij->...i', ycbcr - _YCBCR_OFFSET, _YCBCR_TO_RGB)
    return np.clip(rgb, 0.0, 1.0)
