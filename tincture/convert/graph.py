# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Conversion routing.

Spaces form a graph whose edges are the pairwise kernels in
``tincture.convert.colorspace``. Two hubs keep the graph small:

    hsv ─┐
    hsl ─┼─ rgb ─ linear_rgb ─ xyz ─┬─ lab ─ lch
  ycbcr ─┘                          └─ yxy

(plus a direct hsv ─ hsl edge). ``convert`` walks the shortest path and
composes the kernels on decoded float components; channel encodings are
only touched at the two ends.

The XYZ node is always relative to D65. Edges into and out of the CIE
spaces adapt to their white point with the Bradford transform.
"""

from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray

from tincture.convert.colorspace import (
    adapt_xyz,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
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
from tincture.schema.channel import F64, Channel
from tincture.schema.colors import Color
from tincture.schema.illuminant import D65, WhitePoint

logger = logging.getLogger(__name__)

Kernel = Callable[[NDArray[np.float64], tuple], NDArray[np.float64]]

_HUB_WHITE = D65.xyz


def _plain(fn: Callable[[NDArray[np.float64]], NDArray[np.float64]]) -> Kernel:
    """Lift a kernel that does not depend on the white point."""
    return lambda values, white: fn(values)


EDGES: dict[tuple[str, str], Kernel] = {
    ("rgb", "linear_rgb"): _plain(srgb_to_linear),
    ("linear_rgb", "rgb"): _plain(linear_to_srgb),
    ("linear_rgb", "xyz"): _plain(linear_rgb_to_xyz),
    ("xyz", "linear_rgb"): _plain(xyz_to_linear_rgb),
    ("rgb", "hsv"): _plain(rgb_to_hsv),
    ("hsv", "rgb"): _plain(hsv_to_rgb),
    ("rgb", "hsl"): _plain(rgb_to_hsl),
    ("hsl", "rgb"): _plain(hsl_to_rgb),
    ("hsv", "hsl"): _plain(hsv_to_hsl),
    ("hsl", "hsv"): _plain(hsl_to_hsv),
    ("rgb", "ycbcr"): _plain(rgb_to_ycbcr),
    ("ycbcr", "rgb"): _plain(ycbcr_to_rgb),
    ("xyz", "lab"): lambda v, white: xyz_to_lab(adapt_xyz(v, _HUB_WHITE, white), white),
    ("lab", "xyz"): lambda v, white: adapt_xyz(lab_to_xyz(v, white), white, _HUB_WHITE),
    ("lab", "lch"): _plain(lab_to_lch),
    ("lch", "lab"): _plain(lch_to_lab),
    ("xyz", "yxy"): lambda v, white: xyz_to_yxy(adapt_xyz(v, _HUB_WHITE, white)),
    ("yxy", "xyz"): lambda v, white: adapt_xyz(yxy_to_xyz(v), white, _HUB_WHITE),
}


def _neighbors() -> dict[str, list[str]]:
    graph: dict[str, list[str]] = {}
    for a, b in EDGES:
        graph.setdefault(a, []).append(b)
    return graph


_GRAPH = _neighbors()


@lru_cache(maxsize=None)
def route(src: str, dst: str) -> tuple[str, ...]:
    """
    Shortest chain of spaces from ``src`` to ``dst``, both included.

    Raises:
        ValueError: If either space is unknown.
    """
    if src not in _GRAPH or dst not in _GRAPH:
        raise ValueError(f"No conversion route from {src!r} to {dst!r}")
    if src == dst:
        return (src,)

    parents: dict[str, Optional[str]] = {src: None}
    queue = deque([src])
    while queue:
        node = queue.popleft()
        if node == dst:
            break
        for nxt in _GRAPH[node]:
            if nxt not in parents:
                parents[nxt] = node
                queue.append(nxt)

    path = [dst]
    while path[-1] != src:
        path.append(parents[path[-1]])
    path.reverse()
    logger.debug("Resolved conversion route %s", " -> ".join(path))
    return tuple(path)


def _target_channel(color: Color, target: type[Color], channel: Optional[Channel]) -> Channel:
    if channel is not None:
        return channel
    if target.float_only and color.channel.is_integer:
        return F64
    return color.channel


def convert(
    color: Color,
    target: type[Color],
    channel: Optional[Channel] = None,
    white_point: Optional[WhitePoint] = None,
) -> Color:
    """
    Convert a color to another space.

    Args:
        color: Any color value
        target: Target color class (Rgb, Hsv, Lab, ...)
        channel: Output encoding. Defaults to the input's encoding, or F64
            when the input is integer-encoded and the target is a CIE space.
        white_point: Reference white for CIE targets. Defaults to the input's
            white point (D65 for non-CIE inputs).

    Returns:
        A new color of type ``target``; the input itself when nothing changes.
        Alpha is carried over, re-encoded into the output channel.
        Out-of-gamut values are clipped on the way back into RGB.
    """
    if not isinstance(color, Color):
        raise TypeError(f"Expected a color, got {type(color).__name__}")
    if not (isinstance(target, type) and issubclass(target, Color) and target.space):
        raise TypeError(f"Expected a color class as target, got {target!r}")

    out_channel = _target_channel(color, target, channel)
    src_white: WhitePoint = getattr(color, "white_point") if color.has_white_point else D65
    dst_white: WhitePoint = D65
    if target.has_white_point:
        dst_white = white_point or src_white

    if (
        type(color) is target
        and out_channel == color.channel
        and (not target.has_white_point or dst_white == src_white)
    ):
        return color

    path = route(color.space, target.space)
    if src_white != dst_white and "xyz" not in path:
        path = route(color.space, "xyz") + route("xyz", target.space)[1:]

    values = color._components()
    if color.space == "xyz":
        values = adapt_xyz(values, src_white.xyz, _HUB_WHITE)

    white = src_white
    for a, b in zip(path, path[1:]):
        if a == "xyz":
            white = dst_white
        values = EDGES[(a, b)](values, white.xyz)

    if target.space == "xyz":
        values = adapt_xyz(values, _HUB_WHITE, dst_white.xyz)

    alpha = color.opacity if color.has_alpha else None
    return target._from_components(
        values, channel=out_channel, alpha=alpha, white_point=dst_white
    )
