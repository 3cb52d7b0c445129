# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Alpha compositing and interpolation.

``over`` blends in linear light: gamma-encoded inputs are decoded through
the sRGB transfer curve, composited, then re-encoded. Blending the encoded
values directly darkens every edge.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from tincture.schema.angle import Angle
from tincture.schema.channel import F64
from tincture.schema.colors import Color, LinearRgb
from tincture.schema.illuminant import D65, WhitePoint


def _white_point(color: Color) -> Optional[WhitePoint]:
    return getattr(color, "white_point") if color.has_white_point else None


def _like(color: Color, reference: Color) -> Color:
    """``color`` in the reference's space, encoding and white point."""
    return color.convert(
        type(reference), channel=reference.channel, white_point=_white_point(reference)
    )


def over(top: Color, bottom: Color) -> Color:
    """
    Porter-Duff "over" with straight (non-premultiplied) alpha.

        out_a = ta + ba * (1 - ta)
        out_c = (tc * ta + bc * ba * (1 - ta)) / out_a

    In premultiplied terms this is ``out_c * out_a = tc * ta + bc * ba * (1 - ta)``;
    over an opaque bottom it reduces to ``tc * ta + bc * (1 - ta)``.

    Colors without alpha are opaque. The result is expressed in the
    bottom's space and channel; it carries alpha unless neither input does.

    A fully opaque top is returned as-is (converted to the bottom's space);
    a fully transparent top returns the bottom unchanged.
    """
    ta = min(max(top.opacity, 0.0), 1.0)
    ba = min(max(bottom.opacity, 0.0), 1.0)

    if ta <= 0.0:
        return bottom
    if ta >= 1.0:
        result = _like(top, bottom)
        if bottom.has_alpha and not result.has_alpha:
            result = result.with_alpha(result.channel.max_value)
        return result

    tc = top.convert(LinearRgb, channel=F64)._components()
    bc = bottom.convert(LinearRgb, channel=F64)._components()

    out_a = ta + ba * (1.0 - ta)
    out_c = (tc * ta + bc * ba * (1.0 - ta)) / out_a

    keep_alpha = top.has_alpha or bottom.has_alpha
    blended = LinearRgb._from_components(
        out_c, channel=F64, alpha=out_a if keep_alpha else None
    )
    return _like(blended, bottom)


def mix(a: Color, b: Color, t: float) -> Color:
    """
    Interpolate from ``a`` (t = 0) to ``b`` (t = 1) in ``a``'s space.

    Hue channels follow the shorter arc; all other channels, alpha
    included, interpolate linearly on their normalized values. ``t``
    outside [0, 1] extrapolates.
    """
    other = _like(b, a)
    av = a._components()
    bv = other._components()

    values = av + (bv - av) * t
    if a.hue_index is not None:
        i = a.hue_index
        values[i] = Angle(av[i]).lerp(bv[i], t).degrees

    alpha = None
    if a.has_alpha or b.has_alpha:
        alpha = a.opacity + (b.opacity - a.opacity) * t

    return type(a)._from_components(
        np.asarray(values),
        channel=a.channel,
        alpha=alpha,
        white_point=_white_point(a) or D65,
    )
