# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: every color is a frozen dataclass; conversions return new values
- Channel-generic: each color carries the Channel encoding of its values
- Fixed shape: a space's channel tuple (and its order) never changes
- Record-ready: ``to_record()`` / ``to_dict()`` are stable interchange forms

Spaces:
- Rgb: gamma-encoded sRGB, the conversion hub for display spaces
- LinearRgb: sRGB primaries without the transfer curve
- Hsv, Hsl: cylindrical forms of Rgb, hue as an Angle
- YCbCr: BT.601 full-range luma/chroma, chroma centered on the midpoint
- Xyz, Yxy, Lab, Lch: CIE spaces, float channels only, each tied to a
  reference WhitePoint (D65 unless stated otherwise)

Values passed to constructors are native channel values and are saturated
into the encoding (``Rgb(300, 0, 0, channel=U8)`` stores r = 255).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Union

import numpy as np
from numpy.typing import NDArray

from tincture.schema.angle import Angle, as_angle
from tincture.schema.channel import F64, U8, Channel, channel_from_name
from tincture.schema.illuminant import D65, WhitePoint, white_point_from_name
from tincture.schema.names import SVG_COLORS

Number = Union[int, float]


# =============================================================================
# Base
# =============================================================================


class Color:
    """
    Behaviour shared by every color space.

    Subclasses are frozen dataclasses declaring their channel fields in
    record order, followed by ``alpha``, ``channel`` and (CIE spaces only)
    ``white_point``.
    """

    __slots__ = ()

    space: ClassVar[str] = ""
    fields: ClassVar[tuple[str, ...]] = ()
    hue_index: ClassVar[Optional[int]] = None
    float_only: ClassVar[bool] = False
    has_white_point: ClassVar[bool] = False

    alpha: Optional[Number]
    channel: Channel

    def __post_init__(self) -> None:
        channel = self.channel
        if not isinstance(channel, Channel):
            raise TypeError(f"channel must be a Channel, got {type(channel).__name__}")
        if self.float_only and channel.is_integer:
            raise ValueError(
                f"{type(self).__name__} requires a floating-point channel, got {channel.name}"
            )
        for i, name in enumerate(self.fields):
            value = getattr(self, name)
            if i == self.hue_index:
                object.__setattr__(self, name, as_angle(value))
            else:
                object.__setattr__(self, name, channel.coerce(value))
        if self.alpha is not None:
            object.__setattr__(self, "alpha", channel.coerce(self.alpha))
        if self.has_white_point and not isinstance(getattr(self, "white_point"), WhitePoint):
            raise TypeError("white_point must be a WhitePoint")

    # -------------------------------------------------------------------------
    # Alpha
    # -------------------------------------------------------------------------

    @property
    def has_alpha(self) -> bool:
        return self.alpha is not None

    @property
    def opacity(self) -> float:
        """Alpha as a normalized float; 1.0 when the color has no alpha."""
        if self.alpha is None:
            return 1.0
        return self.channel.to_unit(self.alpha)

    def with_alpha(self, alpha: Number):
        """Return a copy with ``alpha`` (a native channel value)."""
        return replace(self, alpha=alpha)

    def without_alpha(self):
        return replace(self, alpha=None)

    # -------------------------------------------------------------------------
    # Normalized components
    # -------------------------------------------------------------------------

    def _components(self) -> NDArray[np.float64]:
        """Decoded channel values (hue in degrees), the conversion kernels' input."""
        values = []
        for i, name in enumerate(self.fields):
            value = getattr(self, name)
            if i == self.hue_index:
                values.append(value.degrees)
            else:
                values.append(self.channel.to_unit(value))
        return np.array(values, dtype=np.float64)

    @classmethod
    def _from_components(
        cls,
        values,
        *,
        channel: Channel,
        alpha: Optional[float] = None,
        white_point: WhitePoint = D65,
    ):
        """Encode kernel output into a color. ``alpha`` is normalized."""
        kwargs: dict = {}
        for i, name in enumerate(cls.fields):
            v = float(values[i])
            kwargs[name] = Angle(v) if i == cls.hue_index else channel.from_unit(v)
        kwargs["alpha"] = None if alpha is None else channel.from_unit(alpha)
        kwargs["channel"] = channel
        if cls.has_white_point:
            kwargs["white_point"] = white_point
        return cls(**kwargs)

    def to_unit(self) -> tuple[float, ...]:
        """
        Normalized float components, alpha last when present.

        Hue channels are reported in degrees; CIE spaces report their
        natural ranges (Lab L in [0, 100], XYZ with Y(white) = 1).
        """
        values = tuple(float(v) for v in self._components())
        if self.alpha is not None:
            values += (self.opacity,)
        return values

    @classmethod
    def from_unit(
        cls,
        *values: float,
        alpha: Optional[float] = None,
        channel: Channel = F64,
        white_point: WhitePoint = D65,
    ):
        """Build a color from normalized components (the inverse of ``to_unit``)."""
        if len(values) != len(cls.fields):
            raise ValueError(f"{cls.__name__} expects {len(cls.fields)} components, got {len(values)}")
        return cls._from_components(values, channel=channel, alpha=alpha, white_point=white_point)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(
        self,
        target: type[Color],
        channel: Optional[Channel] = None,
        white_point: Optional[WhitePoint] = None,
    ) -> Color:
        """Convert to another space. See ``tincture.convert.convert``."""
        from tincture.convert.graph import convert
        return convert(self, target, channel=channel, white_point=white_point)

    def to_channel(self, channel: Channel) -> Color:
        """Same space, different encoding."""
        return self.convert(type(self), channel=channel)

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    def to_record(self) -> tuple[Number, ...]:
        """
        Ordered record of native values: the channel tuple, then alpha if set.

        Hue is recorded in degrees.
        """
        values = []
        for i, name in enumerate(self.fields):
            value = getattr(self, name)
            values.append(value.degrees if i == self.hue_index else value)
        if self.alpha is not None:
            values.append(self.alpha)
        return tuple(values)

    @classmethod
    def from_record(
        cls,
        record,
        *,
        channel: Channel = F64,
        white_point: WhitePoint = D65,
    ):
        values = tuple(record)
        n = len(cls.fields)
        if len(values) not in (n, n + 1):
            raise ValueError(
                f"{cls.__name__} record needs {n} or {n + 1} values, got {len(values)}"
            )
        kwargs: dict = dict(zip(cls.fields, values))
        kwargs["alpha"] = values[n] if len(values) > n else None
        kwargs["channel"] = channel
        if cls.has_white_point:
            kwargs["white_point"] = white_point
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Serialize to dictionary (space and channel metadata + named fields)."""
        d: dict = {"space": self.space, "channel": self.channel.name}
        d.update(zip(self.fields, self.to_record()))
        if self.alpha is not None:
            d["alpha"] = self.alpha
        if self.has_white_point:
            d["white_point"] = getattr(self, "white_point").name
        return d

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from dictionary."""
        space = data.get("space", cls.space)
        if space != cls.space:
            raise ValueError(f"{cls.__name__} cannot load a {space!r} record")
        kwargs: dict = {name: data[name] for name in cls.fields}
        kwargs["alpha"] = data.get("alpha")
        kwargs["channel"] = channel_from_name(data.get("channel", F64.name))
        if cls.has_white_point:
            kwargs["white_point"] = white_point_from_name(data.get("white_point", D65.name))
        return cls(**kwargs)


# =============================================================================
# RGB family
# =============================================================================


_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True, slots=True)
class Rgb(Color):
    """
    Gamma-encoded sRGB.

    This is the hub every display-oriented space converts through.

    Attributes:
        r, g, b: Native channel values
        alpha: Optional opacity in the same encoding
        channel: Encoding of all four values
    """
    r: Number
    g: Number
    b: Number
    alpha: Optional[Number] = None
    channel: Channel = F64

    space: ClassVar[str] = "rgb"
    fields: ClassVar[tuple[str, ...]] = ("r", "g", "b")

    @classmethod
    def from_hex(cls, hex_color: str, channel: Channel = U8) -> Rgb:
        """
        Parse "#RGB", "#RRGGBB" or "#RRGGBBAA" (the "#" is optional).
        """
        m = _HEX_RE.match(hex_color.strip())
        if not m:
            raise ValueError(f"Invalid hex color {hex_color!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        parts = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = parts[3] if len(parts) == 4 else None
        color = cls(parts[0], parts[1], parts[2], alpha=alpha, channel=U8)
        return color if channel == U8 else color.to_channel(channel)

    def to_hex(self) -> str:
        """Hex string like "#3941C8" ("#RRGGBBAA" when alpha is set)."""
        digits = [U8.from_unit(self.channel.to_unit(v)) for v in (self.r, self.g, self.b)]
        if self.alpha is not None:
            digits.append(U8.from_unit(self.opacity))
        return "#" + "".join(f"{d:02X}" for d in digits)

    @classmethod
    def from_name(cls, name: str, channel: Channel = U8) -> Rgb:
        """Look up an SVG color keyword ("cornflowerblue", "Light Grey", ...)."""
        key = name.replace(" ", "").lower()
        if key not in SVG_COLORS:
            raise ValueError(f"Unknown color name {name!r}")
        color = cls(*SVG_COLORS[key], channel=U8)
        return color if channel == U8 else color.to_channel(channel)


@dataclass(frozen=True, slots=True)
class LinearRgb(Color):
    """sRGB primaries in linear light (no transfer curve)."""
    r: Number
    g: Number
    b: Number
    alpha: Optional[Number] = None
    channel: Channel = F64

    space: ClassVar[str] = "linear_rgb"
    fields: ClassVar[tuple[str, ...]] = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class Hsv(Color):
    """
    Hue / saturation / value.

    Attributes:
        h: Hue (Angle; bare numbers are read as degrees)
        s, v: Native channel values
    """
    h: Angle
    s: Number
    v: Number
    alpha: Optional[Number] = None
    channel: Channel = F64

    space: ClassVar[str] = "hsv"
    fields: ClassVar[tuple[str, ...]] = ("h", "s", "v")
    hue_index: ClassVar[Optional[int]] = 0


@dataclass(frozen=True, slots=True)
class Hsl(Color):
    """Hue / saturation / lightness. Same conventions as Hsv."""
    h: Angle
    s: Number
    l: Number  # noqa: E741
    alpha: Optional[Number] = None
    channel: Channel = F64

    space: ClassVar[str] = "hsl"
    fields: ClassVar[tuple[str, ...]] = ("h", "s", "l")
    hue_index: ClassVar[Optional[int]] = 0


@dataclass(frozen=True, slots=True)
class YCbCr(Color):
    """
    Luma and blue/red difference chroma, BT.601 full range (JPEG/JFIF).

    Cb and Cr are offset by half the range, so neutral colors sit at the
    channel midpoint (128 for u8).
    """
    y: Number
    cb: Number
    cr: Number
    alpha: Optional[Number] = None
    channel: Channel = F64

    space: ClassVar[str] = "ycbcr"
    fields: ClassVar[tuple[str, ...]] = ("y", "cb", "cr")


# =============================================================================
# CIE family
# =============================================================================


@dataclass(frozen=True, slots=True)
class Xyz(Color):
    """
    CIE 1931 XYZ tristimulus values, scaled so the white point has Y = 1.
    """
    x: float
    y: float
    z: float
    alpha: Optional[float] = None
    channel: Channel = F64
    white_point: WhitePoint = D65

    space: ClassVar[str] = "xyz"
    fields: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    float_only: ClassVar[bool] = True
    has_white_point: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Yxy(Color):
    """CIE xyY: chromaticity (x, y) plus luminance."""
    x: float
    y: float
    luma: float
    alpha: Optional[float] = None
    channel: Channel = F64
    white_point: WhitePoint = D65

    space: ClassVar[str] = "yxy"
    fields: ClassVar[tuple[str, ...]] = ("x", "y", "luma")
    float_only: ClassVar[bool] = True
    has_white_point: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Lab(Color):
    """
    CIE 1976 L*a*b*.

    Attributes:
        l: Lightness, 0 (black) to 100 (reference white)
        a: Green (-) to red (+)
        b: Blue (-) to yellow (+)
        white_point: Reference white the values are relative to
    """
    l: float  # noqa: E741
    a: float
    b: float
    alpha: Optional[float] = None
    channel: Channel = F64
    white_point: WhitePoint = D65

    space: ClassVar[str] = "lab"
    fields: ClassVar[tuple[str, ...]] = ("l", "a", "b")
    float_only: ClassVar[bool] = True
    has_white_point: ClassVar[bool] = True

    @property
    def chroma(self) -> float:
        return math.hypot(self.a, self.b)

    @property
    def hue(self) -> Angle:
        """Hue angle of (a, b); 0° for neutral colors."""
        if self.chroma == 0.0:
            return Angle(0.0)
        return Angle(math.degrees(math.atan2(self.b, self.a)))

    def offset_chroma(self, offset: float) -> Lab:
        """Move ``offset`` units away from (or toward, if negative) the neutral axis."""
        c = self.chroma
        if c == 0.0:
            return self
        return replace(self, a=self.a + self.a / c * offset, b=self.b + self.b / c * offset)

    def __add__(self, other: Lab) -> Lab:
        if not isinstance(other, Lab):
            return NotImplemented
        return replace(self, l=self.l + other.l, a=self.a + other.a, b=self.b + other.b)

    def __mul__(self, factor: Number) -> Lab:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(self, l=self.l * factor, a=self.a * factor, b=self.b * factor)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True)
class Lch(Color):
    """CIE LCh(ab): Lab in polar form. Neutral colors get hue 0°."""
    l: float  # noqa: E741
    c: float
    h: Angle
    alpha: Optional[float] = None
    channel: Channel = F64
    white_point: WhitePoint = D65

    space: ClassVar[str] = "lch"
    fields: ClassVar[tuple[str, ...]] = ("l", "c", "h")
    hue_index: ClassVar[Optional[int]] = 2
    float_only: ClassVar[bool] = True
    has_white_point: ClassVar[bool] = True


# =============================================================================
# Registry
# =============================================================================


SPACES: dict[str, type[Color]] = {
    cls.space: cls
    for cls in (Rgb, LinearRgb, Hsv, Hsl, YCbCr, Xyz, Yxy, Lab, Lch)
}


def color_from_dict(data: dict) -> Color:
    """Deserialize any color produced by ``Color.to_dict()``."""
    try:
        cls = SPACES[data["space"]]
    except KeyError:
        raise ValueError(f"Unknown color space {data.get('space')!r}") from None
    return cls.from_dict(data)
