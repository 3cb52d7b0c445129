# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Channel encodings.

A channel is one numeric component of a color. Every encoding maps onto the
normalized range [0, 1]:

- Integer encodings (u8, u16) spread their full representable range over
  [0, 1]. Encoding rounds to nearest (ties away from zero) and saturates.
- Float encodings (f16, f32, f64) are the identity. Values outside [0, 1]
  are kept for HDR and out-of-gamut intermediates; only the dtype's
  precision and finite range apply.

Conversion code only calls ``to_unit`` / ``from_unit`` at its boundary and
never looks at which encoding it was handed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Channel:
    """
    A numeric encoding for color channels.

    Attributes:
        name: Short identifier used in records ("u8", "f32", ...)
        dtype: Backing NumPy scalar type
    """
    name: str
    dtype: type

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"

    @property
    def is_integer(self) -> bool:
        return bool(np.issubdtype(self.dtype, np.integer))

    @property
    def max_value(self) -> Number:
        """Native value that represents 1.0."""
        if self.is_integer:
            return int(np.iinfo(self.dtype).max)
        return 1.0

    @property
    def midpoint(self) -> Number:
        """Native value that represents 0.5 (chroma zero for YCbCr)."""
        return self.from_unit(0.5)

    def to_unit(self, value: Number) -> float:
        """Decode a native value to its normalized float."""
        if self.is_integer:
            return float(value) / self.max_value
        return float(value)

    def from_unit(self, unit: Number) -> Number:
        """Encode a normalized float as a native value (saturating)."""
        if self.is_integer:
            return self._saturate_int(float(unit) * self.max_value)
        return self._round_float(unit)

    def coerce(self, value: Number) -> Number:
        """Bring a raw native value into this encoding's representable set."""
        if self.is_integer:
            return self._saturate_int(float(value))
        return self._round_float(value)

    def _saturate_int(self, scaled: float) -> int:
        if math.isnan(scaled):
            return 0
        scaled = min(max(scaled, 0.0), float(self.max_value))
        # Non-negative here, so half-up is ties-away-from-zero.
        return int(math.floor(scaled + 0.5))

    def _round_float(self, value: Number) -> float:
        limit = float(np.finfo(self.dtype).max)
        v = min(max(float(value), -limit), limit)
        return float(self.dtype(v))


U8 = Channel("u8", np.uint8)
U16 = Channel("u16", np.uint16)
F16 = Channel("f16", np.float16)
F32 = Channel("f32", np.float32)
F64 = Channel("f64", np.float64)

CHANNELS = {c.name: c for c in (U8, U16, F16, F32, F64)}


def channel_from_name(name: str) -> Channel:
    """Look up a channel encoding by its record name."""
    try:
        return CHANNELS[name]
    except KeyError:
        raise ValueError(
            f"Unknown channel encoding {name!r}, expected one of {sorted(CHANNELS)}"
        ) from None


def convert_channel(value: Number, src: Channel, dst: Channel) -> Number:
    """Re-encode a native value from one channel encoding to another."""
    return dst.from_unit(src.to_unit(value))
