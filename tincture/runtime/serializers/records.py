# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
JSON serializer for colors, angles and palettes.

The JSON document is the value's ``to_dict()`` and nothing more, so a
round trip through ``to_json`` / ``from_json`` reproduces the value with
its channel encoding and white point.
"""

from __future__ import annotations

import json
from typing import Union

from tincture.quantize.palette import Palette
from tincture.runtime.serializers.base import SerializerFormat, dump_record
from tincture.schema.angle import Angle
from tincture.schema.colors import Color, color_from_dict

Serializable = Union[Color, Angle, Palette]


def to_json(
    value: Serializable,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a color, angle or palette as JSON.

    Args:
        value: The value to serialize.
        format: Output format (JSON or JSON_PRETTY).

    Returns:
        JSON string.

    Example (JSON_PRETTY)::

        {
          "space": "rgb",
          "channel": "u8",
          "r": 255,
          "g": 127,
          "b": 80
        }
    """
    if not isinstance(value, (Color, Angle, Palette)):
        raise TypeError(f"Cannot serialize {type(value).__name__}")
    data = value.to_dict()

    return dump_record(data, format)


def palette_from_dict(data: dict) -> Palette:
    """Deserialize a palette produced by ``Palette.to_dict()``."""
    return Palette.from_dict(data)


def from_dict(data: dict) -> Serializable:
    """Rebuild whichever value ``data`` describes."""
    if "space" in data:
        return color_from_dict(data)
    if "centroids" in data:
        return palette_from_dict(data)
    if "value" in data and "unit" in data:
        return Angle.from_dict(data)
    raise ValueError(f"Unrecognized record with keys {sorted(data)}")


def from_json(text: str) -> Serializable:
    """Parse JSON produced by ``to_json``."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return from_dict(data)
