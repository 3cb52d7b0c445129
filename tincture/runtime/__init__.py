# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Interchange runtime for tincture.

Turns colors, angles and palettes into JSON documents and back. The
core types only promise a stable ordered record (``to_record``) and a
named mapping (``to_dict``); this layer adds the text encoding.
"""

from tincture.runtime.serializers import (
    SerializerFormat,
    dump_record,
    from_dict,
    from_json,
    palette_from_dict,
    to_json,
)
from tincture.schema.colors import color_from_dict

__all__ = [
    "to_json",
    "from_json",
    "from_dict",
    "color_from_dict",
    "palette_from_dict",
    "SerializerFormat",
    "dump_record",
]
