# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Serializers for tincture values.

All serializers write the value's record exactly, with no rounding or
reinterpretation.
"""

from tincture.runtime.serializers.base import SerializerFormat, dump_record
from tincture.runtime.serializers.records import (
    from_dict,
    from_json,
    palette_from_dict,
    to_json,
)

__all__ = [
    "SerializerFormat",
    "dump_record",
    "to_json",
    "from_json",
    "from_dict",
    "palette_from_dict",
]
