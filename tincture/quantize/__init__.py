# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Palette quantization. Separate from the conversion core; nothing in
``tincture.schema`` or ``tincture.convert`` imports it.
"""

from tincture.quantize.palette import (
    InvalidArgument,
    Palette,
    QuantizeConfig,
    quantize,
)

__all__ = [
    "InvalidArgument",
    "Palette",
    "QuantizeConfig",
    "quantize",
]
