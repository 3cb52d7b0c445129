# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Output formats shared by the record serializers."""

from __future__ import annotations

import json
from enum import Enum


class SerializerFormat(Enum):
    """Text layout of a serialized record."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"

    @property
    def dump_options(self) -> dict:
        """Keyword arguments for ``json.dumps`` producing this layout."""
        if self is SerializerFormat.JSON_PRETTY:
            return {"indent": 2}
        return {"separators": (",", ":")}


def dump_record(data: dict, format: SerializerFormat = SerializerFormat.JSON) -> str:
    """Encode a record mapping (a ``to_dict()`` result) as JSON text."""
    return json.dumps(data, **SerializerFormat(format).dump_options)
