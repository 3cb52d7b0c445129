# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for the runtime JSON serializers."""

import json

import pytest

from tincture.quantize import quantize
from tincture.runtime import (
    SerializerFormat,
    color_from_dict,
    dump_record,
    from_dict,
    from_json,
    palette_from_dict,
    to_json,
)
from tincture.schema import D50, F32, U8, Angle, Hsv, Lab, Rgb


@pytest.fixture
def coral():
    return Rgb(255, 127, 80, channel=U8)


@pytest.fixture
def palette():
    return quantize(
        [Rgb(255, 0, 0, channel=U8), Rgb(0, 255, 0, channel=U8), Rgb(255, 0, 0, channel=U8)],
        4,
    )


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

class TestToJson:

    def test_compact(self, coral):
        assert to_json(coral) == '{"space":"rgb","channel":"u8","r":255,"g":127,"b":80}'

    def test_pretty(self, coral):
        text = to_json(coral, format=SerializerFormat.JSON_PRETTY)
        assert text.startswith("{\n  ")
        assert json.loads(text) == coral.to_dict()

    def test_angle(self):
        assert json.loads(to_json(Angle(45))) == {"value": 45.0, "unit": "deg"}

    def test_palette(self, palette):
        data = json.loads(to_json(palette))
        assert data["assignments"] == [0, 1, 0]
        assert data["centroids"][1]["g"] == 255

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_json({"space": "rgb"})

    def test_format_dump_options(self):
        assert SerializerFormat.JSON.dump_options == {"separators": (",", ":")}
        assert SerializerFormat.JSON_PRETTY.dump_options == {"indent": 2}

    def test_dump_record(self):
        assert dump_record({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'
        assert dump_record({"a": 1}, SerializerFormat.JSON_PRETTY) == '{\n  "a": 1\n}'

    def test_dump_record_accepts_format_value(self):
        assert dump_record({"a": 1}, "json_pretty") == '{\n  "a": 1\n}'


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------

class TestFromJson:

    def test_color_roundtrip(self, coral):
        assert from_json(to_json(coral)) == coral

    def test_cie_roundtrip_keeps_white_point_and_channel(self):
        lab = Lab(53.2, 80.1, 67.2, alpha=0.5, channel=F32, white_point=D50)
        restored = from_json(to_json(lab))
        assert restored == lab
        assert restored.white_point == D50
        assert restored.channel == F32

    def test_hue_roundtrip(self):
        hsv = Hsv(Angle(200), 0.5, 0.75)
        assert from_json(to_json(hsv, format=SerializerFormat.JSON_PRETTY)) == hsv

    def test_angle_roundtrip(self):
        assert from_json(to_json(Angle.from_radians(1.5))) == Angle.from_radians(1.5)

    def test_palette_roundtrip(self, palette):
        assert from_json(to_json(palette)) == palette

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            from_json("[1, 2, 3]")

    def test_unrecognized_record(self):
        with pytest.raises(ValueError):
            from_json('{"x": 1}')


class TestDictHelpers:

    def test_from_dict_dispatch(self, coral, palette):
        assert from_dict(coral.to_dict()) == coral
        assert from_dict(palette.to_dict()) == palette
        assert from_dict(Angle(10).to_dict()) == Angle(10)

    def test_color_from_dict(self, coral):
        assert color_from_dict(coral.to_dict()) == coral

    def test_palette_from_dict(self, palette):
        assert palette_from_dict(palette.to_dict()) == palette
