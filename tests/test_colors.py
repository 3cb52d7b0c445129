# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for color value types and their records."""

import dataclasses

import pytest

from tincture.schema import (
    D50,
    D65,
    F32,
    F64,
    U8,
    U16,
    Angle,
    Hsl,
    Hsv,
    Lab,
    Lch,
    Rgb,
    Xyz,
    YCbCr,
    color_from_dict,
)


class TestConstruction:
    """Constructors saturate values into the channel encoding."""

    def test_u8_saturation(self):
        c = Rgb(300, -5, 12.6, channel=U8)
        assert (c.r, c.g, c.b) == (255, 0, 13)

    def test_default_channel_is_f64(self):
        c = Rgb(0.5, 0.25, 1.5)
        assert c.channel == F64
        assert c.b == 1.5

    def test_f32_precision(self):
        c = Lab(50.0, 10.1, -3.3, channel=F32)
        assert c.a == pytest.approx(10.1, abs=1e-5)
        assert c.a != 10.1

    def test_hue_becomes_angle(self):
        c = Hsv(370, 1.0, 1.0)
        assert isinstance(c.h, Angle)
        assert c.h == Angle(10)

    def test_hue_accepts_angle(self):
        c = Hsl(Angle.from_radians(0.5), 0.5, 0.5)
        assert c.h.radians == pytest.approx(0.5)

    def test_alpha_saturated(self):
        c = Rgb(0, 0, 0, alpha=1000, channel=U8)
        assert c.alpha == 255

    def test_cie_rejects_integer_channel(self):
        with pytest.raises(ValueError):
            Lab(50, 0, 0, channel=U8)
        with pytest.raises(ValueError):
            Xyz(0.1, 0.1, 0.1, channel=U16)

    def test_channel_type_checked(self):
        with pytest.raises(TypeError):
            Rgb(1, 1, 1, channel="u8")

    def test_white_point_type_checked(self):
        with pytest.raises(TypeError):
            Xyz(0.1, 0.1, 0.1, white_point="D65")

    def test_cie_default_white_point(self):
        assert Lab(50, 0, 0).white_point == D65
        assert Lch(50, 0, 0, white_point=D50).white_point == D50

    def test_frozen(self):
        c = Rgb(0, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 1  # type: ignore[misc]

    def test_equality(self):
        assert Rgb(1, 2, 3, channel=U8) == Rgb(1, 2, 3, channel=U8)
        assert Rgb(1, 2, 3, channel=U8) != Rgb(1, 2, 3, channel=U16)
        assert Hsv(0, 1, 1) == Hsv(360, 1, 1)


class TestAlpha:

    def test_opacity_without_alpha(self):
        c = Rgb(0, 0, 0, channel=U8)
        assert not c.has_alpha
        assert c.opacity == 1.0

    def test_opacity_decodes(self):
        c = Rgb(0, 0, 0, alpha=51, channel=U8)
        assert c.has_alpha
        assert c.opacity == pytest.approx(0.2)

    def test_with_and_without_alpha(self):
        c = Rgb(10, 20, 30, channel=U8)
        translucent = c.with_alpha(128)
        assert translucent.alpha == 128
        assert translucent.without_alpha() == c
        assert c.alpha is None


class TestUnitComponents:

    def test_to_unit(self):
        c = Rgb(255, 0, 51, channel=U8)
        assert c.to_unit() == pytest.approx((1.0, 0.0, 0.2))

    def test_to_unit_alpha_last(self):
        c = Rgb(255, 0, 0, alpha=255, channel=U8)
        assert c.to_unit() == pytest.approx((1.0, 0.0, 0.0, 1.0))

    def test_to_unit_hue_in_degrees(self):
        assert Hsv(90, 0.5, 0.25).to_unit() == pytest.approx((90.0, 0.5, 0.25))

    def test_from_unit(self):
        c = Rgb.from_unit(1.0, 0.5, 0.0, channel=U8)
        assert c == Rgb(255, 128, 0, channel=U8)

    def test_from_unit_alpha(self):
        c = Rgb.from_unit(1.0, 0.0, 0.0, alpha=0.5, channel=U8)
        assert c.alpha == 128

    def test_from_unit_arity(self):
        with pytest.raises(ValueError):
            Rgb.from_unit(1.0, 0.5)


class TestRecords:
    """Records are ordered by channel tuple, alpha last."""

    def test_to_record(self):
        assert Rgb(255, 128, 0, channel=U8).to_record() == (255, 128, 0)
        assert Rgb(255, 128, 0, alpha=64, channel=U8).to_record() == (255, 128, 0, 64)

    def test_hue_record_in_degrees(self):
        assert Hsv(120, 0.5, 0.25).to_record() == (120.0, 0.5, 0.25)
        assert Lch(50, 20, 400).to_record() == pytest.approx((50.0, 20.0, 40.0))

    def test_from_record(self):
        assert Rgb.from_record((1, 2, 3), channel=U8) == Rgb(1, 2, 3, channel=U8)
        c = Rgb.from_record((1, 2, 3, 4), channel=U8)
        assert c.alpha == 4

    def test_from_record_white_point(self):
        c = Lab.from_record((50.0, 1.0, 2.0), white_point=D50)
        assert c.white_point == D50

    def test_from_record_arity(self):
        with pytest.raises(ValueError):
            Rgb.from_record((1, 2))
        with pytest.raises(ValueError):
            Rgb.from_record((1, 2, 3, 4, 5))

    def test_to_dict(self):
        d = Rgb(255, 127, 80, channel=U8).to_dict()
        assert d == {"space": "rgb", "channel": "u8", "r": 255, "g": 127, "b": 80}

    def test_to_dict_cie(self):
        d = Lab(50.0, 10.0, -10.0, alpha=0.5).to_dict()
        assert d["space"] == "lab"
        assert d["white_point"] == "D65"
        assert d["alpha"] == 0.5

    def test_dict_roundtrip(self):
        for c in (
            Rgb(255, 127, 80, alpha=3, channel=U8),
            Hsl(200, 0.5, 0.4, channel=F32),
            YCbCr(0.5, 0.4, 0.6),
            Lch(60.0, 30.0, 250.0, white_point=D50),
        ):
            assert type(c).from_dict(c.to_dict()) == c
            assert color_from_dict(c.to_dict()) == c

    def test_from_dict_wrong_space(self):
        with pytest.raises(ValueError):
            Rgb.from_dict({"space": "hsv", "h": 0, "s": 0, "v": 0})

    def test_color_from_dict_unknown_space(self):
        with pytest.raises(ValueError):
            color_from_dict({"space": "cmyk"})

    def test_unknown_channel_name(self):
        with pytest.raises(ValueError):
            color_from_dict({"space": "rgb", "channel": "u4", "r": 0, "g": 0, "b": 0})


class TestHexAndNames:

    def test_from_hex(self):
        assert Rgb.from_hex("#FF7F50") == Rgb(255, 127, 80, channel=U8)
        assert Rgb.from_hex("ff7f50") == Rgb(255, 127, 80, channel=U8)

    def test_from_short_hex(self):
        assert Rgb.from_hex("#abc") == Rgb(170, 187, 204, channel=U8)

    def test_from_hex_alpha(self):
        c = Rgb.from_hex("#FF000080")
        assert c.alpha == 128

    def test_from_hex_float_channel(self):
        c = Rgb.from_hex("#FFFFFF", channel=F64)
        assert c == Rgb(1.0, 1.0, 1.0)

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            Rgb.from_hex("#12")
        with pytest.raises(ValueError):
            Rgb.from_hex("#GGGGGG")

    def test_to_hex(self):
        assert Rgb(255, 127, 80, channel=U8).to_hex() == "#FF7F50"
        assert Rgb(1.0, 0.5, 0.0).to_hex() == "#FF8000"
        assert Rgb(0, 0, 0, alpha=255, channel=U8).to_hex() == "#000000FF"

    def test_from_name(self):
        assert Rgb.from_name("coral") == Rgb(255, 127, 80, channel=U8)
        assert Rgb.from_name("Cornflower Blue") == Rgb(100, 149, 237, channel=U8)

    def test_from_name_unknown(self):
        with pytest.raises(ValueError):
            Rgb.from_name("notacolor")


class TestLab:
    """Lab helpers: polar accessors and arithmetic."""

    def test_chroma(self):
        assert Lab(50, 3, 4).chroma == pytest.approx(5.0)

    def test_hue(self):
        assert Lab(50, 0, 10).hue == Angle(90)
        assert Lab(50, -10, 0).hue == Angle(180)

    def test_neutral_hue_is_zero(self):
        assert Lab(50, 0, 0).hue == Angle(0)

    def test_offset_chroma(self):
        c = Lab(50, 3, 4).offset_chroma(5)
        assert (c.l, c.a, c.b) == pytest.approx((50.0, 6.0, 8.0))

    def test_offset_chroma_neutral_unchanged(self):
        c = Lab(50, 0, 0)
        assert c.offset_chroma(5) is c

    def test_add(self):
        c = Lab(10, 1, 2) + Lab(20, 3, 4)
        assert (c.l, c.a, c.b) == (30.0, 4.0, 6.0)

    def test_scale(self):
        assert Lab(10, 1, -2) * 2 == Lab(20, 2, -4)
        assert 0.5 * Lab(10, 1, -2) == Lab(5, 0.5, -1)
