# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for hub routing and end-to-end conversion."""

import itertools

import numpy as np
import pytest

from tincture.convert import convert, route
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
    LinearRgb,
    Rgb,
    Xyz,
    YCbCr,
    Yxy,
)

ALL_SPACES = [Rgb, LinearRgb, Hsv, Hsl, YCbCr, Xyz, Yxy, Lab, Lch]

# Chromatic, in-gamut sRGB samples (grays have no stable hue)
SAMPLES = [
    Rgb(0.2, 0.4, 0.6),
    Rgb(0.9, 0.1, 0.3),
    Rgb(0.35, 0.7, 0.15),
    Rgb(0.6, 0.55, 0.1),
    Rgb(0.05, 0.1, 0.08),
]


def _assert_close(a, b, tol=1e-3):
    """Compare two colors of the same space on their unit components."""
    assert type(a) is type(b)
    ua, ub = a.to_unit(), b.to_unit()
    assert len(ua) == len(ub)
    for i, (x, y) in enumerate(zip(ua, ub)):
        if i == a.hue_index:
            assert abs(Angle(x).delta(y)) < tol, (a, b)
        else:
            assert x == pytest.approx(y, abs=tol), (a, b)


class TestRoute:

    def test_same_space(self):
        assert route("rgb", "rgb") == ("rgb",)

    def test_through_both_hubs(self):
        assert route("hsv", "lab") == ("hsv", "rgb", "linear_rgb", "xyz", "lab")
        assert route("lch", "ycbcr") == ("lch", "lab", "xyz", "linear_rgb", "rgb", "ycbcr")

    def test_direct_edge(self):
        assert route("hsv", "hsl") == ("hsv", "hsl")

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            route("rgb", "cmyk")


class TestKnownValues:

    def test_red_to_hsv(self):
        assert convert(Rgb(255, 0, 0, channel=U8), Hsv, channel=F64) == Hsv(0, 1.0, 1.0)

    def test_hsl_green_to_u8(self):
        assert Hsl(120, 1.0, 0.5).convert(Rgb, channel=U8) == Rgb(0, 255, 0, channel=U8)

    @pytest.mark.parametrize("target", [Hsv, Hsl])
    def test_black_hue_zero(self, target):
        c = Rgb(0, 0, 0, channel=U8).convert(target, channel=F64)
        assert c.h == Angle(0)
        assert c.to_unit()[2] == 0.0

    def test_white_to_lab(self):
        lab = Rgb(1.0, 1.0, 1.0).convert(Lab)
        assert lab.l == pytest.approx(100.0, abs=1e-3)
        assert lab.a == pytest.approx(0.0, abs=0.05)
        assert lab.b == pytest.approx(0.0, abs=0.05)

    def test_white_to_lab_d50(self):
        lab = Rgb(1.0, 1.0, 1.0).convert(Lab, white_point=D50)
        assert lab.white_point == D50
        assert lab.l == pytest.approx(100.0, abs=1e-2)
        assert lab.a == pytest.approx(0.0, abs=0.1)
        assert lab.b == pytest.approx(0.0, abs=0.1)

    def test_white_chromaticity(self):
        yxy = Rgb(1.0, 1.0, 1.0).convert(Yxy)
        assert (yxy.x, yxy.y, yxy.luma) == pytest.approx((0.3127, 0.3290, 1.0), abs=1e-3)

    def test_black_yxy(self):
        yxy = Rgb(0, 0, 0, channel=U8).convert(Yxy)
        assert (yxy.x, yxy.y, yxy.luma) == (0.0, 0.0, 0.0)

    def test_gray_ycbcr(self):
        c = Rgb(0.5, 0.5, 0.5).convert(YCbCr)
        assert (c.y, c.cb, c.cr) == pytest.approx((0.5, 0.5, 0.5), abs=1e-12)

    def test_white_ycbcr_u8(self):
        c = Rgb.from_name("white").convert(YCbCr)
        assert c.channel == U8
        assert c.y == 255

    def test_out_of_gamut_clipped(self):
        rgb = Lab(50, 120, -120).convert(Rgb)
        assert all(0.0 <= v <= 1.0 for v in rgb.to_unit())


class TestChannels:
    """Output encoding rules."""

    def test_keeps_source_channel(self):
        hsv = Rgb(255, 0, 0, channel=U8).convert(Hsv)
        assert hsv.channel == U8
        assert hsv.s == 255

    def test_integer_to_cie_uses_f64(self):
        assert Rgb(255, 0, 0, channel=U8).convert(Lab).channel == F64

    def test_float_to_cie_keeps_channel(self):
        assert Rgb(1.0, 0.0, 0.0, channel=F32).convert(Lab).channel == F32

    def test_explicit_integer_for_cie_raises(self):
        with pytest.raises(ValueError):
            Rgb(255, 0, 0, channel=U8).convert(Lab, channel=U8)

    def test_to_channel(self):
        assert Rgb(255, 0, 0, channel=U8).to_channel(F64) == Rgb(1.0, 0.0, 0.0)
        assert Rgb(255, 0, 0, channel=U8).to_channel(U16) == Rgb(65535, 0, 0, channel=U16)

    def test_same_everything_returns_input(self):
        c = Rgb(1, 2, 3, channel=U8)
        assert c.convert(Rgb) is c
        lab = Lab(50, 1, 2, white_point=D50)
        assert lab.convert(Lab) is lab

    def test_alpha_carried(self):
        hsv = Rgb(255, 0, 0, alpha=128, channel=U8).convert(Hsv, channel=F64)
        assert hsv.alpha == pytest.approx(128 / 255)

    def test_no_alpha_stays_absent(self):
        assert Rgb(0.1, 0.2, 0.3).convert(Lab).alpha is None


class TestWhitePoints:

    def test_lab_rewhite_roundtrip(self):
        lab = Lab(60.0, 20.0, -30.0)
        d50 = lab.convert(Lab, white_point=D50)
        assert d50.white_point == D50
        _assert_close(d50.convert(Lab, white_point=D65), lab, tol=1e-6)

    def test_xyz_adaptation(self):
        xyz = Xyz(*D65.xyz).convert(Xyz, white_point=D50)
        assert (xyz.x, xyz.y, xyz.z) == pytest.approx(D50.xyz, abs=1e-9)

    def test_white_point_inherited(self):
        lch = Lab(50, 10, 10, white_point=D50).convert(Lch)
        assert lch.white_point == D50

    def test_same_color_in_rgb(self):
        rgb = Rgb(0.2, 0.4, 0.6)
        d65 = rgb.convert(Lab)
        d50 = rgb.convert(Lab, white_point=D50)
        _assert_close(d65.convert(Rgb), d50.convert(Rgb), tol=1e-9)


class TestRoundTrips:
    """convert(convert(c, T), S) ≈ c for every pair of spaces."""

    @pytest.mark.parametrize(
        "source,target",
        list(itertools.permutations(ALL_SPACES, 2)),
        ids=lambda cls: cls.space,
    )
    def test_pairwise(self, source, target):
        for sample in SAMPLES:
            c = sample.convert(source)
            _assert_close(c.convert(target).convert(source), c)

    @pytest.mark.parametrize("target", ALL_SPACES, ids=lambda cls: cls.space)
    def test_u8_recovered_exactly(self, target):
        for hex_color in ("#336699", "#E61A4D", "#59B326", "#0D1A14"):
            c = Rgb.from_hex(hex_color)
            assert c.convert(target, channel=F64).convert(Rgb, channel=U8) == c

    def test_u16_hsv(self):
        c = Rgb(20000, 40000, 60000, channel=U16)
        back = c.convert(Hsv).convert(Rgb)
        assert all(abs(x - y) <= 2 for x, y in zip(back.to_record(), c.to_record()))


class TestErrors:

    def test_non_color(self):
        with pytest.raises(TypeError):
            convert("red", Hsv)

    def test_non_color_target(self):
        with pytest.raises(TypeError):
            convert(Rgb(0, 0, 0), int)

    def test_method_matches_function(self):
        c = Rgb(0.3, 0.6, 0.9)
        assert c.convert(Lch) == convert(c, Lch)

    def test_batch_kernels_agree(self):
        colors = [s.convert(Lab) for s in SAMPLES]
        from tincture.convert import linear_rgb_to_xyz, srgb_to_linear, xyz_to_lab
        rgb = np.array([s.to_unit() for s in SAMPLES])
        lab = xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(rgb)), D65.xyz)
        np.testing.assert_allclose(lab, [c.to_unit() for c in colors], atol=1e-10)
