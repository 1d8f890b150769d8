# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for the canonical Color type: equality, constructors, conversions, queries."""

import pytest

from huekit import Color, ColorParseError, Fraction, TOLERANCE, parse_color
from huekit.spaces import ColorblindnessType, RGBA8


HUES = range(0, 360, 30)
SATURATIONS = (0.2, 0.6, 1.0)
LIGHTNESSES = (0.2, 0.5, 0.8)

CONVERSIONS = [
    "to_rgba_float",
    "to_hsla",
    "to_hsva",
    "to_hwba",
    "to_lab",
    "to_lch",
    "to_luv",
    "to_lchuv",
    "to_oklab",
    "to_oklch",
    "to_xyz",
    "to_lms",
]


class TestEquality:

    def test_within_tolerance(self):
        a = Color(0.5, 0.5, 0.5)
        b = Color(0.5 + TOLERANCE / 2, 0.5, 0.5 - TOLERANCE / 2)
        assert a == b

    def test_outside_tolerance(self):
        a = Color(0.5, 0.5, 0.5)
        assert a != Color(0.5 + 2 * TOLERANCE, 0.5, 0.5)
        assert a != Color(0.5, 0.5, 0.5, 0.5)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Color.red())

    def test_not_equal_to_other_types(self):
        assert Color.red() != "red"

    def test_frozen(self):
        c = Color.red()
        with pytest.raises(AttributeError):
            c.x = 0.0

    def test_alpha_clamped(self):
        assert Color(0.1, 0.2, 0.3, 2.0).alpha == 1.0
        assert Color(0.1, 0.2, 0.3, -1.0).alpha == 0.0


class TestRepresentation:

    def test_repr_roundtrip(self):
        c = Color.from_rgba(12, 200, 99, 0.25)
        assert eval(repr(c), {"Color": Color}) == c

    def test_str_is_hsl(self):
        assert str(Color.from_hsl(120, 0.5, 0.25)) == "hsl(120, 50.0%, 25.0%)"

    def test_dict_roundtrip(self):
        c = Color.from_rgba(12, 200, 99, 0.25)
        d = c.to_dict()
        assert set(d) == {"x", "y", "z", "alpha"}
        assert Color.from_dict(d) == c

    def test_from_dict_default_alpha(self):
        assert Color.from_dict({"x": 0.2, "y": 0.3, "z": 0.4}).alpha == 1.0


class TestConstructors:

    def test_from_rgb(self):
        assert Color.from_rgb(255, 0, 153).to_rgba() == RGBA8(255, 0, 153)

    def test_from_rgb_float_matches_from_rgb(self):
        assert Color.from_rgb_float(1.0, 0.0, 0.6) == Color.from_rgb(255, 0, 153)

    def test_from_hsl(self):
        assert Color.from_hsl(0, 1.0, 0.5) == Color.red()
        assert Color.from_hsl(120, 1.0, 0.5) == Color.lime()

    def test_from_hsv(self):
        assert Color.from_hsv(0, 1.0, 1.0) == Color.red()
        assert Color.from_hsv(240, 1.0, 0.0) == Color.black()

    def test_from_hwb(self):
        assert Color.from_hwb(0, 0.0, 0.0) == Color.red()

    def test_from_hwb_gray_when_whiteness_and_blackness_exceed_one(self):
        assert Color.from_hwb(200, 0.6, 0.6) == Color.from_rgb_float(0.5, 0.5, 0.5)

    def test_from_lab_matches_to_lab(self):
        lab = Color.red().to_lab()
        assert Color.from_lab(lab.l, lab.a, lab.b) == Color.red()

    def test_from_cmyk_black(self):
        assert Color.from_cmyk(0, 0, 0, 1) == Color.black()

    def test_from_cmyk_ignores_alpha(self):
        assert Color.from_cmyk(0, 1, 1, 0).alpha == 1.0
        assert Color.from_cmyk(0, 1, 1, 0) == Color.red()

    def test_out_of_gamut_is_kept(self):
        c = Color.from_rgb_float(1.2, -0.1, 0.5)
        rgb = c.to_rgba_float()
        assert rgb.r == pytest.approx(1.2)
        assert rgb.g == pytest.approx(-0.1)
        assert c.to_rgba() == RGBA8(255, 0, 128)

    def test_graytone(self):
        assert Color.graytone(0.5) == Color.from_rgb_float(0.5, 0.5, 0.5)

    def test_from_string(self):
        assert Color.from_string("#ff0099") == Color.from_rgb(255, 0, 153)

    def test_from_string_raises(self):
        with pytest.raises(ColorParseError):
            Color.from_string("not a color")


class TestNamedConstants:

    @pytest.mark.parametrize(
        "factory, rgb",
        [
            (Color.black, (0, 0, 0)),
            (Color.white, (255, 255, 255)),
            (Color.red, (255, 0, 0)),
            (Color.green, (0, 128, 0)),
            (Color.blue, (0, 0, 255)),
            (Color.yellow, (255, 255, 0)),
            (Color.fuchsia, (255, 0, 255)),
            (Color.aqua, (0, 255, 255)),
            (Color.lime, (0, 255, 0)),
            (Color.maroon, (128, 0, 0)),
            (Color.olive, (128, 128, 0)),
            (Color.navy, (0, 0, 128)),
            (Color.purple, (128, 0, 128)),
            (Color.teal, (0, 128, 128)),
            (Color.silver, (192, 192, 192)),
            (Color.gray, (128, 128, 128)),
        ],
    )
    def test_rgb_values(self, factory, rgb):
        assert factory().to_rgba() == RGBA8(*rgb)


class TestRoundtrip:
    """Every space converts back to the same color within TOLERANCE."""

    @pytest.mark.parametrize("conversion", CONVERSIONS)
    def test_roundtrip(self, conversion):
        for h in HUES:
            for s in SATURATIONS:
                for l in LIGHTNESSES:
                    c = Color.from_hsl(h, s, l)
                    recovered = getattr(c, conversion)().into_color()
                    assert recovered == c, f"{conversion} failed for hsl({h}, {s}, {l})"

    @pytest.mark.parametrize("conversion", CONVERSIONS)
    def test_alpha_survives(self, conversion):
        c = Color.from_rgba(10, 120, 230, 0.3)
        assert getattr(c, conversion)().into_color() == c

    def test_cmyk_roundtrip(self):
        for h in HUES:
            c = Color.from_hsl(h, 0.6, 0.5)
            assert c.to_cmyk().into_color() == c

    def test_rgba8_roundtrip(self):
        rgba = RGBA8(12, 200, 99)
        assert rgba.into_color().to_rgba() == rgba

    def test_to_u32(self):
        assert Color.from_rgb(255, 0, 153).to_u32() == 0xFF0099


class TestDerivedQueries:

    def test_brightness(self):
        assert Color.white().brightness() == pytest.approx(1.0)
        assert Color.black().brightness() == pytest.approx(0.0)
        assert Color.yellow().brightness() == pytest.approx(0.886)

    def test_is_light(self):
        assert Color.yellow().is_light()
        assert not Color.navy().is_light()

    def test_luminance(self):
        assert Color.white().luminance() == pytest.approx(1.0)
        assert Color.black().luminance() == pytest.approx(0.0)
        assert Color.red().luminance() == pytest.approx(0.2126)

    def test_contrast_ratio(self):
        assert Color.black().contrast_ratio(Color.white()) == pytest.approx(21.0)
        assert Color.white().contrast_ratio(Color.black()) == pytest.approx(21.0)
        assert Color.red().contrast_ratio(Color.red()) == pytest.approx(1.0)

    def test_out_of_gamut_queries_stay_in_range(self):
        dark = parse_color("rgb(-200 -200 -200)")
        assert dark.luminance() == 0.0
        assert dark.brightness() == 0.0
        assert 1.0 <= dark.contrast_ratio(Color.white()) <= 21.0
        assert dark.contrast_ratio(Color.white()) == pytest.approx(21.0)
        bright = Color.from_rgb_float(1.5, 1.5, 1.5)
        assert bright.luminance() == pytest.approx(1.0)
        assert bright.contrast_ratio(Color.black()) == pytest.approx(21.0)

    def test_text_color(self):
        assert Color.yellow().text_color() == Color.black()
        assert Color.navy().text_color() == Color.white()

    def test_delta_e(self):
        assert Color.red().distance_delta_e_cie76(Color.red()) == pytest.approx(0.0)
        assert Color.black().distance_delta_e_cie76(Color.white()) == pytest.approx(100.0, abs=0.1)
        assert Color.red().distance_delta_e_ciede2000(Color.blue()) > 10.0


class TestOperations:

    def test_with_alpha(self):
        c = Color.red().with_alpha(0.5)
        assert c.alpha == 0.5
        assert c.with_alpha(1.0) == Color.red()

    def test_rotate_hue(self):
        assert Color.red().rotate_hue(120) == Color.lime()
        assert Color.red().rotate_hue(-120) == Color.blue()

    def test_complementary(self):
        assert Color.red().complementary() == Color.aqua()

    def test_lighten_darken(self):
        c = Color.from_hsl(0, 1.0, 0.5)
        assert c.lighten(0.2).to_hsla().l == pytest.approx(0.7)
        assert c.darken(0.2).to_hsla().l == pytest.approx(0.3)

    def test_darken_clamps(self):
        assert Color.black().darken(0.5) == Color.black()
        assert Color.white().lighten(0.5) == Color.white()

    def test_saturate_desaturate(self):
        assert Color.red().desaturate(1.0) == Color.from_hsl(0, 0.0, 0.5)
        assert Color.from_hsl(0, 0.5, 0.5).saturate(0.5) == Color.red()

    def test_operations_keep_alpha(self):
        c = Color.red().with_alpha(0.4)
        assert c.rotate_hue(10).alpha == pytest.approx(0.4)
        assert c.lighten(0.1).alpha == pytest.approx(0.4)
        assert c.to_gray().alpha == pytest.approx(0.4)

    def test_to_gray(self):
        gray = Color.red().to_gray()
        assert gray.to_hsla().s == pytest.approx(0.0, abs=1e-9)
        assert gray.to_lch().l == pytest.approx(Color.red().to_lch().l, abs=0.1)

    def test_composite_half_black_over_white(self):
        result = Color.white().composite(Color.black().with_alpha(0.5))
        assert result == Color.from_rgb_float(0.5, 0.5, 0.5)

    def test_composite_opaque_source_wins(self):
        assert Color.white().composite(Color.red()) == Color.red()

    def test_composite_fully_transparent(self):
        result = Color.black().with_alpha(0.0).composite(Color.red().with_alpha(0.0))
        assert result == Color.from_rgba_float(0.0, 0.0, 0.0, 0.0)

    def test_mix_endpoints(self):
        assert Color.red().mix(Color.blue(), 0.0) == Color.red()
        assert Color.red().mix(Color.blue(), 1.0) == Color.blue()
        assert Color.red().mix(Color.blue(), Fraction(1.5)) == Color.blue()

    def test_mix_by_space_name(self):
        assert Color.red().mix(Color.blue(), 0.5, "hsl") == Color.fuchsia()


class TestColorblindness:

    def test_protanopia_keeps_m_and_s(self):
        c = Color.from_rgb(200, 80, 40)
        lms = c.to_lms()
        sim = c.simulate_colorblindness(ColorblindnessType.PROTANOPIA).to_lms()
        assert sim.m == pytest.approx(lms.m)
        assert sim.s == pytest.approx(lms.s)
        assert sim.l != pytest.approx(lms.l)

    def test_deuteranopia_keeps_l_and_s(self):
        c = Color.from_rgb(200, 80, 40)
        lms = c.to_lms()
        sim = c.simulate_colorblindness(ColorblindnessType.DEUTERANOPIA).to_lms()
        assert sim.l == pytest.approx(lms.l)
        assert sim.s == pytest.approx(lms.s)

    def test_tritanopia_keeps_l_and_m(self):
        c = Color.from_rgb(200, 80, 40)
        lms = c.to_lms()
        sim = c.simulate_colorblindness(ColorblindnessType.TRITANOPIA).to_lms()
        assert sim.l == pytest.approx(lms.l)
        assert sim.m == pytest.approx(lms.m)

    def test_keeps_alpha(self):
        c = Color.red().with_alpha(0.3)
        assert c.simulate_colorblindness(ColorblindnessType.PROTANOPIA).alpha == pytest.approx(0.3)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            Color.red().simulate_colorblindness("protanopia")
