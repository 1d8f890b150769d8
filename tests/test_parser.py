# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for the color grammar."""

import pytest

from huekit import Color, parse_color
from huekit.parse import GRAMMARS, NoMatch, Scanner, Separator
from huekit.spaces import RGBA8


def parses_to(text, expected):
    result = parse_color(text)
    assert result is not None, f"{text!r} did not parse"
    assert result == expected, f"{text!r} parsed to {result!r}"


class TestScanner:

    def test_number_forms(self):
        for text, value in [("12", 12.0), ("-0.5", -0.5), (".25", 0.25), ("+3.", 3.0), ("1e2", 100.0)]:
            assert Scanner(text).number() == value

    def test_percentage_rewinds_without_sign(self):
        s = Scanner("50")
        with pytest.raises(NoMatch):
            s.percentage()
        assert s.pos == 0

    def test_angle_units(self):
        assert Scanner("0.5turn").angle() == pytest.approx(180.0)
        assert Scanner("200grad").angle() == pytest.approx(180.0)
        assert Scanner("100grd").angle() == pytest.approx(90.0)
        assert Scanner("1trn").angle() == pytest.approx(360.0)
        assert Scanner("3.141592653589793rad").angle() == pytest.approx(180.0)
        assert Scanner("45deg").angle() == pytest.approx(45.0)
        assert Scanner("45°").angle() == pytest.approx(45.0)
        assert Scanner("45").angle() == pytest.approx(45.0)

    def test_separator_kind_is_fixed(self):
        s = Scanner(", 1 2")
        assert s.separator(None) == Separator.COMMA
        s.number()
        with pytest.raises(NoMatch):
            s.separator(Separator.COMMA)

    def test_optional_rewinds(self):
        s = Scanner("abc")
        assert s.optional(s.keyword, "abd") is None
        assert s.pos == 0

    def test_keyword_is_case_insensitive(self):
        s = Scanner("RGB(")
        assert s.keyword("rgba(", "rgb(") == "rgb("
        assert s.at_end()


class TestHex:

    def test_six_digits(self):
        parses_to("#ff0099", Color.from_rgb(255, 0, 153))

    def test_without_hash(self):
        parses_to("ff0099", Color.from_rgb(255, 0, 153))

    def test_three_digits(self):
        parses_to("#f09", Color.from_rgb(255, 0, 153))

    def test_alpha_digits(self):
        parses_to("#ff009980", Color.from_rgba(255, 0, 153, 128 / 255))
        parses_to("#f098", Color.from_rgba(255, 0, 153, 136 / 255))

    def test_uppercase(self):
        parses_to("#FF0099", Color.from_rgb(255, 0, 153))

    @pytest.mark.parametrize("text", ["#ff", "#ff009", "#ff00999", "#ff0099ab1", "#gg0099"])
    def test_bad_lengths_and_digits(self, text):
        assert parse_color(text) is None


class TestRGB:

    def test_legacy(self):
        parses_to("rgb(255, 0, 153)", Color.from_rgb(255, 0, 153))
        parses_to("rgb(255,0,153)", Color.from_rgb(255, 0, 153))
        parses_to("rgb( 255 , 0 , 153 )", Color.from_rgb(255, 0, 153))

    def test_legacy_alpha(self):
        parses_to("rgb(255, 0, 153, 0.5)", Color.from_rgba(255, 0, 153, 0.5))
        parses_to("rgba(255, 0, 153, 50%)", Color.from_rgba(255, 0, 153, 0.5))

    def test_modern(self):
        parses_to("rgb(255 0 153)", Color.from_rgb(255, 0, 153))
        parses_to("rgb(255 0 153 / 50%)", Color.from_rgba(255, 0, 153, 0.5))
        parses_to("rgb(255 0 153/0.5)", Color.from_rgba(255, 0, 153, 0.5))

    def test_trailing_space_alpha(self):
        parses_to("rgb(255 0 153 0.5)", Color.from_rgba(255, 0, 153, 0.5))

    def test_percentages(self):
        parses_to("rgb(100%, 0%, 60%)", Color.from_rgb(255, 0, 153))
        parses_to("rgb(100% 0% 60% / 0.25)", Color.from_rgba(255, 0, 153, 0.25))

    def test_out_of_range_is_kept(self):
        color = parse_color("rgb(300, -10, 0)")
        assert color.to_rgba_float().r == pytest.approx(300 / 255)
        assert color.to_rgba() == RGBA8(255, 0, 0)

    @pytest.mark.parametrize("args", ["255, 0, 153", "10, 20, 30, 0.4", "100%, 50%, 0%, 1"])
    def test_rgba_is_alias_of_rgb(self, args):
        assert parse_color(f"rgba({args})") == parse_color(f"rgb({args})")

    @pytest.mark.parametrize(
        "text",
        [
            "rgb(255, 0 153)",
            "rgb(255 0, 153)",
            "rgb(255, 0, 153 0.5)",
            "rgb(255 0 153, 0.5)",
            "rgb(255, 0%, 153)",
            "rgb(255, 0, 153",
            "rgb(255, 0)",
            "rgb(255, 0, 153) x",
        ],
    )
    def test_rejected(self, text):
        assert parse_color(text) is None


class TestHSL:

    def test_legacy(self):
        parses_to("hsl(330, 100%, 50%)", Color.from_hsl(330, 1.0, 0.5))
        parses_to("hsla(330, 100%, 50%, 0.5)", Color.from_hsla(330, 1.0, 0.5, 0.5))

    def test_modern(self):
        parses_to("hsl(330deg 100% 50% / 0.5)", Color.from_hsla(330, 1.0, 0.5, 0.5))

    def test_comma_and_space_forms_agree(self):
        assert parse_color("hsl(270,60%,70%)") == parse_color("hsl(270 60% 70%)")

    def test_angle_units(self):
        parses_to("hsl(0.5turn, 100%, 50%)", Color.aqua())
        parses_to("hsl(200grad 100% 50%)", Color.aqua())
        parses_to("hsl(180° 100% 50%)", Color.aqua())

    def test_requires_percentages(self):
        assert parse_color("hsl(330, 1, 0.5)") is None


class TestHSV:

    def test_legacy(self):
        parses_to("hsv(0, 100%, 100%)", Color.red())
        parses_to("hsb(240, 100%, 100%)", Color.blue())
        parses_to("hsva(0, 100%, 100%, 0.5)", Color.red().with_alpha(0.5))

    def test_modern_accepts_numbers(self):
        parses_to("hsv(120 1 1)", Color.lime())
        parses_to("hsba(120 100% 0.5 / 0.5)", Color.from_hsva(120, 1.0, 0.5, 0.5))


class TestHWB:

    def test_modern(self):
        parses_to("hwb(120 0% 0%)", Color.lime())
        parses_to("hwb(90 50% 25% / 0.8)", Color.from_hwba(90, 0.5, 0.25, 0.8))

    def test_legacy(self):
        parses_to("hwb(120, 0%, 0%)", Color.lime())

    def test_missing_percent_fails(self):
        assert parse_color("hwb(280 20% 50)") is None


class TestColorFunction:

    def test_srgb(self):
        parses_to("color(srgb 1 0 0.6)", Color.from_rgb(255, 0, 153))
        parses_to("color(srgb 100% 0% 60% / 0.5)", Color.from_rgba(255, 0, 153, 0.5))

    def test_srgb_linear(self):
        parses_to("color(srgb-linear 1 0 0)", Color.red())
        parses_to("color(srgb-linear 0 0 0)", Color.black())

    def test_xyz(self):
        xyz = Color.red().to_xyz()
        parses_to(f"color(xyz {xyz.x!r} {xyz.y!r} {xyz.z!r})", Color.red())
        parses_to(f"color(xyz-d65 {xyz.x!r} {xyz.y!r} {xyz.z!r} / 0.5)", Color.red().with_alpha(0.5))

    def test_xyz_rejects_percentages(self):
        assert parse_color("color(xyz 50% 50% 50%)") is None

    def test_lab_and_lch(self):
        parses_to("color(lab-d65 50 20 -20)", Color.from_lab(50, 20, -20))
        parses_to("color(--lch-d65 50 30 120)", Color.from_lch(50, 30, 120))

    def test_hsv(self):
        parses_to("color(hsv 0 1 1)", Color.red())
        parses_to("color(--hsv 120 100% 100% / 0.5)", Color.lime().with_alpha(0.5))

    def test_unknown_space(self):
        assert parse_color("color(display-p3 1 0 0)") is None


class TestGray:

    def test_number_and_percentage(self):
        parses_to("gray(0.5)", Color.graytone(0.5))
        parses_to("gray(50%)", Color.graytone(0.5))

    def test_no_upper_bound(self):
        color = parse_color("GRAY(2)")
        assert color.to_rgba_float().r == pytest.approx(2.0)

    def test_negative_rejected(self):
        assert parse_color("gray(-0.5)") is None


class TestCIE:

    def test_lab(self):
        parses_to("lab(50, 20, -20)", Color.from_lab(50, 20, -20))
        parses_to("cielab(50% 20 -20 / 0.5)", Color.from_lab(50, 20, -20, 0.5))

    def test_lab_percent_lightness_is_not_rescaled(self):
        assert parse_color("lab(50%, 20, -20)") == parse_color("lab(50, 20, -20)")

    def test_lch(self):
        parses_to("lch(50, 30, 120)", Color.from_lch(50, 30, 120))
        parses_to("cielch(50 30 0.5turn)", Color.from_lch(50, 30, 180))

    def test_negative_chroma_rejected(self):
        assert parse_color("lch(50, -10, 30)") is None
        assert parse_color("lchuv(50, -10, 30)") is None

    def test_luv_and_lchuv(self):
        parses_to("luv(53, 175, 38)", Color.from_luv(53, 175, 38))
        parses_to("cielchuv(53 179 12)", Color.from_lchuv(53, 179, 12))

    def test_hcl_is_reordered_lchuv(self):
        assert parse_color("hcl(12, 179, 53)") == Color.from_lchuv(53, 179, 12)

    def test_lab65_percentages(self):
        parses_to("lab65(50% 20% -20%)", Color.from_lab(50, 25, -25))
        parses_to("lab-d65(50 20 -20 / 0.5)", Color.from_lab(50, 20, -20, 0.5))

    def test_lch65_percentages(self):
        parses_to("lch65(50 100% 30)", Color.from_lch(50, 150, 30))
        parses_to("lch-d65(50% 20% 30deg)", Color.from_lch(50, 30, 30))

    def test_lab65_rejects_commas(self):
        assert parse_color("lab65(15%, 25, 90)") is None

    def test_serialized_lab_parses_back(self):
        color = Color.from_lab(41, 83, -93)
        assert parse_color(color.to_lab_string()) == color


class TestOKLab:

    def test_oklab(self):
        parses_to("oklab(0.5 0.1 -0.1)", Color.from_oklab(0.5, 0.1, -0.1))
        parses_to("oklab(50% 25% -25% / 0.5)", Color.from_oklaba(0.5, 0.1, -0.1, 0.5))

    def test_oklch(self):
        parses_to("oklch(0.6 0.2 30)", Color.from_oklch(0.6, 0.2, 30))
        parses_to("oklch(60% 50% 30deg)", Color.from_oklch(0.6, 0.2, 30))

    def test_oklch_negative_chroma_rejected(self):
        assert parse_color("oklch(0.6 -0.2 30)") is None


class TestCMYKAndXYZ:

    def test_device_cmyk(self):
        parses_to("device-cmyk(0 100% 100% 0)", Color.red())
        parses_to("cmyk(0 0 0 1)", Color.black())

    def test_cmyk_alpha_is_ignored(self):
        color = parse_color("device-cmyk(0 1 1 0 / 0.5)")
        assert color == Color.red()
        assert color.alpha == 1.0

    def test_xyz_function(self):
        parses_to("xyz(0.4124, 0.2126, 0.0193)", Color.from_xyz(0.4124, 0.2126, 0.0193))
        parses_to("ciexyz(41.24% 21.26% 1.93%)", Color.from_xyz(0.4124, 0.2126, 0.0193))

    def test_serialized_xyz_parses_back(self):
        assert parse_color("XYZ(0.4124, 0.2126, 0.0193)") == Color.from_xyz(0.4124, 0.2126, 0.0193)


class TestFallbacks:

    def test_named(self):
        parses_to("deeppink", Color.from_rgb(255, 20, 147))
        parses_to("DeepPink", Color.from_rgb(255, 20, 147))

    def test_unknown_name(self):
        assert parse_color("notacolor") is None

    def test_bare_triples(self):
        parses_to("255 0 153", Color.from_rgb(255, 0, 153))
        parses_to("255, 0, 153", Color.from_rgb(255, 0, 153))
        parses_to("100% 0% 60%", Color.from_rgb(255, 0, 153))
        parses_to("255,0,153,0.5", Color.from_rgba(255, 0, 153, 0.5))

    def test_bare_mixed_separators_rejected(self):
        assert parse_color("255, 0 153") is None


class TestParseColor:

    def test_whitespace_is_trimmed(self):
        parses_to("  red \n", Color.red())
        parses_to("\t#ff0099  ", Color.from_rgb(255, 0, 153))

    def test_case_insensitive(self):
        parses_to("RGB(255, 0, 153)", Color.from_rgb(255, 0, 153))
        parses_to("Hsl(330 100% 50%)", Color.from_hsl(330, 1.0, 0.5))
        parses_to("COLOR(SRGB 1 0 0)", Color.red())

    @pytest.mark.parametrize("text", ["", "   ", "rgb()", "#", "hsl(", "red blue"])
    def test_empty_and_garbage(self, text):
        assert parse_color(text) is None

    def test_grammar_names_are_unique(self):
        names = [name for name, _ in GRAMMARS]
        assert len(names) == len(set(names))

    def test_function_forms_before_bare_fallbacks(self):
        names = [name for name, _ in GRAMMARS]
        assert names.index("numeric rgb") < names.index("bare numeric rgb")
        assert names[-1] == "bare percentage rgb"
