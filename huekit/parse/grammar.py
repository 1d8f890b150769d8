# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color grammar.

Each rule below reads one notation from a Scanner and returns a Color, or
raises NoMatch. `parse_color` tries the rules in GRAMMARS order on a fresh
scanner each time and accepts the first one that consumes the whole input.

Order matters: function forms come before their bare fallbacks, so that a
malformed `rgb(...)` fails instead of being read as something else.

Two argument styles are shared by most functions:

- legacy:  name(a, b, c, alpha)  or  name(a b c alpha)
  The first separator (comma or whitespace) fixes the separator for the
  rest of the call.
- modern:  name(a b c / alpha)
"""

from __future__ import annotations

import logging
import re
from functools import partial
from typing import Callable, Optional, Sequence

import numpy as np

from huekit.parse.named import lookup_named
from huekit.parse.scanner import NoMatch, Scanner, Separator
from huekit.schema.color import Color
from huekit.spaces.transfer import linear_srgb_to_xyz

logger = logging.getLogger(__name__)

Channel = Callable[[Scanner], float]
Rule = Callable[[Scanner], Color]

_HEX_RE = re.compile(r"#?([0-9a-fA-F]+)")
_NAME_RE = re.compile(r"[A-Za-z]+")


# =============================================================================
# Channels
# =============================================================================

def _number(s: Scanner) -> float:
    return s.number()


def _percentage(s: Scanner) -> float:
    return s.percentage()


def _angle(s: Scanner) -> float:
    return s.angle()


def _scaled(reference: float) -> Channel:
    """Number, or percentage of reference."""
    return partial(Scanner.number_or_percentage, reference=reference)


_unit = _scaled(1.0)


def _lightness(s: Scanner) -> float:
    """CIE lightness: a number with an optional "%" that does not rescale it."""
    value = s.number()
    s.optional(s.char, "%")
    return value


def _non_negative(channel: Channel) -> Channel:
    def rule(s: Scanner) -> float:
        value = channel(s)
        if value < 0.0:
            raise NoMatch("negative value")
        return value
    return rule


_chroma = _non_negative(_number)


# =============================================================================
# Argument lists
# =============================================================================

def _alpha(s: Scanner) -> float:
    return s.number_or_percentage(1.0)


def _legacy_channels(s: Scanner, channels: Sequence[Channel]) -> tuple[list[float], Optional[Separator]]:
    values: list[float] = []
    kind: Optional[Separator] = None
    for i, channel in enumerate(channels):
        if i:
            kind = s.separator(kind)
        values.append(channel(s))
    return values, kind


def _legacy_alpha(s: Scanner, kind: Optional[Separator]) -> float:
    s.separator(kind)
    return _alpha(s)


def _css_alpha(s: Scanner) -> float:
    s.space0()
    s.char("/")
    s.space0()
    return _alpha(s)


def _legacy_arguments(s: Scanner, channels: Sequence[Channel]) -> tuple[list[float], float]:
    """Channels after "name(", through the closing parenthesis."""
    s.space0()
    values, kind = _legacy_channels(s, channels)
    alpha = s.optional(_legacy_alpha, s, kind)
    s.space0()
    s.char(")")
    return values, 1.0 if alpha is None else alpha


def _modern_arguments(s: Scanner, channels: Sequence[Channel], close: bool = True) -> tuple[list[float], float]:
    """Space-separated channels with an optional "/ alpha"."""
    s.space0()
    values: list[float] = []
    for i, channel in enumerate(channels):
        if i:
            s.space1()
        values.append(channel(s))
    alpha = s.optional(_css_alpha, s)
    s.space0()
    if close:
        s.char(")")
    return values, 1.0 if alpha is None else alpha


def _either_arguments(s: Scanner, channels: Sequence[Channel]) -> tuple[list[float], float]:
    """Modern style first, then legacy."""
    start = s.pos
    try:
        return _modern_arguments(s, channels)
    except NoMatch:
        s.pos = start
    return _legacy_arguments(s, channels)


# =============================================================================
# Hex
# =============================================================================

def parse_hex(s: Scanner) -> Color:
    digits = s.pattern(_HEX_RE).lstrip("#")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) not in (6, 8):
        raise NoMatch("hex string of 3, 4, 6 or 8 digits")

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return Color.from_rgba(r, g, b, alpha)


# =============================================================================
# RGB
# =============================================================================

def _rgb_function(s: Scanner) -> None:
    s.keyword("rgb(", "rgba(")


def parse_css_numeric_rgb(s: Scanner) -> Color:
    _rgb_function(s)
    (r, g, b), alpha = _modern_arguments(s, [_number] * 3)
    return Color.from_rgba(r, g, b, alpha)


def parse_css_percentage_rgb(s: Scanner) -> Color:
    _rgb_function(s)
    (r, g, b), alpha = _modern_arguments(s, [_percentage] * 3)
    return Color.from_rgba_float(r, g, b, alpha)


def parse_numeric_rgb(s: Scanner) -> Color:
    _rgb_function(s)
    (r, g, b), alpha = _legacy_arguments(s, [_number] * 3)
    return Color.from_rgba(r, g, b, alpha)


def parse_percentage_rgb(s: Scanner) -> Color:
    _rgb_function(s)
    (r, g, b), alpha = _legacy_arguments(s, [_percentage] * 3)
    return Color.from_rgba_float(r, g, b, alpha)


# =============================================================================
# HSL, HSV, HWB
# =============================================================================

def parse_css_hsl(s: Scanner) -> Color:
    s.keyword("hsl(", "hsla(")
    (h, sat, light), alpha = _modern_arguments(s, [_angle, _percentage, _percentage])
    return Color.from_hsla(h, sat, light, alpha)


def parse_hsl(s: Scanner) -> Color:
    s.keyword("hsl(", "hsla(")
    (h, sat, light), alpha = _legacy_arguments(s, [_angle, _percentage, _percentage])
    return Color.from_hsla(h, sat, light, alpha)


def _hsv_function(s: Scanner) -> None:
    s.keyword("hsv(", "hsva(", "hsb(", "hsba(")


def parse_css_hsv(s: Scanner) -> Color:
    """hsv(h s v / a); saturation and value are numbers in [0, 1] or percentages."""
    _hsv_function(s)
    (h, sat, value), alpha = _modern_arguments(s, [_angle, _unit, _unit])
    return Color.from_hsva(h, sat, value, alpha)


def parse_hsv(s: Scanner) -> Color:
    _hsv_function(s)
    (h, sat, value), alpha = _legacy_arguments(s, [_angle, _percentage, _percentage])
    return Color.from_hsva(h, sat, value, alpha)


def parse_css_hwb(s: Scanner) -> Color:
    s.keyword("hwb(", "hwba(")
    (h, white, black), alpha = _modern_arguments(s, [_angle, _percentage, _percentage])
    return Color.from_hwba(h, white, black, alpha)


def parse_hwb(s: Scanner) -> Color:
    s.keyword("hwb(", "hwba(")
    (h, white, black), alpha = _legacy_arguments(s, [_angle, _percentage, _percentage])
    return Color.from_hwba(h, white, black, alpha)


# =============================================================================
# color()
# =============================================================================

def _srgb_space(s: Scanner) -> Color:
    s.keyword("srgb")
    s.space1()
    (r, g, b), alpha = _modern_arguments(s, [_unit] * 3, close=False)
    return Color.from_rgba_float(r, g, b, alpha)


def _srgb_linear_space(s: Scanner) -> Color:
    s.keyword("srgb-linear")
    s.space1()
    rgb, alpha = _modern_arguments(s, [_unit] * 3, close=False)
    x, y, z = linear_srgb_to_xyz(np.array(rgb, dtype=np.float64))
    return Color.from_xyz(float(x), float(y), float(z), alpha)


def _xyz_space(s: Scanner) -> Color:
    s.keyword("xyz-d65", "xyz")
    s.space1()
    (x, y, z), alpha = _modern_arguments(s, [_number] * 3, close=False)
    return Color.from_xyz(x, y, z, alpha)


def _dashed(s: Scanner, name: str) -> None:
    s.optional(s.char, "--")
    s.keyword(name)
    s.space1()


def _lab_d65_space(s: Scanner) -> Color:
    _dashed(s, "lab-d65")
    (l, a, b), alpha = _modern_arguments(s, [_number] * 3, close=False)
    return Color.from_lab(l, a, b, alpha)


def _lch_d65_space(s: Scanner) -> Color:
    _dashed(s, "lch-d65")
    (l, c, h), alpha = _modern_arguments(s, [_number, _chroma, _angle], close=False)
    return Color.from_lch(l, c, h, alpha)


def _hsv_space(s: Scanner) -> Color:
    _dashed(s, "hsv")
    (h, sat, value), alpha = _modern_arguments(s, [_angle, _unit, _unit], close=False)
    return Color.from_hsva(h, sat, value, alpha)


def parse_css_color_function(s: Scanner) -> Color:
    """
    color(<space> c1 c2 c3 [/ alpha]).

    Percentages are only accepted where 100% = 1.0 is the natural range
    of the channel (srgb, srgb-linear, and the hsv saturation and value).
    """
    s.keyword("color(")
    s.space0()
    color = s.first_of(
        _srgb_space,
        _srgb_linear_space,
        _xyz_space,
        _lab_d65_space,
        _lch_d65_space,
        _hsv_space,
    )
    s.space0()
    s.char(")")
    return color


# =============================================================================
# Gray
# =============================================================================

def parse_gray(s: Scanner) -> Color:
    """gray(v): v is a number or percentage, unbounded above."""
    s.keyword("gray(")
    s.space0()
    g = _non_negative(_unit)(s)
    s.space0()
    s.char(")")
    return Color.from_rgb_float(g, g, g)


# =============================================================================
# CIE
# =============================================================================

def parse_css_lab65(s: Scanner) -> Color:
    """lab65(L a b / alpha) with L% of 100 and a/b% of 125."""
    s.keyword("lab65(", "lab-d65(")
    (l, a, b), alpha = _modern_arguments(s, [_scaled(100.0), _scaled(125.0), _scaled(125.0)])
    return Color.from_lab(l, a, b, alpha)


def parse_lab(s: Scanner) -> Color:
    s.keyword("cielab(", "lab(")
    (l, a, b), alpha = _either_arguments(s, [_lightness, _number, _number])
    return Color.from_lab(l, a, b, alpha)


def parse_css_lch65(s: Scanner) -> Color:
    """lch65(L C h / alpha) with L% of 100 and C% of 150."""
    s.keyword("lch65(", "lch-d65(")
    (l, c, h), alpha = _modern_arguments(
        s, [_scaled(100.0), _non_negative(_scaled(150.0)), _angle]
    )
    return Color.from_lch(l, c, h, alpha)


def parse_lch(s: Scanner) -> Color:
    s.keyword("cielch(", "lch(")
    (l, c, h), alpha = _either_arguments(s, [_lightness, _chroma, _angle])
    return Color.from_lch(l, c, h, alpha)


def parse_luv(s: Scanner) -> Color:
    s.keyword("cieluv(", "luv(")
    (l, u, v), alpha = _either_arguments(s, [_lightness, _number, _number])
    return Color.from_luv(l, u, v, alpha)


def parse_lchuv(s: Scanner) -> Color:
    s.keyword("cielchuv(", "lchuv(")
    (l, c, h), alpha = _either_arguments(s, [_lightness, _chroma, _angle])
    return Color.from_lchuv(l, c, h, alpha)


def parse_hcl(s: Scanner) -> Color:
    """hcl(h, c, l): LChuv written hue first."""
    s.keyword("hcl(")
    (h, c, l), alpha = _either_arguments(s, [_angle, _chroma, _lightness])
    return Color.from_lchuv(l, c, h, alpha)


# =============================================================================
# Oklab
# =============================================================================

def parse_oklab(s: Scanner) -> Color:
    """oklab(L a b / alpha) with L% of 1 and a/b% of 0.4."""
    s.keyword("oklab(")
    (l, a, b), alpha = _modern_arguments(s, [_unit, _scaled(0.4), _scaled(0.4)])
    return Color.from_oklaba(l, a, b, alpha)


def parse_oklch(s: Scanner) -> Color:
    s.keyword("oklch(")
    (l, c, h), alpha = _modern_arguments(s, [_unit, _non_negative(_scaled(0.4)), _angle])
    return Color.from_oklcha(l, c, h, alpha)


# =============================================================================
# CMYK, XYZ
# =============================================================================

def parse_device_cmyk(s: Scanner) -> Color:
    """device-cmyk(c m y k [/ alpha]); the alpha is read and dropped."""
    s.keyword("device-cmyk(", "cmyk(")
    (c, m, y, k), _ = _modern_arguments(s, [_unit] * 4)
    return Color.from_cmyk(c, m, y, k)


def parse_xyz(s: Scanner) -> Color:
    """xyz(x, y, z) in either style; 100% = 1.0."""
    s.keyword("ciexyz(", "xyz(")
    (x, y, z), alpha = _either_arguments(s, [_unit] * 3)
    return Color.from_xyz(x, y, z, alpha)


# =============================================================================
# Fallbacks
# =============================================================================

def parse_named(s: Scanner) -> Color:
    name = s.pattern(_NAME_RE)
    color = lookup_named(name)
    if color is None:
        raise NoMatch("named color")
    return color


def _bare_triple(s: Scanner, channel: Channel) -> tuple[list[float], float]:
    values, kind = _legacy_channels(s, [channel] * 3)
    alpha = s.optional(_legacy_alpha, s, kind)
    return values, 1.0 if alpha is None else alpha


def parse_bare_numeric_rgb(s: Scanner) -> Color:
    """255, 0, 153 or 255 0 153 without a function name."""
    (r, g, b), alpha = _bare_triple(s, _number)
    return Color.from_rgba(r, g, b, alpha)


def parse_bare_percentage_rgb(s: Scanner) -> Color:
    (r, g, b), alpha = _bare_triple(s, _percentage)
    return Color.from_rgba_float(r, g, b, alpha)


# Tried in this order; the first rule that consumes the whole input wins.
GRAMMARS: tuple[tuple[str, Rule], ...] = (
    ("hex", parse_hex),
    ("css numeric rgb", parse_css_numeric_rgb),
    ("css percentage rgb", parse_css_percentage_rgb),
    ("numeric rgb", parse_numeric_rgb),
    ("percentage rgb", parse_percentage_rgb),
    ("css hsl", parse_css_hsl),
    ("hsl", parse_hsl),
    ("color()", parse_css_color_function),
    ("css hsv", parse_css_hsv),
    ("hsv", parse_hsv),
    ("css hwb", parse_css_hwb),
    ("hwb", parse_hwb),
    ("gray", parse_gray),
    ("lab65", parse_css_lab65),
    ("lab", parse_lab),
    ("lch65", parse_css_lch65),
    ("lch", parse_lch),
    ("luv", parse_luv),
    ("lchuv", parse_lchuv),
    ("hcl", parse_hcl),
    ("oklab", parse_oklab),
    ("oklch", parse_oklch),
    ("device-cmyk", parse_device_cmyk),
    ("xyz", parse_xyz),
    ("named", parse_named),
    ("bare numeric rgb", parse_bare_numeric_rgb),
    ("bare percentage rgb", parse_bare_percentage_rgb),
)


def parse_color(text: str) -> Optional[Color]:
    """
    Parse a color from any supported notation.

    Leading and trailing whitespace is ignored and keywords are matched
    case-insensitively.

    Returns:
        The parsed Color, or None if no notation matches the whole text.
    """
    text = text.strip()
    for name, rule in GRAMMARS:
        s = Scanner(text)
        try:
            color = rule(s)
        except NoMatch:
            continue
        if s.at_end():
            logger.debug("Parsed %r as %s", text, name)
            return color

    logger.debug("No color notation matches %r", text)
    return None
